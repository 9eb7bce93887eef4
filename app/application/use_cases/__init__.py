"""Aggregate application use cases."""

from .crimes import add_crime, delete_crime, get_crime, list_crimes, update_crime

__all__ = [
    "add_crime",
    "delete_crime",
    "get_crime",
    "list_crimes",
    "update_crime",
]
