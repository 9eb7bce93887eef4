"""Use cases for managing recorded crimes."""

from .add_crime import add_crime
from .delete_crime import delete_crime
from .get_crime import get_crime
from .list_crimes import list_crimes
from .update_crime import update_crime

__all__ = [
    "add_crime",
    "delete_crime",
    "get_crime",
    "list_crimes",
    "update_crime",
]
