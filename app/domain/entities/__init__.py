"""Domain entities exposed by the application."""

from .crime import Clock, Crime, IdFactory

__all__ = [
    "Clock",
    "Crime",
    "IdFactory",
]
