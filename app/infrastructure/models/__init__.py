"""ORM models used by the application infrastructure."""

from .crime import CrimeModel

__all__ = [
    "CrimeModel",
]
