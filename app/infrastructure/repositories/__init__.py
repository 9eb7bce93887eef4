"""Repository implementations for infrastructure layer."""

from .crime_repository import CrimeNotFoundError, CrimeRepository

__all__ = [
    "CrimeNotFoundError",
    "CrimeRepository",
]
