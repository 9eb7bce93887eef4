"""Utility helpers for reusable functionality."""

from .datetime import EPOCH, ensure_utc, utc_now

__all__ = [
    "EPOCH",
    "ensure_utc",
    "utc_now",
]
