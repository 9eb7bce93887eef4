"""Conversions between domain field types and primitive column values.

The storage backend only understands integers and text. Dates are stored as
epoch milliseconds and identifiers as their canonical UUID string. Every
converter is a pure function and maps ``None`` to ``None``, except
:func:`to_uuid`, which rejects a missing value.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Final
from uuid import UUID

from app.utils import EPOCH, ensure_utc

_ONE_MILLISECOND: Final[timedelta] = timedelta(milliseconds=1)

# Whole milliseconds representable as an aware UTC datetime (years 1 to 9999).
MIN_EPOCH_MILLIS: Final[int] = (
    datetime.min.replace(tzinfo=timezone.utc) - EPOCH
) // _ONE_MILLISECOND
MAX_EPOCH_MILLIS: Final[int] = (
    datetime.max.replace(tzinfo=timezone.utc) - EPOCH
) // _ONE_MILLISECOND


class InvalidIdentifierError(ValueError):
    """Raised when stored text cannot be parsed into a UUID."""


def from_date(date: datetime | None) -> int | None:
    """Return ``date`` as whole milliseconds since the Unix epoch."""

    if date is None:
        return None
    if date.tzinfo is None:
        date = ensure_utc(date)
    # Aware subtraction applies the offset without converting the value.
    return (date - EPOCH) // _ONE_MILLISECOND


def to_date(millis_since_epoch: int | None) -> datetime | None:
    """Return the aware UTC datetime for ``millis_since_epoch``.

    Values outside the range a ``datetime`` can hold are clamped to
    :data:`MIN_EPOCH_MILLIS` or :data:`MAX_EPOCH_MILLIS`.
    """

    if millis_since_epoch is None:
        return None
    clamped = min(max(millis_since_epoch, MIN_EPOCH_MILLIS), MAX_EPOCH_MILLIS)
    return EPOCH + timedelta(milliseconds=clamped)


def to_uuid(value: str | None) -> UUID:
    """Parse ``value`` into a :class:`~uuid.UUID`.

    A missing value is not a valid identifier and raises the same error as
    malformed text.
    """

    if value is None:
        raise InvalidIdentifierError("Identifier text is required")
    try:
        return UUID(value)
    except (TypeError, ValueError, AttributeError) as exc:
        msg = f"'{value}' is not a valid identifier"
        raise InvalidIdentifierError(msg) from exc


def from_uuid(value: UUID | None) -> str | None:
    """Return the canonical hyphenated form of ``value``."""

    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class TypeConverter:
    """Pair of functions moving a rich type in and out of a storage type."""

    storage_type: type
    to_storage: Callable[[Any], Any]
    from_storage: Callable[[Any], Any]


TYPE_CONVERTERS: Final[dict[type, TypeConverter]] = {
    datetime: TypeConverter(storage_type=int, to_storage=from_date, from_storage=to_date),
    UUID: TypeConverter(storage_type=str, to_storage=from_uuid, from_storage=to_uuid),
}


def converter_for(rich_type: type) -> TypeConverter:
    """Return the registered converter for ``rich_type``."""

    try:
        return TYPE_CONVERTERS[rich_type]
    except KeyError as exc:
        msg = f"No storage converter registered for {rich_type.__name__}"
        raise TypeError(msg) from exc


__all__ = [
    "InvalidIdentifierError",
    "MAX_EPOCH_MILLIS",
    "MIN_EPOCH_MILLIS",
    "TYPE_CONVERTERS",
    "TypeConverter",
    "converter_for",
    "from_date",
    "from_uuid",
    "to_date",
    "to_uuid",
]
