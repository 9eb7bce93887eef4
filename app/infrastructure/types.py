"""Custom SQLAlchemy types used by the persistence layer."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy.types import BigInteger, String, TypeDecorator

from app.infrastructure.converters import converter_for

_DATE_CONVERTER = converter_for(datetime)
_UUID_CONVERTER = converter_for(UUID)


class EpochMillis(TypeDecorator[datetime]):
    """Store datetimes as integer milliseconds since the Unix epoch."""

    cache_ok = True
    impl = BigInteger

    def process_bind_param(self, value, dialect):  # type: ignore[override]
        return _DATE_CONVERTER.to_storage(value)

    def process_result_value(self, value, dialect):  # type: ignore[override]
        return _DATE_CONVERTER.from_storage(value)


class UUIDText(TypeDecorator[UUID]):
    """Store UUIDs as their canonical 36 character string."""

    cache_ok = True
    impl = String

    def __init__(self) -> None:
        super().__init__(length=36)

    def process_bind_param(self, value, dialect):  # type: ignore[override]
        if isinstance(value, str):
            # Allows filtering with plain strings, e.g. ``filter_by(id="...")``.
            value = _UUID_CONVERTER.from_storage(value)
        return _UUID_CONVERTER.to_storage(value)

    def process_result_value(self, value, dialect):  # type: ignore[override]
        # NULL is not stored text; only non-null values go through the parser.
        if value is None:
            return None
        return _UUID_CONVERTER.from_storage(value)


__all__ = ["EpochMillis", "UUIDText"]
