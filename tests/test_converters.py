"""Unit tests for the storage converters."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import pytest

from app.infrastructure.converters import (
    MAX_EPOCH_MILLIS,
    MIN_EPOCH_MILLIS,
    TYPE_CONVERTERS,
    InvalidIdentifierError,
    converter_for,
    from_date,
    from_uuid,
    to_date,
    to_uuid,
)

CANONICAL_ID = "123e4567-e89b-12d3-a456-426614174000"


def test_date_scenario_round_trips_through_epoch_millis() -> None:
    """A crime dated at 1700000000000 ms is stored as exactly that integer."""

    date = to_date(1700000000000)

    assert date == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
    assert from_date(date) == 1700000000000
    assert to_date(from_date(date)) == date


def test_date_round_trip_keeps_millisecond_precision() -> None:
    date = datetime(2021, 3, 4, 5, 6, 7, 123456, tzinfo=timezone.utc)

    restored = to_date(from_date(date))

    assert restored == date.replace(microsecond=123000)


def test_dates_before_the_epoch_are_floored() -> None:
    date = datetime(1969, 12, 31, 23, 59, 59, 999500, tzinfo=timezone.utc)

    assert from_date(date) == -1
    assert to_date(-1) == datetime(1969, 12, 31, 23, 59, 59, 999000, tzinfo=timezone.utc)


def test_naive_dates_are_read_as_utc() -> None:
    assert from_date(datetime(1970, 1, 1, 0, 0, 1)) == 1000


def test_offset_dates_are_normalised() -> None:
    plus_one = timezone(timedelta(hours=1))

    assert from_date(datetime(1970, 1, 1, 1, 0, tzinfo=plus_one)) == 0


def test_range_limits_match_datetime_bounds() -> None:
    earliest = datetime.min.replace(tzinfo=timezone.utc)
    latest = datetime.max.replace(tzinfo=timezone.utc)

    assert from_date(earliest) == MIN_EPOCH_MILLIS == -62135596800000
    assert from_date(latest) == MAX_EPOCH_MILLIS == 253402300799999
    assert to_date(MIN_EPOCH_MILLIS) == earliest
    assert to_date(MAX_EPOCH_MILLIS) == latest.replace(microsecond=999000)


@pytest.mark.parametrize("millis", [MAX_EPOCH_MILLIS + 1, 2**62, 2**63 - 1])
def test_millis_after_the_latest_datetime_are_clamped(millis: int) -> None:
    """Oversized stored values still load, pinned to the last representable millisecond."""

    assert to_date(millis) == to_date(MAX_EPOCH_MILLIS)


@pytest.mark.parametrize("millis", [MIN_EPOCH_MILLIS - 1, -(2**62), -(2**63)])
def test_millis_before_the_earliest_datetime_are_clamped(millis: int) -> None:
    assert to_date(millis) == datetime.min.replace(tzinfo=timezone.utc)


def test_offset_dates_at_the_range_edges_do_not_overflow() -> None:
    plus_one = timezone(timedelta(hours=1))
    minus_one = timezone(timedelta(hours=-1))

    assert from_date(datetime.min.replace(tzinfo=plus_one)) == MIN_EPOCH_MILLIS - 3_600_000
    assert from_date(datetime.max.replace(tzinfo=minus_one)) == MAX_EPOCH_MILLIS + 3_600_000
    assert to_date(from_date(datetime.min.replace(tzinfo=plus_one))) == to_date(MIN_EPOCH_MILLIS)


def test_missing_dates_stay_missing() -> None:
    assert from_date(None) is None
    assert to_date(None) is None


def test_uuid_scenario_round_trips_to_identical_text() -> None:
    assert from_uuid(to_uuid(CANONICAL_ID)) == CANONICAL_ID


def test_random_uuid_round_trips() -> None:
    value = uuid4()

    assert to_uuid(from_uuid(value)) == value


def test_uppercase_text_is_canonicalised() -> None:
    assert from_uuid(to_uuid(CANONICAL_ID.upper())) == CANONICAL_ID


def test_missing_uuid_stays_missing_when_stored() -> None:
    assert from_uuid(None) is None


@pytest.mark.parametrize("value", ["not-a-uuid", "", "123e4567-e89b-12d3-a456"])
def test_malformed_text_fails_to_parse(value: str) -> None:
    with pytest.raises(InvalidIdentifierError):
        to_uuid(value)


def test_missing_text_fails_to_parse() -> None:
    """An absent stored identifier is rejected rather than mapped to ``None``."""

    with pytest.raises(InvalidIdentifierError, match="required"):
        to_uuid(None)


def test_parse_error_is_a_value_error() -> None:
    with pytest.raises(ValueError) as exc_info:
        to_uuid("not-a-uuid")

    assert "not-a-uuid" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_converter_table_registers_rich_types() -> None:
    assert set(TYPE_CONVERTERS) == {datetime, UUID}

    date_converter = converter_for(datetime)
    assert date_converter.storage_type is int
    assert date_converter.to_storage is from_date
    assert date_converter.from_storage is to_date

    uuid_converter = converter_for(UUID)
    assert uuid_converter.storage_type is str
    assert uuid_converter.to_storage is from_uuid
    assert uuid_converter.from_storage is to_uuid


def test_unregistered_type_is_rejected() -> None:
    with pytest.raises(TypeError, match="float"):
        converter_for(float)
