"""Tests for caldate.convert timestamp helpers."""

from __future__ import annotations

import datetime

import pytest

from caldate import Date
from caldate.convert import from_timestamp, to_pydate, to_timestamp
from caldate.errors import NullInputError, OutOfRangeError


class TestFromTimestamp:
    """Tests for from_timestamp()."""

    def test_truncates_datetime(self) -> None:
        assert from_timestamp(datetime.datetime(2024, 1, 15, 18, 45, 3)) == Date(2024, 1, 15)

    def test_accepts_date(self) -> None:
        assert from_timestamp(datetime.date(2024, 1, 15)) == Date(2024, 1, 15)

    def test_stdlib_limits(self) -> None:
        assert from_timestamp(datetime.datetime.min) == Date.MIN
        assert from_timestamp(datetime.datetime.max) == Date.MAX

    def test_none(self) -> None:
        with pytest.raises(NullInputError):
            from_timestamp(None)  # type: ignore[arg-type]

    def test_out_of_range_components(self) -> None:
        class FarFuture:
            year, month, day = 10000, 1, 1

        with pytest.raises(OutOfRangeError):
            from_timestamp(FarFuture())  # type: ignore[arg-type]


class TestToTimestamp:
    """Tests for to_timestamp() and to_pydate()."""

    def test_midnight(self) -> None:
        assert to_timestamp(Date(2024, 1, 15)) == datetime.datetime(2024, 1, 15)

    def test_pydate(self) -> None:
        assert to_pydate(Date.MAX) == datetime.date.max

    def test_round_trip(self) -> None:
        for value in (Date.MIN, Date(2024, 2, 29), Date.MAX):
            assert from_timestamp(to_timestamp(value)) == value
