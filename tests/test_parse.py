"""Tests for date parsing: the flexible parser and strict ISO 8601 helpers.

Covers:
    - parse_date / Date.parse format detection
    - Ambiguity handling for numeric day/month-first forms
    - parse_iso8601 / format_iso8601
"""

from __future__ import annotations

import logging

import pytest

from caldate import Date
from caldate.errors import InvalidFormatError, NullInputError, OutOfRangeError
from caldate.format import format_iso8601, parse_iso8601
from caldate.infer import DateOrder, ParseOptions, ParseResult, parse_date


class TestParseOptions:
    """Tests for ParseOptions configuration."""

    def test_default_options(self) -> None:
        assert ParseOptions().date_order is None

    def test_options_are_frozen(self) -> None:
        opts = ParseOptions()
        with pytest.raises(AttributeError):
            opts.date_order = DateOrder.MDY  # type: ignore[misc]

    def test_date_order_values(self) -> None:
        assert DateOrder.MDY.value == "MDY"
        assert DateOrder.DMY.value == "DMY"


class TestParseResult:
    """Tests for the ParseResult dataclass."""

    def test_fields(self) -> None:
        result = parse_date("2024-01-15")
        assert isinstance(result, ParseResult)
        assert result.value == Date(2024, 1, 15)
        assert result.format_detected == "iso_date"

    def test_is_frozen(self) -> None:
        result = parse_date("2024-01-15")
        with pytest.raises(AttributeError):
            result.format_detected = "other"  # type: ignore[misc]


class TestUnambiguousFormats:
    """Tests for formats with a fixed component order."""

    @pytest.mark.parametrize(
        "text, fmt",
        [
            ("2024-01-15", "iso_date"),
            ("20240115", "iso_basic_date"),
            ("2024-01-15T14:30:45", "iso_datetime"),
            ("2024-01-15T14:30", "iso_datetime"),
            ("2024-01-15 14:30:45", "iso_datetime"),
            ("2024-01-15T23:59:59.999999999Z", "iso_datetime"),
            ("2024-01-15T00:00:00+05:30", "iso_datetime"),
            ("2024-01-15t08:00:00-0800", "iso_datetime"),
            ("2024/01/15", "year_first_date"),
            ("2024/1/15", "year_first_date"),
            ("2024-1-15", "year_first_date"),
            ("2024.01.15", "year_first_date"),
            ("Jan 15, 2024", "named_month_mdy"),
            ("January 15 2024", "named_month_mdy"),
            ("jan. 15, 2024", "named_month_mdy"),
            ("15 Jan 2024", "named_month_dmy"),
            ("15 January, 2024", "named_month_dmy"),
            ("15 jan 2024", "named_month_dmy"),
        ],
    )
    def test_formats(self, text: str, fmt: str) -> None:
        result = parse_date(text)
        assert result.value == Date(2024, 1, 15)
        assert result.format_detected == fmt

    def test_surrounding_whitespace(self) -> None:
        assert Date.parse("  2024-01-15\n") == Date(2024, 1, 15)

    def test_abbreviated_september(self) -> None:
        assert Date.parse("Sept 3, 2024") == Date(2024, 9, 3)
        assert Date.parse("3 Sep 2024") == Date(2024, 9, 3)

    def test_may(self) -> None:
        assert Date.parse("May 1, 2024") == Date(2024, 5, 1)

    def test_year_first_dash_single_digits(self) -> None:
        assert Date.parse("2024-1-5") == Date(2024, 1, 5)
        assert Date.parse("2024.1.5") == Date(2024, 1, 5)
        with pytest.raises(InvalidFormatError):
            Date.parse("2024-1/5")

    def test_datetime_time_is_discarded(self) -> None:
        assert Date.parse("2024-12-31T23:59:59-12:00") == Date(2024, 12, 31)


class TestNumericFormats:
    """Tests for numeric day/month-first forms."""

    def test_only_one_valid_reading(self) -> None:
        """13 cannot be a month, so 13/01 is the 13th of January."""
        result = parse_date("13/01/2024")
        assert result.value == Date(2024, 1, 13)
        assert result.format_detected == "numeric_date"
        assert Date.parse("01/13/2024") == Date(2024, 1, 13)

    def test_both_readings_agree(self) -> None:
        assert Date.parse("05/05/2024") == Date(2024, 5, 5)

    def test_ambiguous_rejected(self) -> None:
        with pytest.raises(InvalidFormatError, match="ambiguous date '01/02/2024'"):
            Date.parse("01/02/2024")

    def test_ambiguous_message_lists_readings(self) -> None:
        with pytest.raises(InvalidFormatError, match="2024-01-02 or 2024-02-01"):
            parse_date("1.2.2024")

    def test_only_one_reading_exists_in_calendar(self) -> None:
        """02/30 is not a date, so 30/02 is not either; 02/29 vs 29/02 in a leap year."""
        assert Date.parse("29/02/2024") == Date(2024, 2, 29)
        assert Date.parse("02-29-2024") == Date(2024, 2, 29)

    def test_mdy_order(self) -> None:
        opts = ParseOptions(date_order=DateOrder.MDY)
        assert Date.parse("01/02/2024", opts) == Date(2024, 1, 2)

    def test_dmy_order(self) -> None:
        opts = ParseOptions(date_order=DateOrder.DMY)
        assert Date.parse("01/02/2024", opts) == Date(2024, 2, 1)
        assert Date.parse("01.02.2024", opts) == Date(2024, 2, 1)

    def test_explicit_order_does_not_fall_back(self) -> None:
        opts = ParseOptions(date_order=DateOrder.MDY)
        with pytest.raises(InvalidFormatError, match="month must be between"):
            Date.parse("13/01/2024", opts)

    def test_no_valid_reading(self) -> None:
        with pytest.raises(InvalidFormatError, match="invalid date '13/13/2024'"):
            Date.parse("13/13/2024")

    def test_mixed_separators_rejected(self) -> None:
        with pytest.raises(InvalidFormatError):
            Date.parse("01/02-2024")


class TestParseErrors:
    """Tests for parse failures."""

    def test_none(self) -> None:
        with pytest.raises(NullInputError):
            Date.parse(None)  # type: ignore[arg-type]

    def test_non_string(self) -> None:
        with pytest.raises(TypeError, match="expected str"):
            Date.parse(20240115)  # type: ignore[arg-type]

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_empty(self, text: str) -> None:
        with pytest.raises(InvalidFormatError, match="empty"):
            Date.parse(text)

    @pytest.mark.parametrize(
        "text",
        [
            "not a date",
            "2024-01",
            "24-01-15",
            "01/15/24",
            "2024-01-15T25:00:00",
            "2024-01-15T12:60",
            "2024-01-15T12:00:00+24:00",
            "Foo 15, 2024",
            "15 Smarch 2024",
            "2024-01-15 extra",
            "+2024-01-15",
        ],
    )
    def test_unrecognized(self, text: str) -> None:
        with pytest.raises(InvalidFormatError):
            Date.parse(text)

    @pytest.mark.parametrize(
        "text, reason",
        [
            ("2023-02-29", "day must be between 1 and 28"),
            ("2023-02-30", "day must be between 1 and 28"),
            ("2024-13-01", "month must be between"),
            ("0000-01-01", "year must be between"),
            ("Feb 30, 2024", "day must be between 1 and 29"),
            ("2024/04/31", "day must be between 1 and 30"),
        ],
    )
    def test_nonexistent_date_is_format_error(self, text: str, reason: str) -> None:
        """Well-formed text naming no real date is reported as a format error."""
        with pytest.raises(InvalidFormatError, match=reason) as excinfo:
            Date.parse(text)
        assert isinstance(excinfo.value.__cause__, OutOfRangeError)

    def test_nonexistent_date_is_not_range_error(self) -> None:
        with pytest.raises(InvalidFormatError) as excinfo:
            parse_date("2023-02-30")
        assert not isinstance(excinfo.value, OutOfRangeError)


class TestParseLogging:
    """Tests for debug logging in the parser."""

    def test_logs_detected_format(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="caldate.infer"):
            parse_date("Jan 15, 2024")
        assert "named_month_mdy" in caplog.text

    def test_logs_ambiguity(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="caldate.infer"):
            with pytest.raises(InvalidFormatError):
                parse_date("03/04/2024")
        assert "ambiguous" in caplog.text


class TestIso8601Helpers:
    """Tests for parse_iso8601 and format_iso8601."""

    def test_parse(self) -> None:
        assert parse_iso8601("2024-01-15") == Date(2024, 1, 15)

    def test_parse_strips_whitespace(self) -> None:
        assert parse_iso8601(" 0001-01-01 ") == Date.MIN

    def test_parse_is_strict(self) -> None:
        with pytest.raises(InvalidFormatError):
            parse_iso8601("Jan 15, 2024")
        with pytest.raises(InvalidFormatError):
            parse_iso8601("20240115")

    def test_parse_empty(self) -> None:
        with pytest.raises(InvalidFormatError, match="empty"):
            parse_iso8601("  ")

    def test_parse_nonexistent_date(self) -> None:
        with pytest.raises(InvalidFormatError, match="invalid date '2023-02-30'"):
            parse_iso8601("2023-02-30")

    def test_parse_none(self) -> None:
        with pytest.raises(NullInputError):
            parse_iso8601(None)  # type: ignore[arg-type]

    def test_format(self) -> None:
        assert format_iso8601(Date(987, 6, 5)) == "0987-06-05"

    def test_format_rejects_other_types(self) -> None:
        import datetime

        with pytest.raises(TypeError, match="expected Date"):
            format_iso8601(datetime.date(2024, 1, 15))  # type: ignore[arg-type]

    def test_round_trip(self) -> None:
        for text in ["0001-01-01", "2024-02-29", "9999-12-31"]:
            assert format_iso8601(parse_iso8601(text)) == text
