"""
Tests for utility functions in todo.utils module.
"""

from datetime import datetime, timedelta, timezone

from todo.utils import format_date, parse_date, parse_int


class TestParseDate:
    """Tests for the parse_date function."""

    def test_parse_calendar_date(self):
        """A plain date is midnight UTC."""
        result = parse_date("2025-12-02")
        assert result == datetime(2025, 12, 2, tzinfo=timezone.utc)

    def test_parse_rfc3339_utc(self):
        result = parse_date("2025-12-02T10:00:00Z")
        assert result == datetime(2025, 12, 2, 10, 0, 0, tzinfo=timezone.utc)
        assert result.date() == datetime(2025, 12, 2).date()

    def test_parse_rfc3339_offset(self):
        result = parse_date("2025-12-02T23:30:00-05:00")
        assert result.utcoffset() == timedelta(hours=-5)
        assert format_date(result) == "2025-12-02"

    def test_parse_rfc3339_fractional_seconds(self):
        result = parse_date("2025-12-02T10:00:00.250Z")
        assert result.microsecond == 250000

    def test_parse_nanosecond_fraction(self):
        """Digits past microseconds are dropped."""
        result = parse_date("2025-12-02T10:00:00.123456789Z")
        assert result == datetime(2025, 12, 2, 10, 0, 0, 123456, tzinfo=timezone.utc)

    def test_parse_fraction_with_offset(self):
        result = parse_date("2025-12-02T10:00:00.5+02:00")
        assert result.microsecond == 500000
        assert result.utcoffset() == timedelta(hours=2)

    def test_parse_too_many_fraction_digits(self):
        assert parse_date("2025-12-02T10:00:00.1234567890Z") is None

    def test_parse_unpadded_date(self):
        assert parse_date("2025-1-2") is None
        assert parse_date("2025-12-02T1:00:00Z") is None

    def test_parse_trailing_newline(self):
        assert parse_date("2025-12-02\n") is None

    def test_parse_timestamp_without_zone(self):
        """Timestamps need a zone designator."""
        assert parse_date("2025-12-02T10:00:00") is None

    def test_parse_invalid_format(self):
        assert parse_date("not-a-date") is None

    def test_parse_empty_string(self):
        assert parse_date("") is None

    def test_parse_impossible_date(self):
        assert parse_date("2025-02-30") is None

    def test_parse_other_layout(self):
        assert parse_date("02/12/2025") is None


class TestParseInt:

    def test_parse_int(self):
        assert parse_int("42") == 42

    def test_parse_int_with_sign(self):
        assert parse_int("+7") == 7

    def test_rejects_padding_and_non_ascii_digits(self):
        for value in (" 12 ", "1_000", "\uff11\uff12", "12\n"):
            assert parse_int(value) is None, value

    def test_parse_negative(self):
        assert parse_int("-3") == -3

    def test_parse_not_a_number(self):
        assert parse_int("abc") is None
        assert parse_int("") is None
        assert parse_int("1.5") is None


class TestFormatDate:

    def test_format_date(self):
        assert format_date(datetime(2024, 12, 31, tzinfo=timezone.utc)) == "2024-12-31"

    def test_format_uses_own_timezone(self):
        date = datetime(2025, 12, 2, 1, 0, tzinfo=timezone(timedelta(hours=3)))
        assert format_date(date) == "2025-12-02"
