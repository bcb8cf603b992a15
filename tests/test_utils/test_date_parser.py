"""Tests for reference time parsing."""

from datetime import datetime, timezone

import pytest

from weekly_digest.utils.date_parser import parse_as_of


class TestParseAsOf:
    """Test --as-of parsing."""

    def test_utc_timestamp(self) -> None:
        result = parse_as_of("2024-01-15T10:30:00Z")
        assert result == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "value",
        ["2024-01-15", "January 15, 2024", "Jan 15, 2024", "January 15 2024", "2024/01/15"],
    )
    def test_local_dates(self, value: str) -> None:
        """Test that date-only inputs become local midnight."""
        result = parse_as_of(value)

        assert result.tzinfo is not None
        assert result.replace(tzinfo=None) == datetime(2024, 1, 15)

    def test_local_datetime(self) -> None:
        result = parse_as_of("2024-01-15T10:30:00")
        assert result.replace(tzinfo=None) == datetime(2024, 1, 15, 10, 30)
        assert result.tzinfo is not None

    def test_surrounding_whitespace(self) -> None:
        assert parse_as_of("  2024-01-15 ").day == 15

    @pytest.mark.parametrize("value", ["invalid-date", "2024-13-40", ""])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(ValueError, match="Unable to parse date"):
            parse_as_of(value)
