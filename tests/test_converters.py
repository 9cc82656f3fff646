"""Edge cases of the pure conversion functions."""

from datetime import datetime, timedelta

import pytest

from sheet_powertools import converters, get_culture


@pytest.fixture
def en_us():
    return get_culture("en-US")


class TestBlank:
    """Test blank detection."""

    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_blank(self, value):
        """Test that None, empty and whitespace text are blank."""
        assert converters.is_blank(value)

    def test_dashes_only_when_asked(self):
        """Test that dash placeholders are blank only on request."""
        assert not converters.is_blank("--")
        assert converters.is_blank("--", dashes_are_blank=True)

    def test_zero_is_not_blank(self):
        """Test that numeric zero is data."""
        assert not converters.is_blank(0)


class TestIntegers:
    """Test integer conversion edge cases."""

    def test_bool_is_one_or_zero(self):
        """Test that True converts to 1."""
        assert converters.to_integer(True) == 1

    def test_infinite_float(self):
        """Test that infinity is rejected."""
        with pytest.raises(ValueError):
            converters.to_integer(float("inf"))

    def test_bounds(self):
        """Test that values outside the bounds are rejected."""
        with pytest.raises(ValueError, match="outside"):
            converters.to_integer(-(2**15) - 1, converters.INT16_RANGE)


class TestFloats:
    """Test float conversion edge cases."""

    def test_rejects_dates(self, en_us):
        """Test that dates are not numbers."""
        with pytest.raises(ValueError):
            converters.to_float(datetime(2024, 1, 1), en_us)

    def test_exponent(self, en_us):
        """Test scientific notation."""
        assert converters.to_float("1.5e3", en_us) == 1500.0


class TestSerialDates:
    """Test serial day-number conversion."""

    def test_fraction_below_one_uses_epoch(self, en_us):
        """Test that a fraction below one is a time on the epoch day."""
        assert converters.from_serial(0.25, en_us) == datetime(1899, 12, 30, 6, 0)

    def test_dates_are_not_serials(self, en_us):
        """Test that native dates are rejected."""
        with pytest.raises(ValueError):
            converters.from_serial(datetime(2024, 1, 1), en_us)


class TestDurations:
    """Test duration parsing."""

    def test_bare_integer_is_days(self):
        """Test that bare integer text is a day count."""
        assert converters.to_timedelta("2") == timedelta(days=2)

    @pytest.mark.parametrize("value, days", [(5, 5), (2.0, 2), (-1, -1)])
    def test_whole_numbers_are_days(self, value, days):
        """Test that whole-number cells are day counts like their text."""
        assert converters.to_timedelta(value) == timedelta(days=days)

    @pytest.mark.parametrize("value", [0.25, True, 10**12, "99999999999"])
    def test_rejected_numbers(self, value):
        """Test that fractions, booleans and overflowing counts raise ValueError."""
        with pytest.raises(ValueError):
            converters.to_timedelta(value)

    def test_fraction_of_second(self):
        """Test fractional seconds."""
        assert converters.to_timedelta("00:00:01.5") == timedelta(seconds=1, microseconds=500000)

    @pytest.mark.parametrize("text", ["24:00", "10:60", "1:2:3:4"])
    def test_out_of_range(self, text):
        """Test that out-of-range components are rejected."""
        with pytest.raises(ValueError):
            converters.to_timedelta(text)


class TestMisc:
    """Test the remaining helpers."""

    def test_strip_accents(self):
        """Test accent removal."""
        assert converters.strip_accents("Sí, señor") == "Si, senor"

    @pytest.mark.parametrize(
        "text, expected",
        [("a@b.co", True), ("a.b@c.d.org", True), ("a@b", False), ("a b@c.com", False), ("@b.com", False)],
    )
    def test_is_email(self, text, expected):
        """Test the email format check."""
        assert converters.is_email(text) is expected
