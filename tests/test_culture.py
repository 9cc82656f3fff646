"""Tests for Culture lookup and month names."""

import pytest
from pydantic import ValidationError

from sheet_powertools import Culture, get_culture, register_culture
from sheet_powertools.config import ConfigError, override_settings


class TestGetCulture:
    """Test culture lookup and registration."""

    def test_default_is_spanish(self):
        """Test that es-AR is the default culture."""
        assert get_culture().name == "es-AR"

    def test_default_follows_settings(self):
        """Test that the default follows SHEET_POWERTOOLS_CULTURE."""
        with override_settings(env={"SHEET_POWERTOOLS_CULTURE": "en-US"}):
            assert get_culture().name == "en-US"

    def test_unknown_culture(self):
        """Test that an unknown name raises ConfigError."""
        with pytest.raises(ConfigError, match="Unknown culture 'xx-YY'"):
            get_culture("xx-YY")

    def test_register_culture(self):
        """Test that registered cultures can be looked up."""
        base = get_culture("en-US")
        custom = base.model_copy(update={"name": "en-GB", "short_date_format": "%d/%m/%Y"})
        register_culture(custom)
        assert get_culture("en-GB").short_date_format == "%d/%m/%Y"


class TestCultureModel:
    """Test the Culture model."""

    def test_month_number(self):
        """Test case-insensitive month lookup."""
        culture = get_culture("es-AR")
        assert culture.month_number("Diciembre") == 12
        assert culture.month_number("  enero ") == 1
        assert culture.month_number("smarch") is None

    def test_requires_twelve_months(self):
        """Test that month_names must hold twelve entries."""
        base = get_culture("en-US")
        with pytest.raises(ValidationError):
            Culture(
                **{**base.model_dump(), "month_names": ("January", "February")},
            )

    def test_frozen(self):
        """Test that cultures are immutable."""
        with pytest.raises(ValidationError):
            get_culture("en-US").name = "other"
