"""
Tests for hwio.common.timeunit module.
"""

import pytest

from hwio.common.timeunit import TimeUnit, to_millis


class TestToMillis:
    """Tests for to_millis conversion."""

    def test_milliseconds(self):
        """Test milliseconds pass through unchanged."""
        assert to_millis(250, TimeUnit.MILLISECONDS) == 250

    def test_seconds(self):
        """Test seconds conversion."""
        assert to_millis(2, TimeUnit.SECONDS) == 2000

    def test_minutes(self):
        """Test minutes conversion."""
        assert to_millis(3, TimeUnit.MINUTES) == 180000

    def test_hours(self):
        """Test one hour is 3,600,000 ms."""
        assert to_millis(1, TimeUnit.HOURS) == 3600000

    @pytest.mark.parametrize("unit", [TimeUnit.NANOSECONDS, TimeUnit.MICROSECONDS, TimeUnit.DAYS])
    def test_unsupported_units(self, unit):
        """Test sub-millisecond and day units are rejected."""
        with pytest.raises(ValueError):
            to_millis(1, unit)

    def test_non_enum_unit(self):
        """Test a plain string is not accepted as a unit."""
        with pytest.raises(ValueError):
            to_millis(1, "seconds")
