"""Unit tests for uptime formatting."""

import pytest

from template_renderers.render_utils.uptime import (
    DEFAULT_UPTIME_LABELS,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    uptime,
)


class TestUptime:
    """Test uptime()."""

    @pytest.mark.parametrize(
        "millis,expected",
        [
            (0, "0 minutes"),
            (1000, "0 minutes"),
            (59000, "0 minutes"),
            (60000, "1 minute"),
            (120000, "2 minutes"),
            (3660000, "1 hour 1 minute"),
            (90000000, "1 day 1 hour"),
            (86399999, "23 hours 59 minutes"),
        ],
    )
    def test_uptime_defaults(self, millis, expected):
        assert uptime(millis, DEFAULT_UPTIME_LABELS) == expected

    @pytest.mark.parametrize("millis", [-1, -5, -MILLIS_PER_DAY])
    def test_uptime_negative_reads_as_zero(self, millis):
        assert uptime(millis) == "0 minutes"

    def test_uptime_without_properties(self):
        assert uptime(60000) == "1 minute"

    def test_uptime_full_decomposition(self):
        """Test units are decomposed coarsest first with fixed-length months."""
        # Arrange
        millis = (
            17 * 365 * MILLIS_PER_DAY
            + 4 * 30 * MILLIS_PER_DAY
            + 2 * 7 * MILLIS_PER_DAY
            + MILLIS_PER_DAY
            + 6 * MILLIS_PER_HOUR
            + 45 * MILLIS_PER_MINUTE
        )

        # Act
        result = uptime(millis)

        # Assert
        assert result == "17 years 4 months 2 weeks 1 day 6 hours 45 minutes"

    def test_uptime_label_overrides(self):
        """Test labels supplied in properties replace the defaults."""
        # Arrange
        properties = {"hour": "h", "hours": "h", "minute": "m", "minutes": "m"}

        # Act
        result = uptime(2 * MILLIS_PER_HOUR + 5 * MILLIS_PER_MINUTE, properties)

        # Assert
        assert result == "2h5m"

    def test_uptime_padded_label_is_stripped(self):
        """Test the result is stripped even with padded labels."""
        assert uptime(0, {"minute": "  minute  "}) == "0 minutes"
        assert uptime(MILLIS_PER_MINUTE, {"minute": "  minute  "}) == "1  minute"

    def test_uptime_partial_overrides_keep_other_defaults(self):
        result = uptime(MILLIS_PER_DAY + MILLIS_PER_MINUTE, {"day": " jour "})
        assert result == "1 jour 1 minute"
