"""Tests for byte and duration formatting."""

import pytest

from hostname_mcp.utils.format import format_gigabytes
from hostname_mcp.utils.format import format_hours
from hostname_mcp.utils.format import round_half_up


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.0, 0),
            (0.49, 0),
            (0.5, 1),
            (1.5, 2),
            (2.5, 3),
            (2.4999, 2),
            (15.999, 16),
        ],
    )
    def test_rounds_halves_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_returns_int(self):
        assert isinstance(round_half_up(3.2), int)


class TestFormatGigabytes:
    def test_exact_gibibytes(self):
        assert format_gigabytes(17179869184) == "16 GB"

    def test_rounds_to_nearest(self):
        # 7.6 GiB
        assert format_gigabytes(int(7.6 * 1024**3)) == "8 GB"

    def test_half_rounds_up(self):
        # 2.5 GiB
        assert format_gigabytes(2684354560) == "3 GB"

    def test_small_amount_rounds_to_zero(self):
        assert format_gigabytes(256 * 1024**2) == "0 GB"


class TestFormatHours:
    def test_hour_and_a_half(self):
        assert format_hours(5400) == "2 hours"

    def test_under_half_an_hour(self):
        assert format_hours(1799) == "0 hours"

    def test_fractional_seconds(self):
        assert format_hours(3 * 3600 + 0.25) == "3 hours"

    def test_suffix(self):
        assert format_hours(86400).endswith(" hours")
