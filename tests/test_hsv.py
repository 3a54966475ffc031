"""
Tests for HSV to Color conversion.
"""

import math

import pytest

from colorcodec import Color, from_hsv, normalize_hue


class TestNormalizeHue:
    """Tests for normalize_hue."""

    @pytest.mark.parametrize(
        "hue, expected",
        [
            (0, 0.0),
            (359.5, 359.5),
            (360, 0.0),
            (390, 30.0),
            (-30, 330.0),
            (-360, 0.0),
            (-720.5, 359.5),
            (1080 + 45, 45.0),
        ],
    )
    def test_wraps(self, hue, expected):
        """Test hue is reduced into [0, 360)."""
        assert normalize_hue(hue) == expected

    def test_tiny_negative_folds_to_zero(self):
        """Test a negative hue that rounds to 360 becomes 0."""
        assert normalize_hue(-1e-20) == 0.0

    def test_huge_magnitude(self):
        """Test very large hues stay in range."""
        assert 0.0 <= normalize_hue(1e300) < 360.0
        assert 0.0 <= normalize_hue(-1e300) < 360.0

    @pytest.mark.parametrize("hue", [math.nan, math.inf, -math.inf])
    def test_non_finite(self, hue):
        """Test non-finite hue maps to 0."""
        assert normalize_hue(hue) == 0.0


class TestFromHsv:
    """Tests for from_hsv."""

    def test_primaries(self):
        """Test fully saturated primaries."""
        assert from_hsv(0, 1, 1) == Color(255, 0, 0)
        assert from_hsv(120, 1, 1) == Color(0, 255, 0)
        assert from_hsv(240, 1, 1) == Color(0, 0, 255)

    def test_secondaries(self):
        """Test fully saturated secondaries."""
        assert from_hsv(60, 1, 1) == Color(255, 255, 0)
        assert from_hsv(180, 1, 1) == Color(0, 255, 255)
        assert from_hsv(300, 1, 1) == Color(255, 0, 255)

    def test_sector_midpoint(self):
        """Test a hue inside a sector uses the fractional position."""
        # sector 3: R=pv, G=qv, B=value
        assert from_hsv(210, 0.5, 1).rgb == (127, 191, 255)

    @pytest.mark.parametrize("hue", [0, 45, 123.4, 300, -90, 1000])
    @pytest.mark.parametrize("value", [1.0, 0.5, 0.25])
    def test_zero_saturation_is_gray(self, hue, value):
        """Test zero saturation gives gray independent of hue."""
        level = int(value * 255)
        assert from_hsv(hue, 0, value).rgb == (level, level, level)

    def test_negative_saturation_is_gray(self):
        """Test negative saturation is treated as gray."""
        assert from_hsv(90, -0.5, 1).rgb == (255, 255, 255)

    @pytest.mark.parametrize("hue, saturation", [(0, 1), (200, 0.3), (-50, 5)])
    @pytest.mark.parametrize("value", [0, -1, -0.001])
    def test_non_positive_value_is_black(self, hue, saturation, value):
        """Test value <= 0 gives black."""
        assert from_hsv(hue, saturation, value).rgb == (0, 0, 0)

    def test_hue_wraparound(self):
        """Test hues equal modulo 360 give the same color."""
        assert from_hsv(-30, 1, 1) == from_hsv(330, 1, 1)
        assert from_hsv(390, 1, 1) == from_hsv(30, 1, 1)
        assert from_hsv(690, 1, 1) == from_hsv(330, 1, 1)
        assert from_hsv(360, 1, 1) == from_hsv(0, 1, 1)

    def test_truncates_not_rounds(self):
        """Test scaled channels are truncated toward zero."""
        # 0.5 * 255 = 127.5
        assert from_hsv(0, 0, 0.5).red == 127

    def test_alpha_opaque(self):
        """Test result is fully opaque."""
        assert from_hsv(77, 0.3, 0.9).alpha == 255

    @pytest.mark.parametrize(
        "hue, saturation, value",
        [
            (0, 2, 1),
            (100, 1, 3),
            (200, -3, 2),
            (359.999999, 1.5, 1.5),
            (-1e-12, 1, 1),
            (1e300, 0.5, 0.5),
            (45, 1, math.inf),
            (math.nan, 0.5, 0.5),
        ],
    )
    def test_out_of_domain_clamped(self, hue, saturation, value):
        """Test out-of-domain inputs still give valid channels."""
        color = from_hsv(hue, saturation, value)
        assert all(0 <= channel <= 255 for channel in color.rgba)

    def test_returns_fresh_values(self):
        """Test equal inputs give equal colors."""
        assert from_hsv(12, 0.4, 0.8) == from_hsv(12, 0.4, 0.8)
