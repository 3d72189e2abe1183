"""Tests for WCAG relative luminance."""

from __future__ import annotations

import pytest

from contrast_checker.wcag.base import Color
from contrast_checker.wcag.luminance import (
    color_luminance,
    linearize_channel,
    relative_luminance,
)


class TestLinearizeChannel:
    def test_zero(self):
        assert linearize_channel(0) == 0.0

    def test_full(self):
        assert linearize_channel(255) == pytest.approx(1.0)

    def test_linear_segment(self):
        # 10 / 255 = 0.0392 <= 0.03928, so the linear branch applies
        assert linearize_channel(10) == pytest.approx((10 / 255) / 12.92)

    def test_gamma_segment(self):
        # 11 / 255 = 0.0431 > 0.03928
        expected = ((11 / 255 + 0.055) / 1.055) ** 2.4
        assert linearize_channel(11) == pytest.approx(expected)

    def test_monotonic(self):
        values = [linearize_channel(c) for c in range(256)]
        assert values == sorted(values)


class TestRelativeLuminance:
    def test_black_is_zero(self):
        assert relative_luminance(0, 0, 0) == 0.0

    def test_white_is_one(self):
        assert relative_luminance(255, 255, 255) == pytest.approx(1.0)

    def test_channel_weights(self):
        assert relative_luminance(255, 0, 0) == pytest.approx(0.2126)
        assert relative_luminance(0, 255, 0) == pytest.approx(0.7152)
        assert relative_luminance(0, 0, 255) == pytest.approx(0.0722)

    def test_mid_gray(self):
        assert relative_luminance(0x76, 0x76, 0x76) == pytest.approx(0.1812, abs=1e-4)

    def test_in_unit_interval(self):
        for value in (0, 1, 50, 128, 200, 254, 255):
            lum = relative_luminance(value, 255 - value, value // 2)
            assert 0.0 <= lum <= 1.0

    def test_color_wrapper(self):
        assert color_luminance(Color(18, 52, 86)) == relative_luminance(18, 52, 86)
