"""
Contrast component unit tests.

Tests for WCAG relative luminance, contrast ratio and AA checks.
"""

from __future__ import annotations

import pytest

from auraform.components.color import InvalidFormatError, RGBColor
from auraform.components.contrast import (
    MIN_SHADOW_CONTRAST,
    WCAG_AA_LARGE_TEXT,
    WCAG_AA_NORMAL_TEXT,
    check_text_contrast,
    contrast_ratio,
    relative_luminance,
)


class TestRelativeLuminance:
    """Test relative luminance."""

    def test_black_is_zero(self) -> None:
        assert relative_luminance(RGBColor(0, 0, 0)) == 0

    def test_white_is_one(self) -> None:
        assert relative_luminance(RGBColor(255, 255, 255)) == pytest.approx(1.0)

    def test_red_uses_red_weight(self) -> None:
        """Pure red luminance equals the red coefficient."""
        assert relative_luminance(RGBColor(255, 0, 0)) == pytest.approx(0.2126, abs=1e-4)

    def test_green_weighs_more_than_blue(self) -> None:
        green = relative_luminance(RGBColor(0, 255, 0))
        blue = relative_luminance(RGBColor(0, 0, 255))
        assert green == pytest.approx(0.7152, abs=1e-4)
        assert blue == pytest.approx(0.0722, abs=1e-4)

    def test_dark_channel_uses_linear_segment(self) -> None:
        """Channel values at or below 0.03928 are divided by 12.92."""
        value = relative_luminance(RGBColor(10, 10, 10))
        assert value == pytest.approx((10 / 255) / 12.92)


class TestContrastRatio:
    """Test contrast ratio."""

    def test_black_on_white_is_21(self) -> None:
        assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)

    def test_identical_colors_is_one(self) -> None:
        assert contrast_ratio("#e0e0e0", "#e0e0e0") == pytest.approx(1.0)

    def test_argument_order_does_not_matter(self) -> None:
        assert contrast_ratio("#336699", "#ffcc00") == contrast_ratio("#ffcc00", "#336699")

    def test_shorthand_and_full_forms_match(self) -> None:
        assert contrast_ratio("#fff", "#000") == contrast_ratio("#ffffff", "#000000")

    def test_invalid_color_propagates(self) -> None:
        with pytest.raises(InvalidFormatError):
            contrast_ratio("#zzzzzz", "#ffffff")

    def test_min_shadow_contrast(self) -> None:
        assert MIN_SHADOW_CONTRAST == 3.0


class TestTextContrast:
    """Test text-on-surface AA checks."""

    def test_black_on_white_passes(self) -> None:
        check = check_text_contrast("#000000", "#ffffff")

        assert check.passes is True
        assert check.shortfall == 0.0

    def test_ratio_is_carried_on_result(self) -> None:
        check = check_text_contrast("#336699", "#e0e0e0")
        assert check.ratio == contrast_ratio("#336699", "#e0e0e0")

    def test_keeps_colors_as_given(self) -> None:
        check = check_text_contrast("#333", "#e0e0e0")

        assert check.foreground == "#333"
        assert check.background == "#e0e0e0"

    def test_gray_777_fails_body_text(self) -> None:
        """#777777 on white is just under 4.5:1."""
        check = check_text_contrast("#777777", "#ffffff")

        assert check.threshold == WCAG_AA_NORMAL_TEXT
        assert check.passes is False
        assert check.shortfall == pytest.approx(4.5 - check.ratio)
        assert 0 < check.shortfall < 0.1

    def test_gray_777_passes_large_text(self) -> None:
        check = check_text_contrast("#777777", "#ffffff", is_large_text=True)

        assert check.threshold == WCAG_AA_LARGE_TEXT
        assert check.is_large_text is True
        assert check.passes is True

    def test_invalid_color_raises(self) -> None:
        with pytest.raises(InvalidFormatError):
            check_text_contrast("#ffffff", "white")
