"""
Contrast component - WCAG luminance and contrast ratio.

Functional Core - pure functions, no I/O.
See https://www.w3.org/TR/WCAG20/#relativeluminancedef
"""

from __future__ import annotations

from auraform.components.color import RGBColor, hex_to_rgb

from .models import ContrastCheck

# ═══════════════════════════════════════════════════════════════════════════
# THRESHOLDS
# WCAG 2.x AA: 4.5:1 for normal text, 3:1 for large text/UI
# ═══════════════════════════════════════════════════════════════════════════

MIN_SHADOW_CONTRAST = 3.0
"""Minimum light-shadow vs. background ratio before a border is injected."""

WCAG_AA_NORMAL_TEXT = 4.5
WCAG_AA_LARGE_TEXT = 3.0


def _linearize(channel: int) -> float:
    c_srgb = channel / 255
    if c_srgb <= 0.03928:
        return c_srgb / 12.92
    return float(((c_srgb + 0.055) / 1.055) ** 2.4)


def relative_luminance(rgb: RGBColor) -> float:
    """
    Calculate relative luminance of an RGB color.

    Formula: L = 0.2126 * R + 0.7152 * G + 0.0722 * B
    Where R, G, B are sRGB values normalized and linearized.

    Returns:
        Luminance from 0.0 (black) to 1.0 (white)
    """
    return 0.2126 * _linearize(rgb.r) + 0.7152 * _linearize(rgb.g) + 0.0722 * _linearize(rgb.b)


def contrast_ratio(color1: str, color2: str) -> float:
    """
    Calculate WCAG contrast ratio between two hex colors.

    Argument order does not matter.

    Returns:
        Contrast ratio (1.0 to 21.0)

    Raises:
        InvalidFormatError: If either color is not a valid hex string
    """
    lum1 = relative_luminance(hex_to_rgb(color1))
    lum2 = relative_luminance(hex_to_rgb(color2))

    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)

    return (lighter + 0.05) / (darker + 0.05)


def check_text_contrast(
    text_color: str,
    surface_color: str,
    is_large_text: bool = False,
) -> ContrastCheck:
    """
    Measure a text color against the surface it sits on.

    Large text (>= 18pt, or >= 14pt bold) only needs 3:1 under AA; body
    text needs 4.5:1. The ratio is measured once and carried on the result.
    """
    threshold = WCAG_AA_LARGE_TEXT if is_large_text else WCAG_AA_NORMAL_TEXT
    return ContrastCheck(
        foreground=text_color,
        background=surface_color,
        ratio=contrast_ratio(text_color, surface_color),
        threshold=threshold,
        is_large_text=is_large_text,
    )
