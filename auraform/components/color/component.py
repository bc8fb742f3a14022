"""
Color component - Conversions between hex, RGB and HSL.

Functional Core - pure functions, no I/O.

hex <-> RGB is exact. RGB <-> HSL rounds h/s/l to integers, so a round
trip through HSL may drift by a unit per channel.
"""

from __future__ import annotations

import math
import re

from .models import HSLColor, InvalidFormatError, RGBColor

HEX_DIGITS_PATTERN = re.compile(r"[0-9a-fA-F]{6}")


def _round(value: float) -> int:
    """Round half away from zero (Python's round() is half-to-even)."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def clamp(value: float, min_value: float, max_value: float) -> float:
    """Restrict value to [min_value, max_value]. Requires min_value <= max_value."""
    return min(max(value, min_value), max_value)


# --- Hex <-> RGB ---


def hex_to_rgb(hex_color: str) -> RGBColor:
    """
    Parse a hex color string to RGB.

    Accepts #RGB and #RRGGBB, with or without the leading '#', in any case.

    Args:
        hex_color: Hex color string

    Returns:
        RGBColor with channels in 0-255

    Raises:
        InvalidFormatError: If the string is not 3 or 6 hex digits
    """
    cleaned = hex_color[1:] if hex_color.startswith("#") else hex_color

    if len(cleaned) == 3:
        cleaned = "".join(c * 2 for c in cleaned)

    if not HEX_DIGITS_PATTERN.fullmatch(cleaned):
        raise InvalidFormatError(hex_color)

    return RGBColor(
        r=int(cleaned[0:2], 16),
        g=int(cleaned[2:4], 16),
        b=int(cleaned[4:6], 16),
    )


def rgb_to_hex(rgb: RGBColor) -> str:
    """
    Convert RGB to a lowercase #rrggbb string.

    Out-of-range channels are clamped to 0-255 here, so callers may pass
    the raw result of shadow arithmetic.
    """

    def to_hex(channel: int) -> str:
        return f"{int(clamp(channel, 0, 255)):02x}"

    return f"#{to_hex(rgb.r)}{to_hex(rgb.g)}{to_hex(rgb.b)}"


def normalize_hex(hex_color: str) -> str:
    """Return the canonical #rrggbb form of an accepted hex input."""
    return rgb_to_hex(hex_to_rgb(hex_color))


# --- RGB <-> HSL ---


def rgb_to_hsl(rgb: RGBColor) -> HSLColor:
    """
    Convert RGB to HSL.

    When two channels tie for the maximum, the first of r, g, b decides
    which hue branch is taken.
    """
    r = rgb.r / 255
    g = rgb.g / 255
    b = rgb.b / 255

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    h = 0.0
    s = 0.0
    lightness = (max_c + min_c) / 2

    if delta != 0:
        if lightness > 0.5:
            s = delta / (2 - max_c - min_c)
        else:
            s = delta / (max_c + min_c)

        if max_c == r:
            h = ((g - b) / delta + (6 if g < b else 0)) / 6
        elif max_c == g:
            h = ((b - r) / delta + 2) / 6
        else:
            h = ((r - g) / delta + 4) / 6

    return HSLColor(
        h=_round(h * 360),
        s=_round(s * 100),
        l=_round(lightness * 100),
    )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: HSLColor) -> RGBColor:
    """Convert HSL to RGB."""
    h = hsl.h / 360
    s = hsl.s / 100
    lightness = hsl.l / 100

    if s == 0:
        value = _round(lightness * 255)
        return RGBColor(r=value, g=value, b=value)

    q = lightness * (1 + s) if lightness < 0.5 else lightness + s - lightness * s
    p = 2 * lightness - q

    return RGBColor(
        r=_round(_hue_to_channel(p, q, h + 1 / 3) * 255),
        g=_round(_hue_to_channel(p, q, h) * 255),
        b=_round(_hue_to_channel(p, q, h - 1 / 3) * 255),
    )


# --- Composites ---


def hex_to_hsl(hex_color: str) -> HSLColor:
    """Convert a hex color to HSL."""
    return rgb_to_hsl(hex_to_rgb(hex_color))


def hsl_to_hex(hsl: HSLColor) -> str:
    """Convert HSL to a hex string."""
    return rgb_to_hex(hsl_to_rgb(hsl))
