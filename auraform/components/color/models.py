"""
Color component - Data models.

RGB and HSL value types plus the parse error raised for bad hex input.
"""

from __future__ import annotations

from dataclasses import dataclass

# --- Value Types ---


@dataclass(frozen=True)
class RGBColor:
    """RGB color with integer channels.

    Channels are nominally 0-255 but may fall outside that range after
    arithmetic; rgb_to_hex clamps them on the way out.
    """

    r: int
    g: int
    b: int


@dataclass(frozen=True)
class HSLColor:
    """HSL color: hue in degrees, saturation and lightness in percent.

    rgb_to_hsl always yields whole numbers; shifted shadow colors may carry
    a fractional lightness when the intensity is fractional.
    """

    h: float
    s: float
    l: float  # noqa: E741


# --- Error Types ---


class InvalidFormatError(ValueError):
    """Hex color string could not be parsed."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid hex color: {value}")
