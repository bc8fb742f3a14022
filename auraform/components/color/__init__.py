"""
Color component - Conversions between hex, RGB and HSL color forms.
"""

from .component import (
    clamp,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
)
from .models import HSLColor, InvalidFormatError, RGBColor

__all__ = [
    # Conversions
    "hex_to_rgb",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hex_to_hsl",
    "hsl_to_hex",
    "rgb_to_hex",
    "normalize_hex",
    "clamp",
    # Models
    "RGBColor",
    "HSLColor",
    # Errors
    "InvalidFormatError",
]
