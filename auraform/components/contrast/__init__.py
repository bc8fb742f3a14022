"""
Contrast component - WCAG relative luminance and contrast checks.
"""

from .component import (
    MIN_SHADOW_CONTRAST,
    WCAG_AA_LARGE_TEXT,
    WCAG_AA_NORMAL_TEXT,
    check_text_contrast,
    contrast_ratio,
    relative_luminance,
)
from .models import ContrastCheck

__all__ = [
    "relative_luminance",
    "contrast_ratio",
    "check_text_contrast",
    "ContrastCheck",
    "MIN_SHADOW_CONTRAST",
    "WCAG_AA_NORMAL_TEXT",
    "WCAG_AA_LARGE_TEXT",
]
