"""
Tokens component - Data models.

Input options, the derived token set, and elevation presets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ColorMode = Literal["light", "dark"]
ModeOption = Literal["light", "dark", "auto"]
Elevation = Literal["flat", "low", "medium", "high"]

DEFAULT_INTENSITY = 15


# --- Input Models ---


@dataclass(frozen=True)
class TokenOptions:
    """Options for token derivation."""

    intensity: float = DEFAULT_INTENSITY
    mode: ModeOption = "auto"


# --- Output Models ---


@dataclass(frozen=True)
class TokenSet:
    """Neumorphic design tokens derived from one base color."""

    mode: ColorMode
    background: str
    light_shadow: str
    dark_shadow: str
    outline: str
    text_color: str
    text_secondary: str
    border_subtle: str

    def to_dict(self) -> dict[str, str]:
        """Flat mapping with the camelCase keys consumers expect."""
        return {
            "mode": self.mode,
            "background": self.background,
            "lightShadow": self.light_shadow,
            "darkShadow": self.dark_shadow,
            "outline": self.outline,
            "textColor": self.text_color,
            "textSecondary": self.text_secondary,
            "borderSubtle": self.border_subtle,
        }


@dataclass(frozen=True)
class SemanticColors:
    """Text and border colors for one color mode."""

    text_color: str
    text_secondary: str
    border_subtle: str


# --- Elevation ---


@dataclass(frozen=True)
class ShadowConfig:
    """Shadow geometry for an elevation level, in pixels."""

    distance: int
    blur: int


ELEVATION_MAP: dict[str, ShadowConfig] = {
    "flat": ShadowConfig(distance=0, blur=0),
    "low": ShadowConfig(distance=3, blur=6),
    "medium": ShadowConfig(distance=6, blur=12),
    "high": ShadowConfig(distance=10, blur=20),
}
