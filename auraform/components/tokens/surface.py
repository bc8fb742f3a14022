"""
Tokens component - Surface style strings.

Builds box-shadow values and CSS custom properties from a TokenSet so
consumers can apply the tokens without repeating the shadow geometry.
"""

from __future__ import annotations

import math

from .models import ELEVATION_MAP, ShadowConfig, TokenSet

HIGH_CONTRAST_DISTANCE_SCALE = 1.3
PRESSED_SCALE = 0.6

CSS_VARIABLE_NAMES: dict[str, str] = {
    "--af-bg": "background",
    "--af-light-shadow": "light_shadow",
    "--af-dark-shadow": "dark_shadow",
    "--af-border": "outline",
    "--af-text": "text_color",
    "--af-text-secondary": "text_secondary",
    "--af-border-subtle": "border_subtle",
}


def get_shadow_config(elevation: str) -> ShadowConfig:
    """
    Look up shadow geometry for an elevation level.

    Raises:
        ValueError: If elevation is unknown
    """
    try:
        return ELEVATION_MAP[elevation]
    except KeyError:
        allowed = ", ".join(ELEVATION_MAP)
        raise ValueError(f"Unknown elevation: {elevation!r} (expected one of {allowed})") from None


def _shadow_pair(tokens: TokenSet, distance: int, blur: int, inset: bool) -> str:
    prefix = "inset " if inset else ""
    return (
        f"{prefix}{distance}px {distance}px {blur}px {tokens.dark_shadow}, "
        f"{prefix}-{distance}px -{distance}px {blur}px {tokens.light_shadow}"
    )


def surface_shadow(
    tokens: TokenSet,
    elevation: str = "medium",
    inset: bool = False,
    high_contrast: bool = False,
) -> str:
    """
    Build the box-shadow value for a surface.

    The dark shadow falls bottom-right and the highlight top-left.

    Args:
        tokens: Derived token set
        elevation: "flat", "low", "medium" or "high"
        inset: Render the surface pressed into the background
        high_contrast: Push shadows further out (distance x1.3, rounded up)

    Returns:
        CSS box-shadow value, or "none" for flat surfaces
    """
    config = get_shadow_config(elevation)
    if config.distance == 0 and config.blur == 0:
        return "none"

    distance = config.distance
    if high_contrast:
        distance = math.ceil(distance * HIGH_CONTRAST_DISTANCE_SCALE)

    return _shadow_pair(tokens, distance, config.blur, inset)


def pressed_shadow(tokens: TokenSet, elevation: str = "medium") -> str:
    """Inset box-shadow for the pressed state, at 60% of the resting depth."""
    config = get_shadow_config(elevation)
    if config.distance == 0 and config.blur == 0:
        return "none"

    distance = math.ceil(config.distance * PRESSED_SCALE)
    blur = math.ceil(config.blur * PRESSED_SCALE)
    return _shadow_pair(tokens, distance, blur, inset=True)


def css_variables(tokens: TokenSet) -> dict[str, str]:
    """Map a token set onto --af-* CSS custom properties."""
    return {name: getattr(tokens, attr) for name, attr in CSS_VARIABLE_NAMES.items()}


def css_declarations(tokens: TokenSet, selector: str = ":root") -> str:
    """Render the --af-* custom properties as a CSS rule block."""
    lines = [f"{selector} {{"]
    lines.extend(f"  {name}: {value};" for name, value in css_variables(tokens).items())
    lines.append("}")
    return "\n".join(lines)
