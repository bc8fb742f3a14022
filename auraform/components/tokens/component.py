"""
Tokens component - Neumorphic token derivation.

Functional Core - derives shadow pair, outline and semantic colors from a
single base color.

Algorithm:
1. Convert base color to HSL
2. Light shadow: L + intensity, S - 5
3. Dark shadow: L - intensity, S + 10
4. If contrast between light shadow and base is below 3.0:1,
   inject a 1px border at 10% opacity (black on light, white on dark)
5. Text and border colors come from a fixed table keyed by mode
"""

from __future__ import annotations

import logging

from auraform.components.color import HSLColor, clamp, hex_to_hsl, hsl_to_hex
from auraform.components.contrast import MIN_SHADOW_CONTRAST, contrast_ratio

from .models import ColorMode, SemanticColors, TokenOptions, TokenSet

logger = logging.getLogger(__name__)

AUTO_DARK_THRESHOLD = 50

OUTLINE_NONE = "none"
OUTLINE_BY_MODE: dict[str, str] = {
    "light": "1px solid rgba(0, 0, 0, 0.1)",
    "dark": "1px solid rgba(255, 255, 255, 0.1)",
}

SEMANTIC_COLORS: dict[str, SemanticColors] = {
    "dark": SemanticColors(
        text_color="#f0f0f0",
        text_secondary="#a0a0a0",
        border_subtle="rgba(255,255,255,0.12)",
    ),
    "light": SemanticColors(
        text_color="#333333",
        text_secondary="#666666",
        border_subtle="rgba(0,0,0,0.12)",
    ),
}


def resolve_mode(lightness: float, mode: str = "auto") -> ColorMode:
    """
    Resolve the effective color mode.

    "auto" picks dark for lightness below 50 and light otherwise.

    Raises:
        ValueError: If mode is not "light", "dark" or "auto"
    """
    if mode == "auto":
        return "dark" if lightness < AUTO_DARK_THRESHOLD else "light"
    if mode == "light":
        return "light"
    if mode == "dark":
        return "dark"
    raise ValueError(f"Unknown color mode: {mode!r} (expected light, dark or auto)")


def _shift(hsl: HSLColor, saturation_delta: float, lightness_delta: float) -> HSLColor:
    return HSLColor(
        h=hsl.h,
        s=clamp(hsl.s + saturation_delta, 0, 100),
        l=clamp(hsl.l + lightness_delta, 0, 100),
    )


def get_neumorphic_tokens(
    base_color: str,
    options: TokenOptions | None = None,
) -> TokenSet:
    """
    Generate neumorphic design tokens from a base color.

    Args:
        base_color: Background color as hex (#RGB or #RRGGBB)
        options: Intensity and mode; defaults to intensity 15, mode "auto"

    Returns:
        TokenSet; background is base_color exactly as given

    Raises:
        InvalidFormatError: If base_color is not a valid hex string
        ValueError: If options.mode is not a known mode
    """
    if options is None:
        options = TokenOptions()
    intensity = options.intensity

    hsl = hex_to_hsl(base_color)
    mode = resolve_mode(hsl.l, options.mode)

    light_shadow = hsl_to_hex(_shift(hsl, -5, intensity))
    dark_shadow = hsl_to_hex(_shift(hsl, 10, -intensity))

    # Accessibility guardrail: border when the highlight is hard to see
    contrast = contrast_ratio(light_shadow, base_color)
    if contrast < MIN_SHADOW_CONTRAST:
        outline = OUTLINE_BY_MODE[mode]
        logger.debug(
            "Shadow contrast %.2f:1 below %.1f:1 for %s; adding outline",
            contrast,
            MIN_SHADOW_CONTRAST,
            base_color,
        )
    else:
        outline = OUTLINE_NONE

    semantic = SEMANTIC_COLORS[mode]

    return TokenSet(
        mode=mode,
        background=base_color,
        light_shadow=light_shadow,
        dark_shadow=dark_shadow,
        outline=outline,
        text_color=semantic.text_color,
        text_secondary=semantic.text_secondary,
        border_subtle=semantic.border_subtle,
    )
