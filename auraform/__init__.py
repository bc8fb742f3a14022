"""
auraform - Neumorphic design tokens from a single base color.

Components (each depends only on the ones above it):

- components/color/     hex <-> RGB <-> HSL conversion
- components/contrast/  WCAG relative luminance and contrast ratio
- components/tokens/    token derivation, shadow strings, CSS variables

Shell:

- rules/       YAML configuration (pydantic-validated)
- app_shell/   command-line interface

Usage:
    from auraform import get_neumorphic_tokens, TokenOptions

    tokens = get_neumorphic_tokens("#e0e0e0", TokenOptions(intensity=20))
    tokens.to_dict()
"""

__version__ = "0.1.0"

from auraform.components.color import (
    HSLColor,
    InvalidFormatError,
    RGBColor,
    clamp,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
)
from auraform.components.contrast import (
    MIN_SHADOW_CONTRAST,
    ContrastCheck,
    check_text_contrast,
    contrast_ratio,
    relative_luminance,
)
from auraform.components.tokens import (
    ELEVATION_MAP,
    ShadowConfig,
    TokenOptions,
    TokenSet,
    css_declarations,
    css_variables,
    get_neumorphic_tokens,
    pressed_shadow,
    resolve_mode,
    surface_shadow,
)

__all__ = [
    "__version__",
    # color
    "hex_to_rgb",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hex_to_hsl",
    "hsl_to_hex",
    "rgb_to_hex",
    "normalize_hex",
    "clamp",
    "RGBColor",
    "HSLColor",
    "InvalidFormatError",
    # contrast
    "relative_luminance",
    "contrast_ratio",
    "check_text_contrast",
    "ContrastCheck",
    "MIN_SHADOW_CONTRAST",
    # tokens
    "get_neumorphic_tokens",
    "resolve_mode",
    "TokenOptions",
    "TokenSet",
    "surface_shadow",
    "pressed_shadow",
    "css_variables",
    "css_declarations",
    "ShadowConfig",
    "ELEVATION_MAP",
]
