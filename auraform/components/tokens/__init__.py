"""
Tokens component - Neumorphic design token derivation.

Derives light/dark shadow colors, an accessibility outline and
mode-dependent text colors from a single base color.
"""

from .component import (
    OUTLINE_BY_MODE,
    OUTLINE_NONE,
    SEMANTIC_COLORS,
    get_neumorphic_tokens,
    resolve_mode,
)
from .models import (
    DEFAULT_INTENSITY,
    ELEVATION_MAP,
    ColorMode,
    Elevation,
    ModeOption,
    SemanticColors,
    ShadowConfig,
    TokenOptions,
    TokenSet,
)
from .surface import (
    css_declarations,
    css_variables,
    get_shadow_config,
    pressed_shadow,
    surface_shadow,
)

__all__ = [
    # Entry points
    "get_neumorphic_tokens",
    "resolve_mode",
    # Surface helpers
    "surface_shadow",
    "pressed_shadow",
    "get_shadow_config",
    "css_variables",
    "css_declarations",
    # Models
    "TokenOptions",
    "TokenSet",
    "SemanticColors",
    "ShadowConfig",
    "ColorMode",
    "ModeOption",
    "Elevation",
    # Constants
    "DEFAULT_INTENSITY",
    "ELEVATION_MAP",
    "OUTLINE_BY_MODE",
    "OUTLINE_NONE",
    "SEMANTIC_COLORS",
]
