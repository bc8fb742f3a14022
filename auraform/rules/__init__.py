from auraform.rules.loader import load_rules, load_rules_or_default, resolve_rules_path
from auraform.rules.models import Rules, SurfaceRules, TokenRules

__all__ = [
    "load_rules",
    "load_rules_or_default",
    "resolve_rules_path",
    "Rules",
    "TokenRules",
    "SurfaceRules",
]
