import argparse
import json
import logging
import sys
from pathlib import Path

from auraform.components.color import InvalidFormatError
from auraform.components.contrast import check_text_contrast
from auraform.components.tokens import (
    ELEVATION_MAP,
    TokenOptions,
    TokenSet,
    css_declarations,
    get_neumorphic_tokens,
    pressed_shadow,
    surface_shadow,
)
from auraform.rules.loader import load_rules_or_default
from auraform.rules.models import Rules, TokenRules
from pydantic import ValidationError

logger = logging.getLogger("cli")

EXIT_NOT_COMPLIANT = 1
EXIT_INVALID_INPUT = 2


def get_rules(config: str | None) -> Rules:
    try:
        return load_rules_or_default(Path(config) if config else None)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Could not load rules: {e}")
        sys.exit(EXIT_INVALID_INPUT)


def build_options(rules: Rules, args: argparse.Namespace) -> TokenOptions:
    """
    Command-line flags override the configured token defaults.

    Flag values go through the same TokenRules checks as the rules file.
    """
    overrides = {
        key: value
        for key, value in (("intensity", args.intensity), ("mode", args.mode))
        if value is not None
    }
    try:
        token_rules = TokenRules.model_validate({**rules.tokens.model_dump(), **overrides})
    except ValidationError as e:
        logger.error(f"Invalid token options:\n{e}")
        sys.exit(EXIT_INVALID_INPUT)
    return token_rules.to_options()


def derive_tokens(base: str, options: TokenOptions) -> TokenSet:
    try:
        return get_neumorphic_tokens(base, options)
    except InvalidFormatError as e:
        logger.error(str(e))
        sys.exit(EXIT_INVALID_INPUT)


def handle_tokens(args: argparse.Namespace) -> None:
    rules = get_rules(args.config)
    tokens = derive_tokens(args.base, build_options(rules, args))

    if args.format == "css":
        print(css_declarations(tokens, selector=args.selector))
    else:
        print(json.dumps(tokens.to_dict(), indent=2))


def handle_shadow(args: argparse.Namespace) -> None:
    rules = get_rules(args.config)
    tokens = derive_tokens(args.base, build_options(rules, args))
    elevation = args.elevation or rules.surface.elevation

    if args.pressed:
        print(pressed_shadow(tokens, elevation))
        return

    high_contrast = args.high_contrast or rules.surface.high_contrast
    print(surface_shadow(tokens, elevation, inset=args.inset, high_contrast=high_contrast))


def handle_contrast(args: argparse.Namespace) -> None:
    try:
        check = check_text_contrast(args.fg, args.bg, is_large_text=args.large_text)
    except InvalidFormatError as e:
        logger.error(str(e))
        sys.exit(EXIT_INVALID_INPUT)

    print(f"Contrast: {check.ratio:.2f}:1")
    if check.passes:
        print("WCAG AA: pass")
        return

    text_kind = "large" if check.is_large_text else "body"
    print("WCAG AA: fail")
    print(
        f" - {check.foreground} on {check.background} needs {check.threshold}:1 "
        f"for {text_kind} text, short by {check.shortfall:.2f}"
    )
    sys.exit(EXIT_NOT_COMPLIANT)


def _add_token_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("base", help="Base background color (#RGB or #RRGGBB)")
    parser.add_argument(
        "--intensity", type=float, help="Lightness shift in percentage points (default 15)"
    )
    parser.add_argument("--mode", choices=["light", "dark", "auto"], help="Color mode")
    parser.add_argument("--config", help="Path to rules YAML (default ./auraform.yaml)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="auraform", description="Neumorphic design tokens from a base color"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # tokens
    tokens_parser = subparsers.add_parser("tokens", help="Print the token set")
    _add_token_arguments(tokens_parser)
    tokens_parser.add_argument("--format", choices=["json", "css"], default="json")
    tokens_parser.add_argument("--selector", default=":root", help="CSS selector for --format css")

    # shadow
    shadow_parser = subparsers.add_parser("shadow", help="Print a box-shadow value")
    _add_token_arguments(shadow_parser)
    shadow_parser.add_argument("--elevation", choices=list(ELEVATION_MAP))
    shadow_parser.add_argument("--inset", action="store_true", help="Inset (pressed-in) surface")
    shadow_parser.add_argument("--pressed", action="store_true", help="Pressed-state shadow")
    shadow_parser.add_argument(
        "--high-contrast", action="store_true", help="Increase shadow distance"
    )

    # contrast
    contrast_parser = subparsers.add_parser("contrast", help="Check WCAG contrast of two colors")
    contrast_parser.add_argument("fg", help="Foreground color")
    contrast_parser.add_argument("bg", help="Background color")
    contrast_parser.add_argument(
        "--large-text", action="store_true", help="Use the large-text threshold (3:1)"
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.command == "tokens":
        handle_tokens(args)
    elif args.command == "shadow":
        handle_shadow(args)
    elif args.command == "contrast":
        handle_contrast(args)


if __name__ == "__main__":
    main()
