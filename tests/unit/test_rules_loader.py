"""
Rules loader tests.

Verifies that auraform.yaml is parsed, validated and defaulted correctly.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from auraform.components.tokens import TokenOptions
from auraform.rules import (
    Rules,
    load_rules,
    load_rules_or_default,
    resolve_rules_path,
)
from auraform.rules.loader import RULES_PATH_ENV


class TestLoadRules:
    """Test rules file loading."""

    def test_load_project_rules_file(self, project_root: Path) -> None:
        """Bundled auraform.yaml loads with the documented defaults."""
        rules = load_rules(project_root / "auraform.yaml")

        assert rules.tokens.intensity == 15
        assert rules.tokens.mode == "auto"
        assert rules.surface.elevation == "medium"
        assert rules.surface.high_contrast is False

    def test_partial_file_fills_defaults(self, write_rules) -> None:
        rules = load_rules(write_rules("tokens:\n  intensity: 25\n"))

        assert rules.tokens.intensity == 25
        assert rules.tokens.mode == "auto"
        assert rules.surface.elevation == "medium"

    def test_empty_file_is_all_defaults(self, write_rules) -> None:
        assert load_rules(write_rules("")) == Rules()

    def test_markdown_fenced_yaml(self, write_rules) -> None:
        """Only the ```yaml block is read from a markdown file."""
        content = (
            "# Theme rules\n"
            "\n"
            "Some prose that is not YAML: [\n"
            "\n"
            "```yaml\n"
            "tokens:\n"
            "  mode: dark\n"
            "```\n"
            "\n"
            "More prose.\n"
        )
        rules = load_rules(write_rules(content, name="rules.md"))
        assert rules.tokens.mode == "dark"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "nope.yaml")

    def test_invalid_yaml_raises_value_error(self, write_rules) -> None:
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(write_rules("tokens: [unclosed\n"))

    def test_invalid_mode_raises_value_error(self, write_rules) -> None:
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(write_rules("tokens:\n  mode: sepia\n"))

    def test_negative_intensity_rejected(self, write_rules) -> None:
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(write_rules("tokens:\n  intensity: -5\n"))

    def test_nan_intensity_rejected(self, write_rules) -> None:
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(write_rules("tokens:\n  intensity: .nan\n"))

    def test_unknown_token_key_rejected(self, write_rules) -> None:
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(write_rules("tokens:\n  intensty: 20\n"))


class TestTokenRules:
    """Test conversion to token options."""

    def test_to_options(self, write_rules) -> None:
        rules = load_rules(write_rules("tokens:\n  intensity: 30\n  mode: light\n"))
        assert rules.tokens.to_options() == TokenOptions(intensity=30, mode="light")

    def test_default_options_match_token_defaults(self) -> None:
        assert Rules().tokens.to_options() == TokenOptions()


class TestResolveRulesPath:
    """Test rules file discovery."""

    def test_explicit_path_wins(self, isolated_cwd: Path, monkeypatch) -> None:
        monkeypatch.setenv(RULES_PATH_ENV, "/from/env.yaml")
        assert resolve_rules_path("explicit.yaml") == Path("explicit.yaml")

    def test_env_path(self, isolated_cwd: Path, monkeypatch) -> None:
        monkeypatch.setenv(RULES_PATH_ENV, "/from/env.yaml")
        assert resolve_rules_path() == Path("/from/env.yaml")

    def test_default_file_in_cwd(self, isolated_cwd: Path) -> None:
        (isolated_cwd / "auraform.yaml").write_text("tokens:\n  intensity: 20\n")

        assert resolve_rules_path() == Path("auraform.yaml")
        assert load_rules_or_default().tokens.intensity == 20

    def test_no_file_uses_defaults(self, isolated_cwd: Path) -> None:
        assert resolve_rules_path() is None
        assert load_rules_or_default() == Rules()
