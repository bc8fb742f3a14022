import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from auraform.rules.models import Rules

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = "auraform.yaml"
RULES_PATH_ENV = "AURAFORM_RULES_PATH"


def _strip_markdown_fences(content: str) -> str:
    """
    Strip markdown code fences from YAML content.

    Returns the first ```yaml block if there is one, else the whole content.
    """
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        stripped = line.strip()
        if stripped.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and stripped.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    if found_block:
        return "\n".join(yaml_lines)
    return content


def resolve_rules_path(path: Path | str | None = None) -> Path | None:
    """
    Pick the rules file to load.

    Explicit path first, then $AURAFORM_RULES_PATH, then ./auraform.yaml if it
    exists. Returns None when no file applies and built-in defaults should be used.
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(RULES_PATH_ENV)
    if env_path:
        return Path(env_path)

    default = Path(DEFAULT_RULES_PATH)
    return default if default.exists() else None


def load_rules(path: Path) -> Rules:
    """
    Load and validate a rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    clean_content = _strip_markdown_fences(path.read_text(encoding="utf-8"))

    try:
        data = yaml.safe_load(clean_content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}

    try:
        rules = Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e

    logger.debug("Loaded rules from %s", path)
    return rules


def load_rules_or_default(path: Path | str | None = None) -> Rules:
    """Load rules from the resolved path, or return defaults if there is none."""
    resolved = resolve_rules_path(path)
    if resolved is None:
        return Rules()
    return load_rules(resolved)
