from pathlib import Path

import pytest

from auraform.rules.loader import RULES_PATH_ENV

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """
    Run in an empty directory with no rules override, so neither
    ./auraform.yaml nor $AURAFORM_RULES_PATH leaks into a test.
    """
    monkeypatch.delenv(RULES_PATH_ENV, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_rules(tmp_path):
    def _write(content: str, name: str = "rules.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
