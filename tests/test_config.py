# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_companion.config import Settings
from todo_companion.core.i18n import Language

_VARS = (
    "TODO_APP_NAME",
    "TODO_LOG_LEVEL",
    "TODO_LANGUAGE",
    "TODO_DEFAULT_DUE_DAYS",
    "TODO_CATEGORIES",
    "TODO_DATA_DIR",
    "TODO_LOG_DIR",
    "TODO_EXPORT_DIR",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()

    assert s.app_name == "todo"
    assert s.log_level == "WARNING"
    assert s.language is Language.ZH
    assert s.default_due_days == 7
    assert s.seed_categories == []
    assert s.data_dir == Path(".local/todo")
    assert s.log_dir == s.data_dir
    assert s.export_dir == Path(".local/todo") / "exports"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_LANGUAGE", "en")
    monkeypatch.setenv("TODO_DEFAULT_DUE_DAYS", "3")
    monkeypatch.setenv("TODO_CATEGORIES", "Home, Errands ,,Work")
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path))

    s = Settings.from_env()

    assert s.language is Language.EN
    assert s.default_due_days == 3
    assert s.seed_categories == ["Home", "Errands", "Work"]
    assert s.data_dir == tmp_path
    assert s.export_dir == tmp_path / "exports"


def test_bad_numbers_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_DEFAULT_DUE_DAYS", "soon")
    assert Settings.from_env().default_due_days == 7

    monkeypatch.setenv("TODO_DEFAULT_DUE_DAYS", "-4")
    assert Settings.from_env().default_due_days == 0
