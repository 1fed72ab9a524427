# tests/conftest.py

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_companion.core.i18n import Language, Localizer
from todo_companion.core.state import AppState
from todo_companion.tasks.task_models import Priority, Task
from todo_companion.tasks.task_store import TaskStore

from .fakes import FakeClock, make_task


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 1, 1, 9, 0))


@pytest.fixture()
def store(clock: FakeClock) -> TaskStore:
    return TaskStore(categories=["Work", "Personal"], clock=clock)


@pytest.fixture()
def en() -> Localizer:
    return Localizer(Language.EN)


@pytest.fixture()
def scenario_tasks() -> list[Task]:
    return [
        make_task("A", priority=Priority.HIGH, completed=False, due=date(2024, 1, 10)),
        make_task("B", priority=Priority.LOW, completed=True, due=date(2024, 1, 5)),
    ]


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the command layer.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="WARNING",
        language=Language.EN,
        default_due_days=7,
        seed_categories=[],
        data_dir=tmp_path,
        log_dir=tmp_path,
        export_dir=tmp_path / "exports",
    )


@pytest.fixture()
def state(settings: SimpleNamespace, clock: FakeClock) -> AppState:
    localizer = Localizer(Language.EN)
    return AppState(
        settings=settings,
        store=TaskStore(categories=localizer.default_categories(), clock=clock),
        localizer=localizer,
    )
