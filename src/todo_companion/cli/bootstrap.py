# src/todo_companion/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the task store and localizer into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.i18n import Language, Localizer
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    settings.export_dir.mkdir(parents=True, exist_ok=True)


def _seed_categories(settings, localizer: Localizer) -> list[str]:
    configured = list(getattr(settings, "seed_categories", None) or [])
    raw = configured or localizer.default_categories()
    # Drop empties and repeats so a sloppy env value cannot abort startup.
    seen: list[str] = []
    for name in raw:
        if name and name not in seen:
            seen.append(name)
    return seen


def create_initial_state(*, settings=None, ensure_dirs: bool = True) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if ensure_dirs:
        _ensure_local_dirs(settings)

    language = getattr(settings, "language", Language.ZH)
    localizer = Localizer(Language.parse(str(language)))
    store = TaskStore(categories=_seed_categories(settings, localizer))

    logger.info(
        "Session state ready language=%s categories=%d",
        localizer.language.value,
        len(store.categories),
    )
    return AppState(settings=settings, store=store, localizer=localizer)
