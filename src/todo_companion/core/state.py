# src/todo_companion/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_models import ViewOptions
from ..tasks.task_store import TaskStore
from .i18n import Localizer


@dataclass
class AppState:
    """
    Everything one interactive session owns.

    Commands receive this object explicitly; nothing lives in module globals.
    """

    # Store Settings on the state for easy access in other modules later.
    settings: object

    store: TaskStore
    localizer: Localizer
    view_options: ViewOptions = field(default_factory=ViewOptions)
