# src/todo_companion/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import date, datetime, timedelta
from typing import Any

from .errors import DuplicateCategory, IndexOutOfRange
from .task_models import EDITABLE_FIELDS, Priority, Task, Workload

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

_DATE_FORMATS = ("%Y-%m-%d", "%Y/%m/%d", "%Y.%m.%d")


def parse_due_date(text: str) -> date | None:
    """
    Best-effort parse of a user-typed due date.

    Accepts YYYY-MM-DD (and / or . separators) and full ISO datetimes
    (the time part is dropped). Returns None when nothing matches.
    """
    raw = (text or "").strip()
    if not raw:
        return None
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(raw, fmt).date()
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(raw).date()
    except ValueError:
        return None


class TaskStore:
    """
    In-memory task list for one session.

    - tasks keep the user-defined order (append on add, splice on reorder)
    - categories are insertion-ordered and unique (case-sensitive)
    - removing a category leaves tasks that reference it untouched

    Index arguments are 0-based positions in the task list.
    """

    def __init__(
        self,
        *,
        categories: Iterable[str] = (),
        clock: Clock = datetime.now,
    ) -> None:
        self._tasks: list[Task] = []
        self._categories: list[str] = []
        self._clock = clock
        for name in categories:
            self.add_category(name)
        logger.debug("TaskStore ready categories=%s", self._categories)

    # ---- read access ----

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def categories(self) -> tuple[str, ...]:
        return tuple(self._categories)

    def get_task(self, index: int) -> Task:
        self._check_index(index, len(self._tasks))
        return self._tasks[index]

    @staticmethod
    def _check_index(index: int, length: int) -> None:
        if not 0 <= index < length:
            raise IndexOutOfRange(index, length)

    # ---- tasks ----

    def add_task(self, **defaults: Any) -> Task:
        """Append a new task built from `defaults` and return it."""
        now = self._clock()
        defaults.setdefault("due_date", now.date())
        task = Task(created_at=now, modified_at=now, **defaults)
        self._tasks.append(task)
        logger.debug("Task added index=%s name=%r", len(self._tasks) - 1, task.name)
        return task

    def new_task(self, name: str, *, due_days: int = 7, today: date | None = None) -> Task:
        """
        "Add new task" defaults: due in `due_days` days,
        category = first known category (or empty if there are none).
        """
        if today is None:
            today = self._clock().date()
        category = self._categories[0] if self._categories else ""
        return self.add_task(
            name=name,
            due_date=today + timedelta(days=due_days),
            category=category,
        )

    def remove_task(self, index: int) -> Task:
        self._check_index(index, len(self._tasks))
        task = self._tasks.pop(index)
        logger.debug("Task removed index=%s name=%r", index, task.name)
        return task

    def reorder_task(self, from_index: int, to_index: int) -> None:
        n = len(self._tasks)
        self._check_index(from_index, n)
        self._check_index(to_index, n)
        if from_index == to_index:
            return
        task = self._tasks.pop(from_index)
        self._tasks.insert(to_index, task)
        logger.debug("Task moved %s -> %s name=%r", from_index, to_index, task.name)

    def update_task(self, index: int, **fields: Any) -> Task:
        """
        Edit fields of the task at `index` and refresh modified_at.

        Only EDITABLE_FIELDS are accepted; created_at can never be changed.
        """
        task = self.get_task(index)
        unknown = set(fields) - EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"not editable: {', '.join(sorted(unknown))}")
        if not fields:
            return task

        # Coerce before mutating so a bad ordinal leaves the task untouched.
        if "priority" in fields:
            fields["priority"] = Priority(fields["priority"])
        if "workload" in fields:
            fields["workload"] = Workload(fields["workload"])

        for name, value in fields.items():
            setattr(task, name, value)
        task.modified_at = self._clock()
        return task

    def set_due_date_text(self, index: int, text: str) -> bool:
        """
        Apply a typed due date. Unparseable input is discarded silently:
        the previous due date stays and False is returned.
        """
        task = self.get_task(index)
        parsed = parse_due_date(text)
        if parsed is None:
            logger.debug("Discarded unparseable due date index=%s text=%r", index, text)
            return False
        if parsed != task.due_date:
            self.update_task(index, due_date=parsed)
        return True

    def toggle_completed(self, index: int) -> Task:
        task = self.get_task(index)
        return self.update_task(index, completed=not task.completed)

    # ---- categories ----

    def add_category(self, name: str) -> None:
        if not name:
            raise ValueError("category name is required")
        if name in self._categories:
            raise DuplicateCategory(name)
        self._categories.append(name)

    def remove_category(self, index: int) -> str:
        self._check_index(index, len(self._categories))
        name = self._categories.pop(index)
        dangling = sum(1 for t in self._tasks if t.category == name)
        logger.debug("Category removed %r (tasks still referencing it: %s)", name, dangling)
        return name
