# src/todo_companion/tasks/task_view.py

"""
View pipeline: filter -> sort over a task sequence.

Pure functions. The input sequence is never mutated; a fresh list is returned.
Sorting relies on list.sort being stable (also with reverse=True), so tasks
with equal keys keep their pre-sort relative order in both directions.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from .task_models import FilterSpec, SortKey, SortSpec, Task

_SORT_KEYS: dict[SortKey, Callable[[Task], Any]] = {
    SortKey.PRIORITY: lambda t: t.priority,
    SortKey.DUE_DATE: lambda t: t.due_date,
    SortKey.CREATED_DATE: lambda t: t.created_at,
}


def matches_filter(task: Task, spec: FilterSpec) -> bool:
    if task.completed:
        if not spec.show_completed:
            return False
    elif not spec.show_incomplete:
        return False

    q = spec.search_text
    if not q:
        return True
    return q in task.name or q in task.description or q in task.category


def filter_tasks(tasks: Iterable[Task], spec: FilterSpec) -> list[Task]:
    return [t for t in tasks if matches_filter(t, spec)]


def sort_tasks(tasks: Iterable[Task], spec: SortSpec) -> list[Task]:
    out = list(tasks)
    key = _SORT_KEYS.get(spec.key)
    if key is None:
        return out
    out.sort(key=key, reverse=not spec.ascending)
    return out


def view(
    tasks: Sequence[Task],
    filter_spec: FilterSpec | None = None,
    sort_spec: SortSpec | None = None,
) -> list[Task]:
    """Return the display-ordered subsequence of `tasks`."""
    return sort_tasks(
        filter_tasks(tasks, filter_spec or FilterSpec()),
        sort_spec or SortSpec(),
    )
