# src/todo_companion/tasks/task_stats.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from .task_models import Priority, Task


@dataclass(frozen=True, slots=True)
class TaskStats:
    total: int
    completed: int
    high_priority: int
    overdue: int

    @property
    def incomplete(self) -> int:
        return self.total - self.completed

    @property
    def completion_rate(self) -> float:
        return self.completed / self.total if self.total else 0.0


def compute_stats(tasks: Iterable[Task], today: date) -> TaskStats:
    """Counters over the whole store (not the filtered view)."""
    total = completed = high = overdue = 0
    for t in tasks:
        total += 1
        if t.completed:
            completed += 1
        if t.priority == Priority.HIGH:
            high += 1
        if t.is_overdue(today):
            overdue += 1
    return TaskStats(total=total, completed=completed, high_priority=high, overdue=overdue)
