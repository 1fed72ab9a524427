# src/todo_companion/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import IntEnum, StrEnum


class Priority(IntEnum):
    """Ordinal priority level. Comparisons follow LOW < MEDIUM < HIGH."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2


class Workload(IntEnum):
    SMALL = 0
    MEDIUM = 1
    LARGE = 2


class SortKey(StrEnum):
    """
    Display sort options.

    NONE keeps the user-defined store order (manual reordering).
    """

    NONE = "none"
    PRIORITY = "priority"
    DUE_DATE = "due"
    CREATED_DATE = "created"

    @classmethod
    def parse(cls, raw: str | None) -> SortKey:
        if not raw:
            return cls.NONE
        raw = raw.strip().lower()
        aliases = {"default": cls.NONE, "duedate": cls.DUE_DATE, "due_date": cls.DUE_DATE}
        if raw in aliases:
            return aliases[raw]
        return cls(raw)


@dataclass(slots=True)
class Task:
    name: str
    due_date: date
    created_at: datetime
    modified_at: datetime

    description: str = ""
    priority: Priority = Priority.LOW
    workload: Workload = Workload.SMALL
    completed: bool = False
    category: str = ""

    def __post_init__(self) -> None:
        # Coerce raw ints; out-of-range ordinals raise ValueError here.
        self.priority = Priority(self.priority)
        self.workload = Workload(self.workload)

    def is_overdue(self, today: date) -> bool:
        return not self.completed and self.due_date < today


# Fields that may be changed after creation (created_at is immutable).
EDITABLE_FIELDS: frozenset[str] = frozenset(
    {"name", "description", "due_date", "priority", "workload", "completed", "category"}
)


@dataclass(frozen=True, slots=True)
class FilterSpec:
    show_completed: bool = True
    show_incomplete: bool = True
    search_text: str = ""


@dataclass(frozen=True, slots=True)
class SortSpec:
    key: SortKey = SortKey.NONE
    # Descending is the default direction of the list window.
    ascending: bool = False


@dataclass(slots=True)
class ViewOptions:
    """Mutable holder for the current filter/sort toolbar settings of a session."""

    filter: FilterSpec = field(default_factory=FilterSpec)
    sort: SortSpec = field(default_factory=SortSpec)
