# src/todo_companion/tasks/errors.py

from __future__ import annotations


class TaskStoreError(Exception):
    """Base class for task subsystem errors surfaced to the caller."""


class IndexOutOfRange(TaskStoreError, IndexError):
    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"index {index} out of range for {length} item(s)")
        self.index = index
        self.length = length


class DuplicateCategory(TaskStoreError, ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"category already exists: {name!r}")
        self.name = name


class ExportIOFailure(TaskStoreError, OSError):
    """Writing an export file failed. The original OSError is chained as __cause__."""
