# src/todo_companion/tasks/exporter.py

"""
Text exports of a task sequence: CSV, JSON, Markdown.

The layouts are consumed by existing tools and must stay byte-for-byte stable:
- no quoting/escaping of embedded quotes, commas or newlines (CSV, JSON, Markdown)
- JSON "status" is always "completed"/"pending", while priority/workload use
  the active display language
- Markdown completion is a fixed glyph, CSV completion is a localized label
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum
from pathlib import Path

from ..core.i18n import Localizer
from .errors import ExportIOFailure
from .task_models import Task

logger = logging.getLogger(__name__)

DATE_FMT = "%Y-%m-%d"
MARKDOWN_SEPARATOR = "|----------|------|----------|------|--------|--------|------|"
DONE_GLYPH = "✅"
NOT_DONE_GLYPH = "❌"

# Column label keys shared by the CSV and Markdown headers.
_COLUMN_KEYS = ("TaskName", "Description", "DueDate", "Category", "Priority", "Workload", "Completed")


class ExportFormat(Enum):
    CSV = "CSV"
    JSON = "JSON"
    MARKDOWN = "Markdown"

    @property
    def extension(self) -> str:
        # "markdown", not "md": kept for compatibility with existing exports.
        return self.value.lower()

    @classmethod
    def parse(cls, raw: str) -> ExportFormat:
        wanted = (raw or "").strip().lower()
        if wanted == "md":
            return cls.MARKDOWN
        for fmt in cls:
            if fmt.value.lower() == wanted:
                return fmt
        raise ValueError(f"unknown export format: {raw!r} (expected csv, json or markdown)")


def _date(task_date) -> str:
    return task_date.strftime(DATE_FMT)


def export_csv(tasks: Sequence[Task], loc: Localizer) -> str:
    lines = [",".join(loc.text(k) for k in _COLUMN_KEYS)]
    for t in tasks:
        status = loc.text("Completed") if t.completed else loc.text("IncompleteTasks")
        lines.append(
            f'"{t.name}","{t.description}",{_date(t.due_date)},{t.category},'
            f"{loc.priority_label(t.priority)},{loc.workload_label(t.workload)},{status}"
        )
    return "".join(line + "\n" for line in lines)


def export_json(tasks: Sequence[Task], loc: Localizer) -> str:
    parts = ["[\n"]
    last = len(tasks) - 1
    for i, t in enumerate(tasks):
        parts.append("  {\n")
        parts.append(f'    "name": "{t.name}",\n')
        parts.append(f'    "description": "{t.description}",\n')
        parts.append(f'    "dueDate": "{_date(t.due_date)}",\n')
        parts.append(f'    "category": "{t.category}",\n')
        parts.append(f'    "priority": "{loc.priority_label(t.priority)}",\n')
        parts.append(f'    "workload": "{loc.workload_label(t.workload)}",\n')
        parts.append(f'    "status": "{"completed" if t.completed else "pending"}",\n')
        parts.append(f'    "created": "{_date(t.created_at)}"\n')
        parts.append("  }" + ("," if i < last else "") + "\n")
    parts.append("]")
    return "".join(parts)


def export_markdown(tasks: Sequence[Task], loc: Localizer) -> str:
    header = "| " + " | ".join(loc.text(k) for k in _COLUMN_KEYS) + " |"
    lines = [f"# {loc.text('TaskList')}", "", header, MARKDOWN_SEPARATOR]
    for t in tasks:
        cells = (
            t.name,
            t.description,
            _date(t.due_date),
            t.category,
            loc.priority_label(t.priority),
            loc.workload_label(t.workload),
            DONE_GLYPH if t.completed else NOT_DONE_GLYPH,
        )
        lines.append("| " + " | ".join(cells) + " |")
    return "".join(line + "\n" for line in lines)


_RENDERERS = {
    ExportFormat.CSV: export_csv,
    ExportFormat.JSON: export_json,
    ExportFormat.MARKDOWN: export_markdown,
}


def export(tasks: Sequence[Task], fmt: ExportFormat, loc: Localizer) -> str:
    """Render `tasks` (in the given order) as export text. Pure."""
    return _RENDERERS[fmt](tasks, loc)


def default_export_path(directory: str | Path, fmt: ExportFormat) -> Path:
    return Path(directory) / f"tasks.{fmt.extension}"


def write_export(
    path: str | Path, tasks: Sequence[Task], fmt: ExportFormat, loc: Localizer
) -> Path:
    """
    Render and write an export file.

    The text is rendered and encoded before the filesystem is touched, so an
    existing file is left alone when encoding fails. Encoding errors and any
    OSError are raised as ExportIOFailure; there is no retry.
    """
    path = Path(path)
    try:
        data = export(tasks, fmt, loc).encode("utf-8")
    except UnicodeEncodeError as e:
        logger.warning("Export failed path=%s format=%s: %s", path, fmt.value, e)
        raise ExportIOFailure(str(e)) from e

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as e:
        logger.warning("Export failed path=%s format=%s: %s", path, fmt.value, e)
        raise ExportIOFailure(str(e)) from e

    logger.info("Exported %d tasks to %s (%s)", len(tasks), path, fmt.value)
    return path
