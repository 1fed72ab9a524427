# src/todo_companion/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import date
from typing import cast

from ..core.i18n import Language
from ..core.state import AppState
from ..tasks.errors import DuplicateCategory, ExportIOFailure, IndexOutOfRange
from ..tasks.exporter import ExportFormat, default_export_path, write_export
from ..tasks.task_models import Priority, SortKey, SortSpec, Task, Workload
from ..tasks.task_stats import compute_stats
from ..tasks.task_view import view

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

_CONFIRM_WORDS = {"yes", "y", "是"}


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, emit)
            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except IndexOutOfRange as e:
            return f"No such item: #{e.index + 1} (have {e.length})."
        except ValueError as e:
            return f"Invalid input: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- parsing helpers ----


def _parse_index(raw: str) -> int:
    """User-facing positions are 1-based."""
    try:
        n = int(raw)
    except ValueError:
        raise ValueError(f"expected a task number, got {raw!r}") from None
    return n - 1


def _parse_level(raw: str, enum_cls: type[Priority] | type[Workload]) -> Priority | Workload:
    raw = raw.strip().lower()
    if raw.isdigit():
        return enum_cls(int(raw))
    for member in enum_cls:
        if member.name.lower() == raw:
            return member
    names = ", ".join(m.name.lower() for m in enum_cls)
    raise ValueError(f"expected one of {names} (or 0-2), got {raw!r}")


def _parse_bool(raw: str) -> bool:
    raw = raw.strip().lower()
    if raw in ("1", "true", "yes", "y", "on", "done"):
        return True
    if raw in ("0", "false", "no", "n", "off", "todo"):
        return False
    raise ValueError(f"expected yes/no, got {raw!r}")


def _store_positions(state: AppState) -> dict[int, int]:
    return {id(t): i for i, t in enumerate(state.store.tasks)}


# ---- rendering helpers ----


def _task_line(state: AppState, pos: int, task: Task, today: date) -> str:
    loc = state.localizer
    mark = "x" if task.completed else " "
    line = (
        f"#{pos + 1} [{mark}] {task.name}  "
        f"({loc.priority_label(task.priority)}/{loc.workload_label(task.workload)}) "
        f"{task.due_date:%Y-%m-%d}"
    )
    if task.category:
        line += f"  [{task.category}]"
    if task.is_overdue(today):
        line += f"  !{loc.text('Overdue')}"
    return line


def render_task_list(state: AppState, today: date | None = None) -> str:
    today = today or date.today()
    loc = state.localizer
    opts = state.view_options
    visible = view(state.store.tasks, opts.filter, opts.sort)
    positions = _store_positions(state)

    lines = [f"{loc.text('TaskList')}:"]
    if not visible:
        lines.append(f"  {loc.text('NoTasksFound')}")
    for t in visible:
        lines.append("  " + _task_line(state, positions[id(t)], t, today))
    lines.append(f"{loc.text('Total')}: {len(state.store)} | {loc.text('Showing')}: {len(visible)}")
    return "\n".join(lines)


# ---- commands ----


def cmd_help(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /add            -> new task with default name
    /add Buy milk   -> new task named "Buy milk"
    """
    name = " ".join(args) or state.localizer.text("NewTask")
    due_days = int(getattr(state.settings, "default_due_days", 7))
    task = state.store.new_task(name, due_days=due_days)
    return f"#{len(state.store)} {task.name} (due {task.due_date:%Y-%m-%d})"


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_task_list(state)


def cmd_show(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /show N"
    idx = _parse_index(args[0])
    t = state.store.get_task(idx)
    loc = state.localizer
    return "\n".join(
        [
            f"#{idx + 1} {t.name}" + (f" ({loc.text('Completed')})" if t.completed else ""),
            f"  {loc.text('Description')}: {t.description}",
            f"  {loc.text('DueDate')}: {t.due_date:%Y-%m-%d}",
            f"  {loc.text('Category')}: {t.category}",
            f"  {loc.text('Priority')}: {loc.priority_label(t.priority)}",
            f"  {loc.text('Workload')}: {loc.workload_label(t.workload)}",
            f"  {loc.text('Created')}: {t.created_at:%Y-%m-%d} | "
            f"{loc.text('Modified')}: {t.modified_at:%Y-%m-%d %H:%M}",
        ]
    )


def _resolve_category(state: AppState, raw: str) -> str:
    cats = state.store.categories
    if not cats:
        # No known categories: free text, as typed.
        return raw
    if raw in cats:
        return raw
    if raw.isdigit() and 1 <= int(raw) <= len(cats):
        return cats[int(raw) - 1]
    raise ValueError(f"unknown category {raw!r} (known: {', '.join(cats)})")


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit N name <text>
    /edit N desc <text>
    /edit N priority low|medium|high
    /edit N workload small|medium|large
    /edit N category <name or number>
    /edit N done yes|no
    """
    if len(args) < 2:
        return (
            "Usage: /edit N name|desc|priority|workload|category|done <value>\n"
            "Use /due N YYYY-MM-DD to change the due date."
        )
    idx = _parse_index(args[0])
    field_name = args[1].lower()
    value = " ".join(args[2:])

    if field_name == "name":
        if not value:
            return "Task name must not be empty."
        state.store.update_task(idx, name=value)
    elif field_name in ("desc", "description"):
        state.store.update_task(idx, description=value)
    elif field_name == "priority":
        state.store.update_task(idx, priority=_parse_level(value, Priority))
    elif field_name == "workload":
        state.store.update_task(idx, workload=_parse_level(value, Workload))
    elif field_name == "category":
        state.store.update_task(idx, category=_resolve_category(state, value))
    elif field_name in ("done", "completed"):
        state.store.update_task(idx, completed=_parse_bool(value))
    elif field_name in ("due", "duedate"):
        return cmd_due(state, [args[0], *args[2:]])
    else:
        return f"Unknown field: {field_name}."
    return f"#{idx + 1} updated."


def cmd_due(state: AppState, args: list[str]) -> str:
    if len(args) < 2:
        return "Usage: /due N YYYY-MM-DD"
    idx = _parse_index(args[0])
    # Unparseable dates are ignored and the old value stays.
    state.store.set_due_date_text(idx, " ".join(args[1:]))
    t = state.store.get_task(idx)
    return f"#{idx + 1} {state.localizer.text('DueDate')}: {t.due_date:%Y-%m-%d}"


def cmd_done(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /done N"
    idx = _parse_index(args[0])
    t = state.store.toggle_completed(idx)
    loc = state.localizer
    status = loc.text("Completed") if t.completed else loc.text("IncompleteTasks")
    return f"#{idx + 1} {t.name}: {status}"


def cmd_rm(state: AppState, args: list[str]) -> str:
    """
    /rm N       -> ask for confirmation
    /rm N yes   -> delete task N
    """
    if not args:
        return "Usage: /rm N [yes]"
    idx = _parse_index(args[0])
    task = state.store.get_task(idx)
    loc = state.localizer
    if len(args) < 2 or args[1].lower() not in _CONFIRM_WORDS:
        return (
            f"{loc.text('DeleteTask')}: #{idx + 1} {task.name}\n"
            f"{loc.text('ConfirmDeleteTask')} (/rm {idx + 1} yes)"
        )
    state.store.remove_task(idx)
    return f"#{idx + 1} {task.name}: {loc.text('DeleteTask')} OK."


def cmd_mv(state: AppState, args: list[str]) -> str:
    if len(args) != 2:
        return "Usage: /mv FROM TO"
    src, dst = _parse_index(args[0]), _parse_index(args[1])
    state.store.reorder_task(src, dst)
    return f"Moved #{src + 1} -> #{dst + 1}."


def cmd_cat(state: AppState, args: list[str]) -> str:
    """
    /cat             -> list categories
    /cat add NAME    -> add a category
    /cat rm N [yes]  -> delete category N (tasks keep their label)
    """
    loc = state.localizer
    store = state.store

    if not args:
        cats = store.categories
        listing = "  ".join(f"{i}. {c}" for i, c in enumerate(cats, start=1))
        return f"{loc.text('CurrentCategories')} {listing}".rstrip()

    sub = args[0].lower()
    if sub == "add":
        name = " ".join(args[1:])
        if not name:
            return "Usage: /cat add NAME"
        try:
            store.add_category(name)
        except DuplicateCategory:
            return f"{loc.text('CategoryExists')}: {loc.text('CategoryExistsMsg')}"
        return f"{loc.text('Add')}: {name}"

    if sub in ("rm", "del"):
        if len(args) < 2:
            return "Usage: /cat rm N [yes]"
        idx = _parse_index(args[1])
        cats = store.categories
        if not 0 <= idx < len(cats):
            raise IndexOutOfRange(idx, len(cats))
        if len(args) < 3 or args[2].lower() not in _CONFIRM_WORDS:
            return f"{loc.format('ConfirmDeleteCategory', cats[idx])} (/cat rm {idx + 1} yes)"
        name = store.remove_category(idx)
        return f"{loc.text('DeleteCategory')}: {name}"

    return "Usage: /cat | /cat add NAME | /cat rm N [yes]"


def cmd_filter(state: AppState, args: list[str]) -> str:
    """/filter all|completed|incomplete|none"""
    modes = {
        "all": (True, True),
        "completed": (True, False),
        "done": (True, False),
        "incomplete": (False, True),
        "todo": (False, True),
        "none": (False, False),
    }
    opts = state.view_options
    if args:
        mode = args[0].lower()
        if mode not in modes:
            return "Usage: /filter all|completed|incomplete|none"
        show_completed, show_incomplete = modes[mode]
        opts.filter = replace(
            opts.filter, show_completed=show_completed, show_incomplete=show_incomplete
        )
    loc = state.localizer
    f = opts.filter
    return (
        f"{loc.text('Show')} {loc.text('ShowCompleted')}={'on' if f.show_completed else 'off'}, "
        f"{loc.text('ShowIncomplete')}={'on' if f.show_incomplete else 'off'}"
    )


def cmd_search(state: AppState, args: list[str]) -> str:
    """/search TEXT (case-sensitive), /search alone clears it."""
    opts = state.view_options
    opts.filter = replace(opts.filter, search_text=" ".join(args))
    return render_task_list(state)


def cmd_sort(state: AppState, args: list[str]) -> str:
    """/sort none|priority|due|created [asc|desc]"""
    opts = state.view_options
    if args:
        key = SortKey.parse(args[0])
        ascending = opts.sort.ascending
        if len(args) > 1:
            direction = args[1].lower()
            if direction not in ("asc", "desc"):
                return "Usage: /sort none|priority|due|created [asc|desc]"
            ascending = direction == "asc"
        opts.sort = SortSpec(key=key, ascending=ascending)
    loc = state.localizer
    direction = loc.text("Ascending" if opts.sort.ascending else "Descending")
    return f"{loc.text('Sort')} {loc.sort_label(opts.sort.key)} ({direction})"


def cmd_lang(state: AppState, args: list[str]) -> str:
    new_lang = state.localizer.toggle()
    logger.debug("Display language switched to %s", new_lang.value)
    loc = state.localizer
    return f"{loc.text('Language')}: {loc.text('Chinese' if new_lang is Language.ZH else 'English')}"


def cmd_stats(state: AppState, args: list[str]) -> str:
    loc = state.localizer
    s = compute_stats(state.store.tasks, date.today())
    return "\n".join(
        [
            f"{loc.text('TaskStatistics')}:",
            f"  {loc.text('TotalTasks')}: {s.total}",
            f"  {loc.text('CompletedTasks')}: {s.completed} ({s.completion_rate:.0%})",
            f"  {loc.text('IncompleteTasks')}: {s.incomplete}",
            f"  {loc.text('HighPriority')}: {s.high_priority}",
            f"  {loc.text('Overdue')}: {s.overdue}",
            f"  {loc.text('CompletionProgress')}: {s.completed}/{s.total} ({s.completion_rate:.0%})",
        ]
    )


def cmd_export(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /export csv|json|markdown [path]
    Exports every task in store order (filters and sorting do not apply).
    """
    if not args:
        return "Usage: /export csv|json|markdown [path]"
    fmt = ExportFormat.parse(args[0])
    if len(args) > 1:
        path = " ".join(args[1:])
    else:
        export_dir = getattr(state.settings, "export_dir", ".")
        path = str(default_export_path(export_dir, fmt))

    if emit:
        with contextlib.suppress(Exception):
            emit(f"[{state.localizer.text('Export')}] {path}")

    loc = state.localizer
    try:
        written = write_export(path, state.store.tasks, fmt, loc)
    except ExportIOFailure as e:
        return f"{loc.text('ExportError')}: {loc.format('ExportErrorMsg', e)}"
    return f"{loc.text('ExportSuccess')}: {loc.format('ExportSuccessMsg', fmt.value)} ({written})"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add [name].")
registry.register("list", cmd_list, help_text="Show tasks with current filter/sort.", aliases=["ls"])
registry.register("show", cmd_show, help_text="Show task details: /show N.")
registry.register(
    "edit",
    cmd_edit,
    help_text="Edit a task: /edit N name|desc|priority|workload|category|done <value>.",
)
registry.register("due", cmd_due, help_text="Set due date: /due N YYYY-MM-DD.")
registry.register("done", cmd_done, help_text="Toggle completed: /done N.")
registry.register("rm", cmd_rm, help_text="Delete a task: /rm N, then /rm N yes.")
registry.register("mv", cmd_mv, help_text="Move a task: /mv FROM TO.")
registry.register("cat", cmd_cat, help_text="Categories: /cat | /cat add NAME | /cat rm N.")
registry.register(
    "filter", cmd_filter, help_text="Filter by status: /filter all|completed|incomplete|none."
)
registry.register("search", cmd_search, help_text="Case-sensitive search: /search [text].")
registry.register(
    "sort", cmd_sort, help_text="Sort view: /sort none|priority|due|created [asc|desc]."
)
registry.register("lang", cmd_lang, help_text="Switch display language (中文 / English).")
registry.register("stats", cmd_stats, help_text="Show task statistics.")
registry.register(
    "export", cmd_export, help_text="Export all tasks: /export csv|json|markdown [path]."
)
