# tests/test_commands.py

from __future__ import annotations

from pathlib import Path

from todo_companion.cli.bootstrap import create_initial_state
from todo_companion.cli.commands import CommandRegistry, registry
from todo_companion.core.i18n import Language
from todo_companion.tasks.task_models import Priority, SortKey


def run(state, line: str) -> str:
    reply = registry.handle(state, line)
    assert reply is not None
    return reply


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}
    notes: list[str] = []

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b")

    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/B y", emit=notes.append) == "h3"
    assert called == {"h2": 1, "h3": 1}
    assert notes == ["note"]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_uses_defaults(state) -> None:
    reply = run(state, "/add")

    task = state.store.get_task(0)
    assert task.name == "New Task"
    assert task.category == "Work"
    assert task.due_date.isoformat() == "2024-01-08"
    assert reply == "#1 New Task (due 2024-01-08)"

    run(state, "/add Buy milk")
    assert state.store.get_task(1).name == "Buy milk"


def test_edit_fields(state) -> None:
    run(state, "/add draft")

    run(state, "/edit 1 name Final report")
    run(state, "/edit 1 desc for the board")
    run(state, "/edit 1 priority high")
    run(state, "/edit 1 workload 1")
    run(state, "/edit 1 category 2")
    run(state, "/edit 1 done yes")

    t = state.store.get_task(0)
    assert t.name == "Final report"
    assert t.description == "for the board"
    assert t.priority is Priority.HIGH
    assert int(t.workload) == 1
    assert t.category == "Personal"
    assert t.completed is True


def test_edit_rejects_unknown_category_and_bad_level(state) -> None:
    run(state, "/add draft")

    assert "unknown category" in run(state, "/edit 1 category Nowhere")
    assert "Invalid input" in run(state, "/edit 1 priority urgent")
    assert state.store.get_task(0).category == "Work"


def test_bad_index_is_reported_with_typed_number(state) -> None:
    assert run(state, "/done 3") == "No such item: #3 (have 0)."
    assert run(state, "/done 0") == "No such item: #0 (have 0)."

    run(state, "/add only")
    assert run(state, "/mv 1 4") == "No such item: #4 (have 1)."
    assert run(state, "/cat rm 9 yes") == "No such item: #9 (have 4)."
    assert "Invalid input" in run(state, "/done abc")


def test_due_keeps_old_value_on_garbage(state) -> None:
    run(state, "/add x")

    assert run(state, "/due 1 someday").endswith("2024-01-08")
    assert run(state, "/due 1 2024-05-01").endswith("2024-05-01")


def test_rm_requires_confirmation(state) -> None:
    run(state, "/add keep")
    run(state, "/add drop")

    prompt = run(state, "/rm 2")
    assert "Are you sure you want to delete this task?" in prompt
    assert len(state.store) == 2

    run(state, "/rm 2 yes")
    assert [t.name for t in state.store.tasks] == ["keep"]


def test_mv_reorders(state) -> None:
    for n in ("a", "b", "c"):
        run(state, f"/add {n}")

    run(state, "/mv 3 1")

    assert [t.name for t in state.store.tasks] == ["c", "a", "b"]


def test_categories_add_duplicate_and_remove(state) -> None:
    assert "Work" in run(state, "/cat")

    run(state, "/cat add Errands")
    assert state.store.categories[-1] == "Errands"

    reply = run(state, "/cat add Errands")
    assert "This category name already exists!" in reply
    assert state.store.categories.count("Errands") == 1

    run(state, "/add report")
    assert "Are you sure you want to delete category 'Work'?" in run(state, "/cat rm 1")
    run(state, "/cat rm 1 yes")
    assert "Work" not in state.store.categories
    assert state.store.get_task(0).category == "Work"


def test_list_applies_filter_search_and_sort(state) -> None:
    run(state, "/add alpha")
    run(state, "/add beta")
    run(state, "/add gamma")
    run(state, "/edit 2 priority high")
    run(state, "/done 3")

    run(state, "/sort priority desc")
    assert state.view_options.sort.key is SortKey.PRIORITY
    listing = run(state, "/list")
    lines = listing.splitlines()
    assert lines[0] == "Task List:"
    assert lines[1].startswith("  #2 [ ] beta")
    assert lines[-1] == "Total: 3 | Showing: 3"

    run(state, "/filter incomplete")
    assert run(state, "/list").splitlines()[-1] == "Total: 3 | Showing: 2"

    listing = run(state, "/search alp")
    assert "#1 [ ] alpha" in listing
    assert listing.splitlines()[-1] == "Total: 3 | Showing: 1"

    run(state, "/filter none")
    assert "No matching tasks found" in run(state, "/list")


def test_sort_reply_localizes_both_directions(state) -> None:
    assert run(state, "/sort priority desc") == "Sort: Priority (Descending)"
    assert run(state, "/sort due asc") == "Sort: Due Date (Ascending)"

    run(state, "/lang")
    assert run(state, "/sort priority desc") == "排序: 优先级 (降序)"


def test_sort_rejects_unknown_key(state) -> None:
    assert "Invalid input" in run(state, "/sort colour")
    assert state.view_options.sort.key is SortKey.NONE


def test_lang_switches_labels_only(state) -> None:
    run(state, "/add report")

    assert run(state, "/lang") == "语言: 中文"
    assert state.localizer.language is Language.ZH
    assert state.store.get_task(0).name == "report"
    assert "任务统计" in run(state, "/stats")


def test_stats_reply(state) -> None:
    run(state, "/add a")
    run(state, "/add b")
    run(state, "/done 1")

    reply = run(state, "/stats")

    assert "Total Tasks: 2" in reply
    assert "Completed: 1 (50%)" in reply
    assert "Completion Progress: 1/2 (50%)" in reply


def test_export_writes_default_path(state, tmp_path: Path) -> None:
    run(state, "/add report")
    notes: list[str] = []

    reply = registry.handle(state, "/export json", emit=notes.append)

    path = tmp_path / "exports" / "tasks.json"
    assert reply is not None and "Tasks exported successfully to JSON format" in reply
    assert notes and str(path) in notes[0]
    assert '"name": "report"' in path.read_text("utf-8")


def test_export_reports_io_failure(state, tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x", "utf-8")

    reply = run(state, f"/export csv {blocker / 'tasks.csv'}")

    assert reply.startswith("Export Error: Export failed:")


def test_export_reports_unencodable_text_and_keeps_previous_file(state, tmp_path: Path) -> None:
    target = tmp_path / "tasks.csv"
    target.write_text("previous export\n", "utf-8")
    run(state, "/add bad \udcff")

    reply = run(state, f"/export csv {target}")

    assert reply.startswith("Export Error: Export failed:")
    assert target.read_text("utf-8") == "previous export\n"


def test_bootstrap_seeds_localized_categories(settings) -> None:
    state = create_initial_state(settings=settings)
    assert state.store.categories == ("Work", "Personal", "Study", "Game Development")
    assert state.localizer.language is Language.EN
    assert settings.export_dir.is_dir()

    settings.seed_categories = ["Home", "Home", "", "Gym"]
    settings.language = Language.ZH
    state = create_initial_state(settings=settings)
    assert state.store.categories == ("Home", "Gym")
    assert state.localizer.language is Language.ZH
