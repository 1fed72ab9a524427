# src/todo_companion/core/i18n.py

"""
UI / export label catalog for the two supported display languages.

Lookups are keyed by (language, key). `lookup` returns the MISSING sentinel
for unknown keys so callers and tests can tell a gap in the catalog apart
from a real translation; `Localizer.text` falls back to the key for display.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final

from ..tasks.task_models import Priority, SortKey, Workload


class Language(StrEnum):
    ZH = "zh"
    EN = "en"

    @classmethod
    def parse(cls, raw: str | None, default: Language | None = None) -> Language:
        fallback = default or cls.ZH
        if not raw:
            return fallback
        raw = raw.strip().lower()
        aliases = {"chinese": cls.ZH, "zh-cn": cls.ZH, "cn": cls.ZH, "english": cls.EN}
        if raw in aliases:
            return aliases[raw]
        try:
            return cls(raw)
        except ValueError:
            return fallback

    def other(self) -> Language:
        return Language.EN if self is Language.ZH else Language.ZH


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


_ZH: dict[str, str] = {
    "TodoList": "待办事项列表",
    "NewTask": "新任务",
    "TaskName": "任务名称",
    "Description": "描述",
    "DueDate": "截止日期 (YYYY-MM-DD)",
    "Category": "分类",
    "Priority": "优先级",
    "Workload": "工作量",
    "Completed": "已完成",
    "Created": "创建于",
    "Modified": "修改于",
    "DeleteTask": "删除任务",
    "ConfirmDeleteTask": "确定要删除这个任务吗？",
    "Yes": "是",
    "No": "否",
    "TaskList": "任务列表",
    "Work": "工作",
    "Personal": "个人",
    "Study": "学习",
    "GameDev": "游戏开发",
    "AddNewCategory": "添加新分类:",
    "Add": "添加",
    "CategoryExists": "分类已存在",
    "CategoryExistsMsg": "该分类名称已经存在!",
    "CurrentCategories": "当前分类:",
    "DeleteCategory": "删除分类",
    "ConfirmDeleteCategory": "确定要删除分类 '{0}' 吗?",
    "Search": "搜索...",
    "Show": "显示:",
    "ShowCompleted": "已完成",
    "ShowIncomplete": "未完成",
    "Sort": "排序:",
    "Ascending": "升序",
    "Descending": "降序",
    "Statistics": "统计",
    "Export": "导出",
    "TaskStatistics": "任务统计",
    "TotalTasks": "总任务数",
    "CompletedTasks": "已完成",
    "IncompleteTasks": "未完成",
    "HighPriority": "高优先级",
    "Overdue": "已逾期",
    "CompletionProgress": "完成进度",
    "ExportOptions": "导出选项",
    "ExportSuccess": "导出成功",
    "ExportSuccessMsg": "任务已成功导出为 {0} 格式",
    "ExportError": "导出错误",
    "ExportErrorMsg": "导出失败: {0}",
    "NoTasksFound": "没有找到匹配的任务",
    "Total": "总数",
    "Showing": "显示",
    "AddNewTask": "添加新任务",
    "Language": "语言",
    "Chinese": "中文",
    "English": "英文",
}

_EN: dict[str, str] = {
    "TodoList": "Todo List",
    "NewTask": "New Task",
    "TaskName": "Task Name",
    "Description": "Description",
    "DueDate": "Due Date (YYYY-MM-DD)",
    "Category": "Category",
    "Priority": "Priority",
    "Workload": "Workload",
    "Completed": "Completed",
    "Created": "Created",
    "Modified": "Modified",
    "DeleteTask": "Delete Task",
    "ConfirmDeleteTask": "Are you sure you want to delete this task?",
    "Yes": "Yes",
    "No": "No",
    "TaskList": "Task List",
    "Work": "Work",
    "Personal": "Personal",
    "Study": "Study",
    "GameDev": "Game Development",
    "AddNewCategory": "Add New Category:",
    "Add": "Add",
    "CategoryExists": "Category Exists",
    "CategoryExistsMsg": "This category name already exists!",
    "CurrentCategories": "Current Categories:",
    "DeleteCategory": "Delete Category",
    "ConfirmDeleteCategory": "Are you sure you want to delete category '{0}'?",
    "Search": "Search...",
    "Show": "Show:",
    "ShowCompleted": "Completed",
    "ShowIncomplete": "Incomplete",
    "Sort": "Sort:",
    "Ascending": "Ascending",
    "Descending": "Descending",
    "Statistics": "Statistics",
    "Export": "Export",
    "TaskStatistics": "Task Statistics",
    "TotalTasks": "Total Tasks",
    "CompletedTasks": "Completed",
    "IncompleteTasks": "Incomplete",
    "HighPriority": "High Priority",
    "Overdue": "Overdue",
    "CompletionProgress": "Completion Progress",
    "ExportOptions": "Export Options",
    "ExportSuccess": "Export Success",
    "ExportSuccessMsg": "Tasks exported successfully to {0} format",
    "ExportError": "Export Error",
    "ExportErrorMsg": "Export failed: {0}",
    "NoTasksFound": "No matching tasks found",
    "Total": "Total",
    "Showing": "Showing",
    "AddNewTask": "Add New Task",
    "Language": "Language",
    "Chinese": "中文",
    "English": "English",
}

CATALOG: Final[dict[Language, dict[str, str]]] = {
    Language.ZH: _ZH,
    Language.EN: _EN,
}

_PRIORITY_LABELS: Final[dict[Language, tuple[str, str, str]]] = {
    Language.ZH: ("低", "中", "高"),
    Language.EN: ("Low", "Medium", "High"),
}

_WORKLOAD_LABELS: Final[dict[Language, tuple[str, str, str]]] = {
    Language.ZH: ("小", "中", "大"),
    Language.EN: ("Small", "Medium", "Large"),
}

_SORT_LABELS: Final[dict[Language, dict[SortKey, str]]] = {
    Language.ZH: {
        SortKey.NONE: "默认",
        SortKey.PRIORITY: "优先级",
        SortKey.DUE_DATE: "截止日期",
        SortKey.CREATED_DATE: "创建日期",
    },
    Language.EN: {
        SortKey.NONE: "Default",
        SortKey.PRIORITY: "Priority",
        SortKey.DUE_DATE: "Due Date",
        SortKey.CREATED_DATE: "Created Date",
    },
}

# Category labels seeded into a fresh session, localized at open time.
DEFAULT_CATEGORY_KEYS: Final[tuple[str, ...]] = ("Work", "Personal", "Study", "GameDev")


def lookup(language: Language, key: str) -> str | _Missing:
    return CATALOG[language].get(key, MISSING)


class Localizer:
    """Current display language + label helpers. Never touches task data."""

    __slots__ = ("language",)

    def __init__(self, language: Language = Language.ZH) -> None:
        self.language = language

    def text(self, key: str) -> str:
        value = lookup(self.language, key)
        return key if value is MISSING else str(value)

    def format(self, key: str, *args: object) -> str:
        value = lookup(self.language, key)
        if value is MISSING:
            return key
        return str(value).format(*args)

    def priority_label(self, priority: Priority | int) -> str:
        return _PRIORITY_LABELS[self.language][int(priority)]

    def workload_label(self, workload: Workload | int) -> str:
        return _WORKLOAD_LABELS[self.language][int(workload)]

    def sort_label(self, key: SortKey) -> str:
        return _SORT_LABELS[self.language][key]

    def default_categories(self) -> list[str]:
        return [self.text(k) for k in DEFAULT_CATEGORY_KEYS]

    def toggle(self) -> Language:
        self.language = self.language.other()
        return self.language
