# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name used in the console prompt (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Display
    "TODO_LANGUAGE": "Initial display language: zh or en (default: zh). Toggle with /lang.",
    # Task defaults
    "TODO_DEFAULT_DUE_DAYS": "Days until the due date of a new task (default: 7).",
    "TODO_CATEGORIES": (
        "Comma separated starting categories "
        "(default: Work, Personal, Study, Game Development in the display language)."
    ),
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory (default: .local/todo).",
    "TODO_LOG_DIR": "Directory for todo.log (default: <data_dir>).",
    "TODO_EXPORT_DIR": "Default directory for /export files (default: <data_dir>/exports).",
}
