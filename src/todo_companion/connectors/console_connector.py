# src/todo_companion/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..cli.commands import render_task_list
from ..core.state import AppState

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def run_console_loop(
    state: AppState,
    *,
    read: InputFn = input,
    write: OutputFn = print,
) -> None:
    """
    Interactive session: one slash command per line until /exit or EOF.

    `read`/`write` default to the terminal and are injectable for tests.
    """
    logger.info("Console session started (language=%s).", state.localizer.language.value)
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "todo"))
    write(f"[{app_name}] Use /help for commands. Use /exit to quit.")
    write(render_task_list(state))

    def emit(text: str) -> None:
        write(text)

    while True:
        try:
            user_input = read(f"{app_name}> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            response = command_registry.handle(state, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed: %r", user_input)
            response = "Internal error while handling a command."

        if response is None:
            response = "Commands start with '/'. Use /help to list available commands."
        write(response)

    logger.info("Console session finished (tasks=%d).", len(state.store))
