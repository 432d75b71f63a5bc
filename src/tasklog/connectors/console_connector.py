# src/tasklog/connectors/console_connector.py

from __future__ import annotations

import logging

from ..core.ports import Emitter, LineSource
from ..core.session import process_line
from ..core.state import AppState

logger = logging.getLogger(__name__)

LINE = "_" * 60
FAREWELL = "Bye. Hope to see you again soon!"


def _print_block(emit: Emitter, text: str) -> None:
    emit(LINE)
    emit(text)
    emit(LINE)


def print_welcome(emit: Emitter, app_name: str) -> None:
    _print_block(emit, f"Hello! I'm {app_name}\nWhat can I do for you? (type help for commands)")


def run_console_loop(
    state: AppState,
    read_line: LineSource = input,
    emit: Emitter = print,
) -> None:
    logger.info("Console connector started (tasks=%d).", len(state.tasks))
    app_name = str(getattr(state.settings, "app_name", "tasklog"))
    print_welcome(emit, app_name)

    while True:
        try:
            user_input = read_line().strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            _print_block(emit, FAREWELL)
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            _print_block(emit, FAREWELL)
            break

        if not user_input:
            continue

        try:
            outcome = process_line(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            _print_block(emit, "Internal error while handling a command.")
            continue

        _print_block(emit, outcome.message)
        if outcome.exit:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
