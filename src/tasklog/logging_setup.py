# src/tasklog/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "tasklog.log"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


class _ReplFilter(logging.Filter):
    """
    stderr shares the terminal with the task REPL.

    Records from the tasklog package pass (the handler level still applies);
    anything else, including captured warnings, needs ERROR to be shown.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "tasklog" or record.name.startswith("tasklog."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = "data/logs",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Route logs to stderr (filtered, `console_level`) and to
    `<log_dir>/tasklog.log` (`file_level`, DEBUG by default).

    Replaces any handlers already on the root logger. Returns the log file path.
    """
    log_path = Path(log_dir) / LOG_FILE_NAME
    log_path.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(formatter)
    console.addFilter(_ReplFilter())
    root.addHandler(console)

    # Full trail, including save/load tracebacks logged at DEBUG.
    log_file = logging.FileHandler(str(log_path), encoding="utf-8")
    log_file.setLevel(file_level)
    log_file.setFormatter(formatter)
    root.addHandler(log_file)

    logging.captureWarnings(True)
    return log_path
