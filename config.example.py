# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKLOG_APP_NAME": "Name shown in the welcome banner (default: tasklog).",
    "TASKLOG_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Paths
    "TASKLOG_DATA_DIR": "Directory holding the task file (default: data).",
    "TASKLOG_DATA_FILE": "Task file name inside the data directory (default: tasks.txt).",
    "TASKLOG_LOG_DIR": "Directory for tasklog.log (default: <data_dir>/logs).",
}
