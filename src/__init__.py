"""
TASKTRACE - Task Session Manager
================================

Single-user task list with an append-only console trace.

Usage:
    from tasktrace import TaskSession, run_startup_sequence

    session = TaskSession()
    run_startup_sequence(session, delay_seconds=0)

    session.add_task("Write release notes")
    session.complete_task(1)        # True, logs "Task 1 done."
    session.complete_task(99)       # False, logs "ID not found."
    session.reset_system()          # tasks == (), logs == ("System reset.",)

    for entry in session.logs:
        print(entry.render())

Author: tasktrace maintainers
"""

from .schema import (
    Task,
    LogEntry,
    SessionSnapshot,
    INIT_MESSAGE,
    SEED_TASKS,
    ABOUT_TEXT
)

from .manager import TaskSession, run_startup_sequence
from .config import Settings, get_settings

__version__ = "2.0.0"
__all__ = [
    "TaskSession",
    "run_startup_sequence",
    "Task",
    "LogEntry",
    "SessionSnapshot",
    "INIT_MESSAGE",
    "SEED_TASKS",
    "ABOUT_TEXT",
    "Settings",
    "get_settings"
]
