"""
TASKTRACE - Task Session
========================
Owns the task collection, the id counter and the session log.
Every mutation appends exactly one log entry describing its outcome.

Author: tasktrace maintainers
"""

import time
from datetime import datetime
from typing import Callable, List, Tuple
import logging

from .schema import (
    Task, LogEntry, SessionSnapshot,
    INIT_MESSAGE, SEED_TASKS,
    TASK_ADDED, TASK_DONE, ID_NOT_FOUND, SYSTEM_RESET
)

logger = logging.getLogger("tasktrace")


class TaskSession:
    """
    Single-user task session

    State:
    - tasks: insertion-ordered, never shrinks except on reset
    - logs: emission-ordered, append-only except on reset
    - next_id: strictly greater than every id handed out this session

    Calls are expected from one logical caller; no locking is done.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._clock = clock
        self._tasks: List[Task] = []
        self._logs: List[LogEntry] = []
        self._next_id = 1

    # ========================================
    # OBSERVATION
    # ========================================

    @property
    def tasks(self) -> Tuple[Task, ...]:
        """Copies of the current tasks, in insertion order"""
        return tuple(t.model_copy() for t in self._tasks)

    @property
    def logs(self) -> Tuple[LogEntry, ...]:
        return tuple(self._logs)

    @property
    def next_id(self) -> int:
        return self._next_id

    def snapshot(self) -> SessionSnapshot:
        """Copy of the whole session state"""
        return SessionSnapshot(
            tasks=list(self.tasks),
            logs=list(self._logs),
            next_id=self._next_id
        )

    # ========================================
    # OPERATIONS
    # ========================================

    def log_output(self, message: str) -> LogEntry:
        """Append a timestamped entry to the session log"""
        return self._emit(message, logging.INFO)

    def _emit(self, message: str, level: int) -> LogEntry:
        """Append an entry and mirror it to the tasktrace logger"""
        entry = LogEntry(timestamp=self._clock(), message=message)
        self._logs.append(entry)
        logger.log(level, f"📝 {message}")
        return entry

    def add_task(self, description: str) -> Task:
        """Create a task with the next id. Never fails."""
        task = Task(id=self._next_id, description=description)
        self._tasks.append(task)
        self._next_id += 1

        self.log_output(TASK_ADDED.format(description=description))
        return task.model_copy()

    def complete_task(self, task_id: int) -> bool:
        """
        Mark the first task with task_id as completed.

        Completing an already completed task logs "done" again.
        Returns False (and logs "ID not found.") when nothing matches.
        """
        for task in self._tasks:
            if task.id == task_id:
                task.completed = True
                self.log_output(TASK_DONE.format(id=task_id))
                return True

        self._emit(ID_NOT_FOUND, logging.WARNING)
        return False

    def reset_system(self) -> None:
        """Drop all tasks and logs, restart ids at 1, then log the reset"""
        dropped = len(self._tasks)
        self._tasks = []
        self._logs = []
        self._next_id = 1

        self.log_output(SYSTEM_RESET)
        logger.debug(f"🔄 Session reset ({dropped} tasks dropped)")

    # ========================================
    # REPORTING
    # ========================================

    def get_status_report(self) -> str:
        """Generate human-readable status report"""
        snap = self.snapshot()

        lines = [
            "📋 Task Manager",
            f"Progress: {'█' * (snap.progress_pct // 10)}{'░' * (10 - snap.progress_pct // 10)} {snap.progress_pct}%",
            f"Total: {snap.total_tasks} | Completed: {snap.completed_tasks} | Pending: {snap.pending_tasks}",
            "",
            "Tasks:"
        ]

        if not snap.tasks:
            lines.append("  No tasks available.")

        for task in snap.tasks:
            icon = "✅" if task.completed else "⬜"
            lines.append(f"  {icon} [{task.id}] {task.description}")

        return "\n".join(lines)


def run_startup_sequence(
    session: TaskSession,
    delay_seconds: float = 0.5,
    sleep: Callable[[float], None] = time.sleep
) -> None:
    """
    Seed a fresh session the way the application does on launch:
    short delay, init narration, then the sample tasks.
    """
    if delay_seconds > 0:
        sleep(delay_seconds)

    session.log_output(INIT_MESSAGE)
    for description in SEED_TASKS:
        session.add_task(description)

    logger.info(f"🚀 Startup sequence done ({len(SEED_TASKS)} tasks seeded)")
