"""
TASKTRACE - Session Schema Definition
=====================================
Tasks, log entries and session snapshots for the task/log state machine.

Author: tasktrace maintainers
"""

from typing import List
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
import uuid


# ============================================================
# MESSAGES
# ============================================================

INIT_MESSAGE = "Initializing TaskManager..."
SEED_TASKS = ("Refactor Legacy Code", "Upload Multiple Files")

TASK_ADDED = "Task added: {description}"
TASK_DONE = "Task {id} done."
ID_NOT_FOUND = "ID not found."
SYSTEM_RESET = "System reset."

ABOUT_TEXT = (
    "Legacy C++ Task Manager\n"
    "Ported to Python.\n"
    "Version 2.0.0 (Modernized)"
)


class Task(BaseModel):
    """Individual task definition"""
    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(ge=1)           # Session-scoped, never reused
    description: str                # Free text, may be empty
    completed: bool = False         # One-way: False -> True


class LogEntry(BaseModel):
    """One line of the session console trace"""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex[:12])
    timestamp: datetime
    message: str

    @property
    def display_time(self) -> str:
        return self.timestamp.strftime("%H:%M:%S")

    def render(self) -> str:
        return f"[{self.display_time}] {self.message}"


class SessionSnapshot(BaseModel):
    """Point-in-time copy of a TaskSession"""
    tasks: List[Task] = Field(default_factory=list)
    logs: List[LogEntry] = Field(default_factory=list)
    next_id: int = Field(ge=1, default=1)

    @property
    def total_tasks(self) -> int:
        return len(self.tasks)

    @property
    def completed_tasks(self) -> int:
        return sum(1 for t in self.tasks if t.completed)

    @property
    def pending_tasks(self) -> int:
        return self.total_tasks - self.completed_tasks

    @property
    def progress_pct(self) -> int:
        if not self.tasks:
            return 0
        return int((self.completed_tasks / len(self.tasks)) * 100)
