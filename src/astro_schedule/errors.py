# src/astro_schedule/errors.py

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .tasks.task_models import Task


class ScheduleError(Exception):
    """Base class for every recoverable schedule command failure."""


class InvalidTimeFormat(ScheduleError):
    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid time format (HH:MM): {value!r}")
        self.value = value


class InvalidTaskField(ScheduleError):
    """A description or priority that cannot be stored in the task file."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"Invalid {field}: {value!r}")
        self.field = field
        self.value = value


class DuplicateTask(ScheduleError):
    def __init__(self, description: str) -> None:
        super().__init__(f"Task already exists: {description!r}")
        self.description = description


class TaskConflict(ScheduleError):
    def __init__(self, new_task: Task, existing_task: Task) -> None:
        super().__init__(
            f"Task {new_task.description!r} overlaps with {existing_task.description!r}"
        )
        self.new_task = new_task
        self.existing_task = existing_task


class TaskNotFound(ScheduleError):
    def __init__(self, description: str) -> None:
        super().__init__(f"Task not found: {description!r}")
        self.description = description


class PersistenceFailure(ScheduleError):
    """Reading or writing the task file failed."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Task file {path}: {reason}")
        self.path = Path(path)
        self.reason = reason
