# src/astro_schedule/tasks/task_api.py

"""
Command surface used by outer layers (slash commands, scripts).

The store raises ScheduleError subclasses; here they become CommandResult
values so callers never need to know the exception hierarchy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from ..core.ports import ConflictObserver
from ..core.state import AppState
from ..errors import (
    DuplicateTask,
    InvalidTaskField,
    InvalidTimeFormat,
    PersistenceFailure,
    ScheduleError,
    TaskConflict,
    TaskNotFound,
)
from .task_models import Task

logger = logging.getLogger(__name__)


class Outcome(StrEnum):
    SUCCESS = "success"
    INVALID_TIME_FORMAT = "invalid_time_format"
    INVALID_FIELD = "invalid_field"
    DUPLICATE = "duplicate"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    PERSISTENCE_FAILURE = "persistence_failure"


_OUTCOME_BY_ERROR: dict[type[ScheduleError], Outcome] = {
    InvalidTimeFormat: Outcome.INVALID_TIME_FORMAT,
    InvalidTaskField: Outcome.INVALID_FIELD,
    DuplicateTask: Outcome.DUPLICATE,
    TaskConflict: Outcome.CONFLICT,
    TaskNotFound: Outcome.NOT_FOUND,
    PersistenceFailure: Outcome.PERSISTENCE_FAILURE,
}


@dataclass(slots=True)
class CommandResult:
    outcome: Outcome
    message: str
    task: Task | None = None
    conflict: Task | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SUCCESS


def _failure(err: ScheduleError) -> CommandResult:
    outcome = _OUTCOME_BY_ERROR.get(type(err))
    if outcome is None:
        raise err
    if isinstance(err, PersistenceFailure):
        logger.warning("%s (changes were not saved)", err)
    conflict = err.existing_task if isinstance(err, TaskConflict) else None
    return CommandResult(outcome=outcome, message=str(err), conflict=conflict)


def add_task(
    state: AppState,
    description: str,
    start: str,
    end: str,
    priority: str,
) -> CommandResult:
    task = Task.create(description, start, end, priority)
    try:
        state.schedule.add(task)
    except ScheduleError as e:
        return _failure(e)
    return CommandResult(Outcome.SUCCESS, "Task added successfully.", task=task)


def remove_task(state: AppState, description: str) -> CommandResult:
    try:
        task = state.schedule.remove(description)
    except ScheduleError as e:
        return _failure(e)
    return CommandResult(Outcome.SUCCESS, "Task removed successfully.", task=task)


def edit_task(
    state: AppState,
    description: str,
    new_description: str,
    new_start: str,
    new_end: str,
    new_priority: str,
) -> CommandResult:
    try:
        task = state.schedule.edit(description, new_description, new_start, new_end, new_priority)
    except ScheduleError as e:
        return _failure(e)
    return CommandResult(Outcome.SUCCESS, "Task updated successfully.", task=task)


def complete_task(state: AppState, description: str) -> CommandResult:
    try:
        task = state.schedule.mark_completed(description)
    except ScheduleError as e:
        return _failure(e)
    return CommandResult(Outcome.SUCCESS, "Task marked as completed.", task=task)


def list_tasks(state: AppState) -> list[Task]:
    return state.schedule.list()


def filter_by_priority(state: AppState, priority: str) -> list[Task]:
    return state.schedule.filter_by_priority(priority)


def register_conflict_observer(state: AppState, observer: ConflictObserver) -> None:
    state.schedule.add_observer(observer)
