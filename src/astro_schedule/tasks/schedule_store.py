# src/astro_schedule/tasks/schedule_store.py

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator
from dataclasses import replace

from ..core.ports import ConflictObserver, TaskRepo
from ..errors import (
    DuplicateTask,
    InvalidTaskField,
    InvalidTimeFormat,
    PersistenceFailure,
    TaskConflict,
    TaskNotFound,
)
from .task_models import FORBIDDEN_FIELD_CHARS, Task, is_valid_time, tasks_overlap

logger = logging.getLogger(__name__)

AUDIT_LOGGER_NAME = "astro_schedule.audit"


def _restore(task: Task, saved: Task) -> Task:
    task.description = saved.description
    task.start = saved.start
    task.end = saved.end
    task.priority = saved.priority
    task.completed = saved.completed
    return task


class ScheduleStore:
    """
    In-memory daily schedule backed by a TaskRepo.

    Invariants while a task is held here:
    - start/end are valid HH:MM strings
    - no two tasks overlap (half-open intervals)
    - descriptions are unique, compared case-insensitively

    Every successful mutation saves the whole collection before returning.
    If the save fails, the mutation is rolled back and PersistenceFailure
    is raised, so memory never drifts from the file.
    """

    def __init__(self, repo: TaskRepo, *, audit: logging.Logger | None = None) -> None:
        self._repo = repo
        self._audit = audit if audit is not None else logging.getLogger(AUDIT_LOGGER_NAME)
        self._tasks: list[Task] = []
        self._observers: list[ConflictObserver] = []

        try:
            self._tasks = repo.load()
        except PersistenceFailure as e:
            logger.error("Failed to load tasks, starting with an empty schedule: %s", e)
            self._audit.warning("Failed to load tasks: %s", e.reason)

        logger.info("ScheduleStore ready tasks=%d", len(self._tasks))

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    # ---- observers ----

    def add_observer(self, observer: ConflictObserver) -> None:
        self._observers.append(observer)

    def _notify_conflict(self, new_task: Task, existing: Task) -> None:
        self._audit.info(
            "Conflict detected between: %s and %s", new_task.description, existing.description
        )
        for observer in list(self._observers):
            try:
                observer(new_task, existing)
            except Exception:
                logger.exception("Conflict observer %r failed", observer)

    # ---- helpers ----

    def find(self, description: str) -> Task | None:
        for t in self._tasks:
            if t.matches(description):
                return t
        return None

    def _require(self, description: str) -> Task:
        task = self.find(description)
        if task is None:
            logger.debug("Task lookup failed description=%r", description)
            raise TaskNotFound(description)
        return task

    def _validate(self, candidate: Task, *, ignore: Task | None = None) -> None:
        for value in (candidate.start, candidate.end):
            if not is_valid_time(value):
                self._audit.info("Invalid time format for task: %s", candidate.description)
                raise InvalidTimeFormat(value)

        if not candidate.description.strip():
            raise InvalidTaskField("description", candidate.description)
        for field, value in (("description", candidate.description), ("priority", candidate.priority)):
            if any(ch in value for ch in FORBIDDEN_FIELD_CHARS):
                self._audit.info("Invalid %s for task: %s", field, candidate.description)
                raise InvalidTaskField(field, value)

        # Overlap wins over duplicate: a same-named overlapping task is a conflict.
        for t in self._tasks:
            if t is not ignore and tasks_overlap(candidate, t):
                self._notify_conflict(candidate, t)
                raise TaskConflict(candidate, t)

        for t in self._tasks:
            if t is not ignore and t.key == candidate.key:
                raise DuplicateTask(candidate.description)

    @contextlib.contextmanager
    def _transaction(self) -> Iterator[None]:
        before = self._tasks
        saved = [(t, replace(t)) for t in before]
        self._tasks = list(before)
        yield
        try:
            self._repo.save(self._tasks)
        except PersistenceFailure as e:
            self._tasks = [_restore(t, s) for t, s in saved]
            logger.error("Save failed, change rolled back: %s", e)
            self._audit.warning("Failed to save tasks: %s", e.reason)
            raise

    # ---- public API ----

    def count(self) -> int:
        return len(self._tasks)

    def add(self, task: Task) -> Task:
        self._validate(task)
        with self._transaction():
            self._tasks.append(task)
        self._audit.info("Task added: %s", task.description)
        return task

    def remove(self, description: str) -> Task:
        task = self._require(description)
        with self._transaction():
            self._tasks.remove(task)
        self._audit.info("Task removed: %s", task.description)
        return task

    def edit(
        self,
        description: str,
        new_description: str,
        new_start: str,
        new_end: str,
        new_priority: str,
    ) -> Task:
        """
        Overwrite all editable fields of the task named `description`.

        The new values go through the same checks as add(), against every
        other task in the schedule (the edited task never conflicts with itself).
        """
        task = self._require(description)
        candidate = Task(
            description=new_description.strip(),
            start=new_start.strip(),
            end=new_end.strip(),
            priority=new_priority.strip(),
            completed=task.completed,
        )
        self._validate(candidate, ignore=task)

        old_description = task.description
        with self._transaction():
            task.description = candidate.description
            task.start = candidate.start
            task.end = candidate.end
            task.priority = candidate.priority
        self._audit.info("Task edited: %s -> %s", old_description, task.description)
        return task

    def mark_completed(self, description: str) -> Task:
        task = self._require(description)
        with self._transaction():
            task.mark_completed()
        self._audit.info("Task completed: %s", task.description)
        return task

    def list(self) -> list[Task]:
        """Sort the schedule by start time (stable, in place) and return a snapshot."""
        self._tasks.sort(key=lambda t: t.start)
        return list(self._tasks)

    def filter_by_priority(self, priority: str) -> list[Task]:
        wanted = priority.lower()
        return [t for t in self._tasks if t.priority.lower() == wanted]

    def reload(self) -> None:
        """Replace the in-memory schedule with the repository content."""
        self._tasks = self._repo.load()
        logger.info("Reloaded %d tasks", len(self._tasks))
