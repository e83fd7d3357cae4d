# src/astro_schedule/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the task file and schedule store into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.schedule_store import ScheduleStore
from ..tasks.task_file import TaskFile
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_file_path.parent.mkdir(parents=True, exist_ok=True)
    settings.audit_log_path.parent.mkdir(parents=True, exist_ok=True)


def warn_on_conflict(new_task: Task, existing_task: Task) -> None:
    """Default conflict observer: surface the collision on the console log."""
    logger.warning(
        "Conflict: task '%s' overlaps with '%s' (%s - %s)",
        new_task.description,
        existing_task.description,
        existing_task.start,
        existing_task.end,
    )


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    schedule = ScheduleStore(TaskFile(settings.tasks_file_path))
    schedule.add_observer(warn_on_conflict)

    return AppState(settings=settings, schedule=schedule)
