# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from astro_schedule.core.state import AppState
from astro_schedule.tasks.schedule_store import ScheduleStore
from astro_schedule.tasks.task_file import TaskFile

from .fakes import FakeTaskRepo, RecordingObserver


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment and .env.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="astro-test",
        log_level="DEBUG",
        console_log=False,
        data_dir=data_dir,
        tasks_file_path=data_dir / "tasks.txt",
        audit_log_path=data_dir / "schedule_log.txt",
    )


@pytest.fixture()
def repo() -> FakeTaskRepo:
    return FakeTaskRepo()


@pytest.fixture()
def audit() -> logging.Logger:
    return logging.getLogger("astro_schedule.audit.test")


@pytest.fixture()
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture()
def store(repo: FakeTaskRepo, audit: logging.Logger, observer: RecordingObserver) -> ScheduleStore:
    s = ScheduleStore(repo, audit=audit)
    s.add_observer(observer)
    return s


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired like production, but on a tmp task file.

    NOTE: We keep the real TaskFile here because the file round-trip is
    part of what we want to test.
    """
    return AppState(settings=settings, schedule=ScheduleStore(TaskFile(settings.tasks_file_path)))
