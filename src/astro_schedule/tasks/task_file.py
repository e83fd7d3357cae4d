# src/astro_schedule/tasks/task_file.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..errors import PersistenceFailure
from . import task_codec
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskFile:
    """
    Flat-file task repository.

    - load(): full read; a missing file is an empty schedule
    - save(): full rewrite via a temp sibling + os.replace (prior content is discarded)

    No locking: one process owns the file at a time.
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.debug("Task file %s does not exist yet.", self._path)
            return []
        try:
            # newline="": records are split by the codec, not by universal newlines
            with self._path.open("r", encoding="utf-8", newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceFailure(self._path, f"read failed: {e}") from e

        tasks = task_codec.loads(text)
        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        data = task_codec.dumps(tasks)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(data, "utf-8", newline="")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise PersistenceFailure(self._path, f"write failed: {e}") from e
        logger.debug("Saved task file %s (%d bytes)", self._path, len(data))
