# src/astro_schedule/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The schedule store depends on Protocols instead of concrete implementations,
so the flat file can be swapped for an in-memory fake in tests.
"""

from collections.abc import Callable, Iterable
from typing import Protocol

from ..tasks.task_models import Task

ConflictObserver = Callable[[Task, Task], None]
# Called as observer(new_task, existing_task) when an add/edit collides.


class TaskRepo(Protocol):
    """Durable storage for the whole task collection."""

    def load(self) -> list[Task]: ...
    def save(self, tasks: Iterable[Task]) -> None: ...
