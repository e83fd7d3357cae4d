# src/astro_schedule/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

# 24h clock, zero-padded: 00:00 .. 23:59
CLOCK_TIME_RE = re.compile(r"([01]\d|2[0-3]):[0-5]\d")

# Characters that would break the line-oriented task file.
FORBIDDEN_FIELD_CHARS = ("|", "\n", "\r")


def is_valid_time(value: Any) -> bool:
    """Return True if `value` is a 24-hour "HH:MM" clock string."""
    if not isinstance(value, str):
        return False
    return CLOCK_TIME_RE.fullmatch(value) is not None


def tasks_overlap(a: Task, b: Task) -> bool:
    """
    Half-open interval intersection: [a.start, a.end) vs [b.start, b.end).

    Zero-padded HH:MM strings compare lexicographically in time order,
    so no parsing is needed. Back-to-back tasks do not overlap.
    """
    return a.start < b.end and a.end > b.start


@dataclass(slots=True)
class Task:
    description: str
    start: str
    end: str
    priority: str
    completed: bool = False

    @classmethod
    def create(cls, description: str, start: str, end: str, priority: str) -> Task:
        return cls(
            description=description.strip(),
            start=start.strip(),
            end=end.strip(),
            priority=priority.strip(),
        )

    @property
    def key(self) -> str:
        """Case-insensitive identity used for lookups."""
        return self.description.lower()

    def matches(self, description: str) -> bool:
        # Exact text, case ignored; surrounding whitespace is significant.
        return self.key == description.lower()

    def mark_completed(self) -> None:
        self.completed = True

    def render(self) -> str:
        line = f"{self.start} - {self.end}: {self.description} [{self.priority}]"
        if self.completed:
            line += " [Completed]"
        return line
