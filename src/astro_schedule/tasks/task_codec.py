# src/astro_schedule/tasks/task_codec.py

"""
Line codec for the task file.

One task per line, five pipe-separated fields:

    description|start|end|priority|completed

No header and no escaping; descriptions and priorities must not contain "|".
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .task_models import Task

logger = logging.getLogger(__name__)

FIELD_SEP = "|"
FIELD_COUNT = 5


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() == "true"


def encode_task(task: Task) -> str:
    return FIELD_SEP.join(
        (
            task.description,
            task.start,
            task.end,
            task.priority,
            "true" if task.completed else "false",
        )
    )


def decode_line(line: str) -> Task | None:
    """Return the task stored on `line`, or None if the line is malformed."""
    parts = line.rstrip("\r\n").split(FIELD_SEP)
    if len(parts) != FIELD_COUNT:
        return None
    description, start, end, priority, completed = parts
    return Task(
        description=description,
        start=start,
        end=end,
        priority=priority,
        completed=_parse_bool(completed),
    )


def dumps(tasks: Iterable[Task]) -> str:
    return "".join(encode_task(t) + "\n" for t in tasks)


def loads(text: str) -> list[Task]:
    # Only "\n" ends a record; str.splitlines() also breaks on \x0c, \x85, \u2028 and friends.
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    out: list[Task] = []
    for lineno, line in enumerate(lines, start=1):
        task = decode_line(line)
        if task is None:
            logger.debug("Skipping malformed task line %d: %r", lineno, line)
            continue
        out.append(task)
    return out
