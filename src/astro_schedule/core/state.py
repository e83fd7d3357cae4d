# src/astro_schedule/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.schedule_store import ScheduleStore


@dataclass
class AppState:
    # Settings object (config.Settings or a test double with the same attributes).
    settings: Any
    schedule: ScheduleStore
