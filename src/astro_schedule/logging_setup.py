# src/astro_schedule/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

from .tasks.schedule_store import AUDIT_LOGGER_NAME


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the console readable:
    - allow astro_schedule logs
    - suppress audit lines (they go to their own file)
    - suppress third-party noise unless ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == AUDIT_LOGGER_NAME or name.startswith(AUDIT_LOGGER_NAME + "."):
            return False

        if name.startswith("astro_schedule."):
            return True

        # Python warnings captured into logging.
        if name == "py.warnings":
            return record.levelno >= logging.ERROR

        return record.levelno >= logging.ERROR


def setup_audit_log(path: str | Path) -> logging.Handler:
    """
    Attach an append-only audit file handler to the audit logger.

    Lines look like: [2024-05-01 09:00:00] Task added: Standup
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    audit = logging.getLogger(AUDIT_LOGGER_NAME)
    audit.setLevel(logging.INFO)

    # Re-running setup must not duplicate audit lines.
    for h in list(audit.handlers):
        audit.removeHandler(h)
        h.close()

    handler = logging.FileHandler(str(path), mode="a", encoding="utf-8")
    handler.setFormatter(
        logging.Formatter(fmt="[%(asctime)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    audit.addHandler(handler)
    return handler


def setup_logging(
    *,
    log_dir: str | Path = ".local/astro",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    audit_log_path: str | Path | None = None,
    console: bool = True,
) -> None:
    """
    Configure logging with:
    - Console handler: filtered for interactive use (optional)
    - File handler: full logs for debugging
    - Audit handler: timestamped schedule events, append-only

    Call this ONCE, very early (before first logger.info).
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "astro.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if console:
        ch = logging.StreamHandler(sys.stderr)
        ch.setLevel(console_level)
        ch.setFormatter(fmt)
        ch.addFilter(_ConsoleNoiseFilter())
        root.addHandler(ch)

    # File (everything, audit events included)
    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    setup_audit_log(audit_log_path if audit_log_path is not None else log_dir / "schedule_log.txt")

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
