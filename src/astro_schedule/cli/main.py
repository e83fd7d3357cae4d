# src/astro_schedule/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs ONE slash command taken from argv:

    astro-schedule add "Standup" 09:00 09:15 High
    astro-schedule list
"""

from __future__ import annotations

import logging
import shlex
import sys

from ..cli.bootstrap import create_initial_state
from ..cli.commands import is_failure
from ..cli.commands import registry as command_registry
from ..config import get_settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    args = list(sys.argv[1:] if argv is None else argv)

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    setup_logging(
        log_dir=settings.data_dir,
        console_level=console_level,
        audit_log_path=settings.audit_log_path,
        console=settings.console_log,
    )

    logger.info("Starting %s...", settings.app_name)
    state = create_initial_state(settings=settings)

    if not args:
        args = ["help"]
    args[0] = args[0].lstrip("/")
    line = "/" + shlex.join(args)

    reply = command_registry.handle(state, line)
    print(reply or "")
    return 1 if is_failure(reply) else 0


if __name__ == "__main__":
    sys.exit(main())
