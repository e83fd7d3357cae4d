"""Single-user daily task scheduler with conflict detection and flat-file persistence."""

__version__ = "0.1.0"
