"""Process-wide settings captured from the global CLI options."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class RunContext:
    """Options given before the subcommand (``termplan -c cfg.yaml schedule ...``)."""

    config_path: Path | None = None


_context = RunContext()


def get_config_path() -> Path | None:
    """Get the config path given on the command line, if any."""
    return _context.config_path


def set_context(*, config_path: Path | None = None) -> None:
    """Replace the global options."""
    _context.config_path = config_path


def reset_context() -> None:
    """Restore defaults (used between tests)."""
    set_context()
