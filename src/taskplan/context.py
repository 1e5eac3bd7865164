"""Process-wide state set by the CLI callback and read by config discovery."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class CliState:
    """Options given once on the command line and shared by every subcommand."""

    config_path: Path | None = None


_state = CliState()


def reset_state() -> None:
    """Forget options from a previous invocation (CliRunner reuses the process)."""
    _state.config_path = None


def get_config_path() -> Path | None:
    """Config file named with --config, if any."""
    return _state.config_path


def set_config_path(path: Path | None) -> None:
    _state.config_path = path
