"""Filesystem helpers shared across layers."""

import os
from pathlib import Path


def get_project_root() -> Path:
    """Return the source checkout root directory.

    Returns:
        Path: Directory holding the ``src`` folder. Only meaningful for a
        source or editable checkout.
    """
    return Path(__file__).resolve().parents[3]


def get_log_root() -> Path:
    """Return the directory receiving log files.

    ``NEAR_ACCOUNTS_LOG_DIR`` wins when set. A source checkout logs to
    ``<project root>/logs``; an installed package logs to
    ``~/.near-accounts/logs``.

    Returns:
        Path: Log root directory (not created here).
    """
    override = os.getenv("NEAR_ACCOUNTS_LOG_DIR")
    if override:
        return Path(override).expanduser()
    project_root = get_project_root()
    if (project_root / "pyproject.toml").exists():
        return project_root / "logs"
    return Path.home() / ".near-accounts" / "logs"


__all__ = ["get_project_root", "get_log_root"]
