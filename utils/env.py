"""Environment helper utilities.

Loads a `.env` file from the project root so that ``ANALYTICS_*`` overrides
defined there are visible to the ``from_env`` constructors in ``config.config``.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

__all__ = ["load_project_dotenv", "env_float", "env_int"]


def _find_project_root(start: Path | None = None) -> Path:
    """Traverse upwards until we find a directory that contains `pyproject.toml`."""
    current = start or Path(__file__).resolve().parent
    for _ in range(10):
        if (current / "pyproject.toml").exists():
            return current
        if current.parent == current:
            break
        current = current.parent
    return Path(__file__).resolve().parent


def load_project_dotenv() -> bool:
    """Load environment variables from the project-level `.env` if present."""
    dotenv_path = _find_project_root() / ".env"
    if dotenv_path.exists():
        return load_dotenv(dotenv_path=dotenv_path, override=False)
    return False


def env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"Environment variable {name} must be a number, got {raw!r}") from e


def env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"Environment variable {name} must be an integer, got {raw!r}") from e
