"""Where tasklocation keeps its config file and logs.

Both live beside the checkout: ``config/config.toml`` and ``logs/`` under the
directory holding ``pyproject.toml`` (or ``.git``). ``TASKLOCATION_LOG_DIR``
moves the logs elsewhere.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final


LOG_DIR_ENV: Final[str] = "TASKLOCATION_LOG_DIR"
LOG_FILE_NAME: Final[str] = "tasklocation.log"
_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def env_path(name: str, env: Mapping[str, str] | None = None) -> Path | None:
    """Return the path named by environment variable ``name``, if set and non-blank."""

    raw = (os.environ if env is None else env).get(name, "").strip()
    return Path(raw).expanduser().resolve() if raw else None


def _detect_repo_root(start: Path | None = None) -> Path:
    """Nearest ancestor of ``start`` (this module by default) carrying a root marker."""

    origin = (start or Path(__file__).resolve()).parent
    candidates = (origin, *origin.parents)
    return next(
        (d for d in candidates if any((d / marker).exists() for marker in _ROOT_MARKERS)),
        Path.cwd(),
    )


def default_config_path() -> Path:
    return (_detect_repo_root() / "config" / "config.toml").resolve()


def default_log_dir(env: Mapping[str, str] | None = None) -> Path:
    """Log directory, honoring ``TASKLOCATION_LOG_DIR``."""

    return env_path(LOG_DIR_ENV, env) or (_detect_repo_root() / "logs").resolve()


def default_log_file(env: Mapping[str, str] | None = None) -> Path:
    return default_log_dir(env) / LOG_FILE_NAME


__all__ = [
    "LOG_DIR_ENV",
    "LOG_FILE_NAME",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "env_path",
]
