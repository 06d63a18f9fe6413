"""Layered .env loading.

Variables are read from the user .env ($XDG_CONFIG_HOME/vohydrator/.env),
then the project .env and .env.local. Later files win over earlier ones, and
nothing read from a file replaces a variable already exported in the process
environment:

  os.environ (pre-existing) > project .env.local > project .env > user .env
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from dotenv import dotenv_values

from .loader import get_xdg_config_home

logger = logging.getLogger(__name__)


def read_env_file(path: Path) -> dict[str, str]:
    """Read one .env file, dropping keys without a value. Missing files read as empty."""
    if not path.is_file():
        return {}
    return {key: value for key, value in dotenv_values(path).items() if value is not None}


def load_layered_env(
    *,
    project_dir: Path | None = None,
    user_env_paths: Iterable[Path] | None = None,
    project_env_paths: Iterable[Path] | None = None,
) -> dict[str, str]:
    """
    Export variables from user and project .env files into os.environ.

    Args:
        project_dir: Base directory for the default project files (defaults to cwd)
        user_env_paths: Explicit user env files, lowest precedence
        project_env_paths: Explicit project env files, in increasing precedence

    Returns:
        The variables that were exported.
    """
    if project_dir is None:
        project_dir = Path.cwd()
    if user_env_paths is None:
        user_env_paths = [get_xdg_config_home() / "vohydrator" / ".env"]
    if project_env_paths is None:
        project_env_paths = [project_dir / ".env", project_dir / ".env.local"]

    layered: dict[str, str] = {}
    for path in [*user_env_paths, *project_env_paths]:
        layered.update(read_env_file(Path(path)))

    exported = {key: value for key, value in layered.items() if key not in os.environ}
    os.environ.update(exported)

    if exported:
        logger.debug(f"Exported {', '.join(sorted(exported))} from .env files")
    return exported
