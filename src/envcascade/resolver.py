"""
Env file resolution.

Picks exactly one env file from the mode's candidate list and hands it to the
parser. The first candidate that exists and parses wins; a candidate that
exists but fails is logged and the next one is tried.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional, Set, Tuple

from envcascade.environment import Environment, ProcessEnvironment
from envcascade.exceptions import EnvcascadeError
from envcascade.modes import MODE_VARIABLE, Mode, candidate_files, select_mode
from envcascade.parser import parse_file
from envcascade.utils.logging import get_logger

logger = get_logger("envcascade.resolver")


def load(
    directory: str | Path | None = None,
    *,
    mode: Optional[str] = None,
    environment: Optional[Environment] = None,
    mode_variable: str = MODE_VARIABLE,
) -> None:
    """
    Load environment variables from the highest-priority env file.

    Called with no arguments it reads the mode from ``APP_ENV``, scans the
    current directory and publishes into ``os.environ``. Every outcome is
    reported through the "envcascade" logger; nothing is raised or returned.

    Args:
        directory: Directory to scan (default: current working directory)
        mode: Mode string (default: value of ``mode_variable``)
        environment: Publish target (default: the process environment)
        mode_variable: Process variable holding the mode (default: APP_ENV)
    """
    resolve(directory, mode=mode, environment=environment, mode_variable=mode_variable)


def resolve(
    directory: str | Path | None = None,
    *,
    mode: Optional[str] = None,
    environment: Optional[Environment] = None,
    mode_variable: str = MODE_VARIABLE,
) -> Optional[Path]:
    """
    Same as load(), but report which file was loaded.

    Returns:
        Path of the loaded file, or None if nothing was loaded
    """
    selected = _select(mode, mode_variable)

    directory = _directory(directory)
    if directory is None:
        return None

    present = _list_files(directory)
    if present is None:
        return None

    if environment is None:
        environment = ProcessEnvironment()

    for name in candidate_files(selected):
        if name not in present:
            continue

        file_path = directory / name
        try:
            parse_file(file_path, environment)
        except EnvcascadeError as e:
            logger.error(f"Failed to load environment variables from '{file_path}': {e}")
            continue

        logger.info(f"Successfully loaded environment variables from '{file_path}'")
        return file_path

    logger.warning(
        "No .env file was successfully loaded. "
        "Ensure at least one of the expected .env files exists in the current directory."
    )
    return None


def candidate_paths(
    directory: str | Path | None = None,
    *,
    mode: Optional[str] = None,
    mode_variable: str = MODE_VARIABLE,
) -> List[Tuple[Path, bool]]:
    """
    List the candidate files for a mode without parsing anything.

    Returns:
        (path, exists) pairs in precedence order; empty if the directory
        cannot be read
    """
    selected = _select(mode, mode_variable)

    directory = _directory(directory)
    if directory is None:
        return []

    present = _list_files(directory)
    if present is None:
        return []

    return [(directory / name, name in present) for name in candidate_files(selected)]


def _select(mode: Optional[str], mode_variable: str) -> Mode:
    if mode is None:
        mode = os.environ.get(mode_variable)
    return select_mode(mode)


def _directory(directory: str | Path | None) -> Optional[Path]:
    """Resolve the directory to scan, logging if the working directory is gone."""
    if directory is not None:
        return Path(directory)
    try:
        return Path(os.getcwd())
    except OSError as e:
        logger.error(f"Could not get the current working directory: {e}")
        return None


def _list_files(directory: Path) -> Optional[Set[str]]:
    """Snapshot the names of non-directory entries in ``directory``."""
    try:
        with os.scandir(directory) as entries:
            return {entry.name for entry in entries if not entry.is_dir()}
    except OSError as e:
        logger.error(f"Could not read the directory '{directory}': {e}")
        return None
