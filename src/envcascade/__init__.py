"""
envcascade - mode-aware .env file loading.

Picks the highest-priority .env file for the current mode (APP_ENV), expands
its local {$name} variables and publishes the rest into the process
environment.

    import envcascade

    envcascade.load()
"""

__version__ = "0.1.0"

from envcascade.environment import Environment, MemoryEnvironment, ProcessEnvironment
from envcascade.exceptions import (
    EnvcascadeError,
    EnvFileError,
    EnvFileOpenError,
    EnvFileReadError,
    PublishError,
)
from envcascade.modes import CANDIDATE_FILES, DEFAULT_MODE, MODE_VARIABLE, Mode, candidate_files, select_mode
from envcascade.parser import parse_file
from envcascade.resolver import candidate_paths, load, resolve
from envcascade.utils.logging import get_logger, setup_logging

__all__ = [
    # Entry points
    "load",
    "resolve",
    "candidate_paths",
    "parse_file",
    # Modes
    "Mode",
    "MODE_VARIABLE",
    "DEFAULT_MODE",
    "CANDIDATE_FILES",
    "candidate_files",
    "select_mode",
    # Environments
    "Environment",
    "ProcessEnvironment",
    "MemoryEnvironment",
    # Exceptions
    "EnvcascadeError",
    "EnvFileError",
    "EnvFileOpenError",
    "EnvFileReadError",
    "PublishError",
    # Logging
    "get_logger",
    "setup_logging",
]
