"""
Environment modes and their candidate files.

The mode decides which env files are considered and in what order. The
table is fixed; earlier names take precedence over later ones.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple

from envcascade.utils.logging import get_logger

logger = get_logger("envcascade.modes")

# Name of the process variable that selects the mode
MODE_VARIABLE = "APP_ENV"


class Mode(str, Enum):
    """
    Configuration profile driving candidate selection.

    Modes:
        DEVELOPMENT: Local development (default for unknown or unset values)
        PRODUCTION: Deployed service
        TEST: Test runs
    """

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TEST = "test"


DEFAULT_MODE = Mode.DEVELOPMENT

CANDIDATE_FILES: Dict[Mode, Tuple[str, ...]] = {
    Mode.DEVELOPMENT: (
        ".env.development.local",
        ".env.dev.local",
        ".env.development",
        ".env.dev",
        ".env.local",
        ".env",
    ),
    Mode.PRODUCTION: (
        ".env.production.local",
        ".env.prod.local",
        ".env.production",
        ".env.prod",
        ".env.local",
        ".env",
    ),
    Mode.TEST: (
        ".env.test.local",
        ".env.test",
        ".env.testing",
        ".env.local",
        ".env",
    ),
}


def select_mode(value: Optional[str]) -> Mode:
    """
    Map an external mode string to a Mode.

    Matching is exact and case-sensitive. Anything else, including an unset
    value, falls back to DEFAULT_MODE with a warning.

    Args:
        value: Raw mode string (may be None or empty)

    Returns:
        The selected Mode
    """
    for mode in Mode:
        if value == mode.value:
            return mode
    logger.warning(
        f"Environment '{value or ''}' is not recognized. "
        f"Defaulting to '{DEFAULT_MODE.value}' environment files."
    )
    return DEFAULT_MODE


def candidate_files(mode: Mode) -> Tuple[str, ...]:
    """Return the candidate filenames for ``mode``, highest precedence first."""
    return CANDIDATE_FILES.get(mode, ())
