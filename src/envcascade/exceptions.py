"""
envcascade exception hierarchy.

All domain-specific exceptions inherit from EnvcascadeError. The loader
catches them internally and turns them into log records, so they surface
only to callers that use the parser or an environment directly.

Hierarchy::

    EnvcascadeError
    ├── EnvFileError              - a candidate file could not be loaded
    │   ├── EnvFileOpenError      - file exists but cannot be opened
    │   └── EnvFileReadError      - reading lines failed partway through
    └── PublishError              - the host rejected a variable
"""

from __future__ import annotations

from pathlib import Path


class EnvcascadeError(Exception):
    """Base exception for all envcascade errors."""

    def __init__(self, message: str, *, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


# --- Files -------------------------------------------------------------------


class EnvFileError(EnvcascadeError):
    """Raised when an env file cannot be loaded."""

    def __init__(self, path: str | Path, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message, details={"path": str(path)})
        self.path = Path(path)
        if cause is not None:
            self.__cause__ = cause


class EnvFileOpenError(EnvFileError):
    """Raised when an env file exists but cannot be opened."""

    def __init__(self, path: str | Path, cause: Exception) -> None:
        super().__init__(path, f"Unable to open file '{path}': {cause}", cause=cause)


class EnvFileReadError(EnvFileError):
    """Raised when the line stream of an env file fails."""

    def __init__(self, path: str | Path, cause: Exception) -> None:
        super().__init__(path, f"Failed to read file '{path}': {cause}", cause=cause)


# --- Publishing --------------------------------------------------------------


class PublishError(EnvcascadeError):
    """Raised when a variable cannot be written to the environment."""

    def __init__(self, key: str, reason: str | Exception) -> None:
        super().__init__(
            f"Unable to set environment variable '{key}': {reason}",
            details={"key": key},
        )
        self.key = key
        if isinstance(reason, Exception):
            self.__cause__ = reason
