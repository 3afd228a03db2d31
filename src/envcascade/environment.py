"""
Publish targets for parsed variables.

The parser never touches ``os.environ`` directly; it writes through an
Environment so the process table can be swapped for an in-memory one.

Example:
    from envcascade import MemoryEnvironment, load

    env = MemoryEnvironment()
    load(environment=env)
    print(env.variables)
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

from envcascade.exceptions import PublishError


class Environment(ABC):
    """Abstract base class for variable publish targets."""

    @abstractmethod
    def publish(self, key: str, value: str) -> None:
        """
        Make ``key`` visible with ``value``.

        Raises:
            PublishError: If the target rejects the pair
        """
        ...

    @abstractmethod
    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return the current value of ``key``."""
        ...


class ProcessEnvironment(Environment):
    """Publishes into the real process environment (``os.environ``)."""

    def publish(self, key: str, value: str) -> None:
        try:
            os.environ[key] = value
        except (ValueError, OSError) as e:
            raise PublishError(key, e) from e

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return os.environ.get(key, default)

    def __repr__(self) -> str:
        return "ProcessEnvironment()"


class MemoryEnvironment(Environment):
    """
    Dict-backed environment for previews and tests.

    Rejects the same names and values the host environment rejects, so
    publish failures behave the same way without touching ``os.environ``.
    Every accepted publish is appended to ``history`` in call order.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.variables: Dict[str, str] = dict(initial or {})
        self.history: List[Tuple[str, str]] = []

    def publish(self, key: str, value: str) -> None:
        if not key:
            raise PublishError(key, "empty variable name")
        if "=" in key:
            raise PublishError(key, "illegal environment variable name")
        if "\x00" in key or "\x00" in value:
            raise PublishError(key, "embedded null byte")
        self.variables[key] = value
        self.history.append((key, value))

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.variables.get(key, default)

    def __contains__(self, key: str) -> bool:
        return key in self.variables

    def __len__(self) -> int:
        return len(self.variables)

    def __repr__(self) -> str:
        return f"MemoryEnvironment({self.variables!r})"
