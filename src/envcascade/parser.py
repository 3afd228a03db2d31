"""
Env file parsing and placeholder substitution.

File format, one entry per line:

    # comment (a '#' anywhere starts a comment)
    $name=value         local variable, visible to later lines only
    KEY=text {$name}    exported after substituting local variables
    FLAG                no '=': exported with an empty value

There is no quoting, escaping or multi-line syntax. Substitution is a
single textual pass; substituted text is not scanned again.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

from envcascade.environment import Environment, ProcessEnvironment
from envcascade.exceptions import EnvFileOpenError, EnvFileReadError
from envcascade.utils.logging import get_logger

logger = get_logger("envcascade.parser")

LOCAL_SIGIL = "$"
COMMENT_CHAR = "#"

# {$name} where name is one or more word characters (ASCII only)
PLACEHOLDER_PATTERN = re.compile(r"\{\$([A-Za-z0-9_]+)\}")


def strip_comment(line: str) -> str:
    """Truncate ``line`` at the first '#'."""
    index = line.find(COMMENT_CHAR)
    if index != -1:
        return line[:index]
    return line


def split_entry(line: str) -> Tuple[str, str]:
    """
    Split a line on the first '='.

    Returns:
        (key, raw_value); a line without '=' is all key with an empty value
    """
    key, sep, value = line.partition("=")
    if not sep:
        return line, ""
    return key, value


def substitute(
    value: str,
    variables: Dict[str, str],
    *,
    on_missing: Optional[Callable[[str], None]] = None,
) -> str:
    """
    Replace ``{$name}`` tokens in ``value`` with local variable values.

    Unknown names are replaced with an empty string after calling
    ``on_missing`` with the full token.

    Args:
        value: Raw value text
        variables: Local variables keyed with their '$' prefix
        on_missing: Callback for unresolved tokens

    Returns:
        Substituted value
    """

    def replace(match: re.Match) -> str:
        name = LOCAL_SIGIL + match.group(1)
        if name in variables:
            return variables[name]
        if on_missing is not None:
            on_missing(match.group(0))
        return ""

    return PLACEHOLDER_PATTERN.sub(replace, value)


def parse_file(path: str | Path, environment: Optional[Environment] = None) -> None:
    """
    Parse an env file and publish its exported variables.

    Local variables live only for this call. Lines are processed in order, so
    a placeholder can refer only to variables defined above it.

    Args:
        path: File to parse
        environment: Publish target (default: the process environment)

    Raises:
        EnvFileOpenError: If the file cannot be opened
        EnvFileReadError: If reading lines fails
        PublishError: If the environment rejects a variable; lines after it
            are not processed
    """
    path = Path(path)
    if environment is None:
        environment = ProcessEnvironment()

    variables: Dict[str, str] = {}

    try:
        f = open(path, encoding="utf-8")
    except OSError as e:
        raise EnvFileOpenError(path, e) from e

    with f:
        try:
            for line_number, raw_line in enumerate(f, start=1):
                _parse_line(raw_line, line_number, path, variables, environment)
        except (OSError, UnicodeDecodeError) as e:
            raise EnvFileReadError(path, e) from e


def _parse_line(
    raw_line: str,
    line_number: int,
    path: Path,
    variables: Dict[str, str],
    environment: Environment,
) -> None:
    """Process one line: record a local variable or publish an exported one."""
    line = strip_comment(raw_line).strip()
    if not line:
        return

    key, value = split_entry(line)
    key = key.strip()

    if not key:
        logger.warning(f"Empty key found in '{path}' at line {line_number}: '{line}'. Skipping.")
        return

    if key.startswith(LOCAL_SIGIL):
        variables[key] = value
        return

    def warn_missing(token: str) -> None:
        logger.warning(f"Variable '{token}' not found in '{path}' at line {line_number}.")

    environment.publish(key, substitute(value, variables, on_missing=warn_missing))
