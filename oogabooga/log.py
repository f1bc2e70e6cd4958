"""Log levels, the default logger and version formatting."""

from __future__ import annotations

import enum
import sys
import threading
from typing import Optional, TextIO

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 8


class LogLevel(enum.Enum):
    VERBOSE = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    LEVEL_COUNT = 4


_PREFIXES = {
    LogLevel.VERBOSE: "[VERBOSE]: ",
    LogLevel.INFO: "[INFO]:    ",
    LogLevel.WARNING: "[WARNING]: ",
    LogLevel.ERROR: "[ERROR]:   ",
}

_logger_lock = threading.Lock()


def default_logger(
    level: LogLevel, message: str, stream: Optional[TextIO] = None
) -> None:
    """Write ``message`` with a level prefix to ``stream`` (stdout by default).

    ``LogLevel.LEVEL_COUNT`` is not a real level and writes nothing.
    """
    if not isinstance(level, LogLevel):
        raise TypeError(f"expected LogLevel, got {type(level).__name__}")
    prefix = _PREFIXES.get(level)
    if prefix is None:
        return
    out = stream if stream is not None else sys.stdout
    with _logger_lock:
        out.write(f"{prefix}{message}\n")


def version_string(
    major: int = VERSION_MAJOR, minor: int = VERSION_MINOR, patch: int = VERSION_PATCH
) -> str:
    """The version as ``major.minor.patch`` with minor padded to 2 and patch to 3 digits."""
    return f"{major:d}.{minor:02d}.{patch:03d}"


def version_number(
    major: int = VERSION_MAJOR, minor: int = VERSION_MINOR, patch: int = VERSION_PATCH
) -> int:
    """The version packed into one comparable integer."""
    return major * 1000000 + minor * 1000 + patch