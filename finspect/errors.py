"""
User-facing errors of the feature inspector.

Every expected failure (unreadable descriptor, broken header, bad pattern,
bad configuration) inherits from FinspectError and is reported by the CLI
as a clean message without a stack trace.

Programming errors (for example looking up a header that is not registered)
do NOT inherit from FinspectError and propagate with full tracebacks.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class FinspectError(Exception):
    """Base class for all user-facing errors."""
    pass


class IoFailure(FinspectError):
    """A descriptor file could not be read."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read descriptor {path}: {cause.strerror or cause}")


class MissingIdentityError(FinspectError):
    """The descriptor declares no symbolic name."""

    def __init__(self, source: Optional[Path] = None):
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(f"No Subsystem-SymbolicName declared{where}")


class MalformedHeaderError(FinspectError):
    """A header value does not follow the clause/qualifier grammar."""

    def __init__(self, header: str, raw: str, reason: str):
        self.header = header
        self.raw = raw
        self.reason = reason
        super().__init__(f"Malformed header {header}: {reason} (value: {raw!r})")


class InvalidPatternError(FinspectError):
    """A name pattern could not be compiled."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")


class ConfigError(FinspectError):
    """Configuration file or command line settings are unusable."""
    pass


__all__ = [
    "FinspectError",
    "IoFailure",
    "MissingIdentityError",
    "MalformedHeaderError",
    "InvalidPatternError",
    "ConfigError",
]
