"""
Reading of feature descriptors (*.mf) into a header -> raw value mapping.

Only the main section is read: "Name: value" lines, where a line that
starts with a single space continues the previous value. Reading stops at
the first blank line after the first header.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Iterable

from .errors import IoFailure, MalformedHeaderError

logger = logging.getLogger(__name__)

DESCRIPTOR_SUFFIX = ".mf"

# Descriptor lines end with CR, LF or CRLF only
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def read_attributes(path: Path) -> Dict[str, str]:
    """
    Reads the main attributes of a descriptor file.

    The file is closed before the lines are interpreted.

    Raises:
        IoFailure: The file cannot be opened or read
        MalformedHeaderError: A line is neither a header nor a continuation
    """
    try:
        with path.open(encoding="utf-8-sig", errors="replace") as f:
            text = f.read()
    except OSError as e:
        raise IoFailure(path, e) from e
    return parse_attributes(_LINE_BREAK.split(text), source=str(path))


def parse_attributes(lines: Iterable[str], *, source: str = "<descriptor>") -> Dict[str, str]:
    attributes: Dict[str, str] = {}
    current = None

    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            if attributes:
                break
            continue

        if line.startswith(" "):
            if current is None:
                raise MalformedHeaderError(source, line, f"line {lineno}: continuation without a header")
            attributes[current] += line[1:]
            continue

        name, sep, value = line.partition(":")
        name = name.strip()
        if not sep or not name:
            raise MalformedHeaderError(source, line, f"line {lineno}: expected 'Name: value'")
        if name in attributes:
            logger.debug("%s: header %s repeated at line %d, keeping the last value", source, name, lineno)
        current = name
        attributes[name] = value[1:] if value.startswith(" ") else value

    return attributes


__all__ = ["read_attributes", "parse_attributes", "DESCRIPTOR_SUFFIX"]
