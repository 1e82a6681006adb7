"""
Headers the inspector understands.

The set is closed: looking up anything else is a programming error,
not a problem with the descriptor being read.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Mapping, Optional

from .model import ValueElement
from .parser import HeaderParser

Attributes = Mapping[str, str]


class RecognizedHeader(Enum):
    """Descriptor headers: (header name, multi-valued?)."""
    SUBSYSTEM_SYMBOLICNAME = ("Subsystem-SymbolicName", True)
    IBM_SHORTNAME = ("IBM-ShortName", False)
    SUBSYSTEM_CONTENT = ("Subsystem-Content", True)
    IBM_PROVISION_CAPABILITY = ("IBM-Provision-Capability", True)

    def __init__(self, header_name: str, multi_valued: bool):
        self.header_name = header_name
        self.multi_valued = multi_valued

    @classmethod
    def lookup(cls, header_name: str) -> RecognizedHeader:
        """Finds a member by its exact header name; KeyError if not registered."""
        for member in cls:
            if member.header_name == header_name:
                return member
        raise KeyError(f"Unregistered header: {header_name!r}")

    def get(self, attributes: Attributes) -> Optional[str]:
        """Raw value, trimmed; None if absent or blank."""
        raw = attributes.get(self.header_name)
        if raw is None:
            return None
        raw = raw.strip()
        return raw or None

    def is_present(self, attributes: Attributes) -> bool:
        return self.get(attributes) is not None

    def parse_values(self, attributes: Attributes) -> List[ValueElement]:
        return HeaderParser().parse(
            attributes.get(self.header_name),
            header=self.header_name,
            multi_valued=self.multi_valued,
        )

    def __str__(self) -> str:
        return self.header_name


__all__ = ["RecognizedHeader", "Attributes"]
