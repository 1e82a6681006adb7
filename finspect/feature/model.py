"""
Feature: identity of one feature descriptor.

All attributes are derived once, when the feature is built from the
descriptor's headers, and never change afterwards. Equality and hashing use
the full name only; ordering uses (auto-feature, visibility, name), so two
different full names can sort as a tie while still being unequal.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from ..descriptor import read_attributes
from ..errors import MissingIdentityError
from ..headers.keys import Attributes, RecognizedHeader
from .matcher import NamePattern
from .visibility import Visibility

FEATURE_CONTENT_TYPE = "osgi.subsystem.feature"
AUTO_FEATURE_INDICATOR = "&"

# Checked in order; the first one that matches is stripped
SIMPLE_NAME_PREFIXES = (
    re.compile(r"^com\.ibm\.websphere\.app(?:server|client)\."),
    re.compile(r"^io\.openliberty\."),
)


@dataclass(frozen=True, eq=False)
class Feature:
    full_name: str
    short_name: Optional[str]
    visibility: Visibility
    name: str
    contained_features: Tuple[str, ...] = ()
    has_content: bool = False
    is_auto_feature: bool = False
    source: Optional[Path] = field(default=None, compare=False)

    @classmethod
    def from_attributes(cls, attributes: Attributes, source: Optional[Path] = None) -> Feature:
        """
        Builds a feature from the headers of one descriptor.

        Raises:
            MissingIdentityError: No Subsystem-SymbolicName clause
            MalformedHeaderError: A recognized header breaks the clause grammar
        """
        symbolic_names = RecognizedHeader.SUBSYSTEM_SYMBOLICNAME.parse_values(attributes)
        if not symbolic_names:
            raise MissingIdentityError(source)
        symbolic_name = symbolic_names[0]

        visibility = Visibility.parse(symbolic_name.get_qualifier("visibility"))
        short_name = RecognizedHeader.IBM_SHORTNAME.get(attributes)
        name = short_name if visibility is Visibility.PUBLIC and short_name else symbolic_name.id

        contained = tuple(
            v.id
            for v in RecognizedHeader.SUBSYSTEM_CONTENT.parse_values(attributes)
            if v.get_qualifier("type") == FEATURE_CONTENT_TYPE
        )

        return cls(
            full_name=symbolic_name.id,
            short_name=short_name,
            visibility=visibility,
            name=name,
            contained_features=contained,
            has_content=RecognizedHeader.SUBSYSTEM_CONTENT.is_present(attributes),
            is_auto_feature=RecognizedHeader.IBM_PROVISION_CAPABILITY.is_present(attributes),
            source=source,
        )

    @classmethod
    def from_path(cls, path: Path) -> Feature:
        """Reads a descriptor file and builds the feature (IoFailure if unreadable)."""
        return cls.from_attributes(read_attributes(path), source=path)

    def display_name(self) -> str:
        indicator = AUTO_FEATURE_INDICATOR if self.is_auto_feature else self.visibility.indicator
        return indicator + self.name

    def simple_name(self) -> str:
        if self.short_name:
            return self.short_name
        for prefix in SIMPLE_NAME_PREFIXES:
            stripped, count = prefix.subn("", self.full_name, count=1)
            if count:
                return stripped
        return self.full_name

    def matches(self, pattern: str | NamePattern) -> bool:
        """
        Case-insensitive match of the short name, then of the full name.

        Raises:
            InvalidPatternError: The pattern cannot be compiled
        """
        if not isinstance(pattern, NamePattern):
            pattern = NamePattern.compile(pattern)
        return pattern.matches_names(self.short_name, self.full_name)

    # ---- Ordering and identity ----

    def sort_key(self) -> Tuple[bool, int, str]:
        return self.is_auto_feature, self.visibility.rank, self.name

    def compare_to(self, other: Feature) -> int:
        a, b = self.sort_key(), other.sort_key()
        return (a > b) - (a < b)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Feature):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Feature):
            return NotImplemented
        return self.full_name == other.full_name

    def __hash__(self) -> int:
        return hash(self.full_name)

    def __str__(self) -> str:
        return self.full_name


__all__ = ["Feature", "FEATURE_CONTENT_TYPE", "AUTO_FEATURE_INDICATOR", "SIMPLE_NAME_PREFIXES"]
