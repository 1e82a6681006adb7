"""
Data model of parsed header values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True)
class ValueElement:
    """
    One clause of a multi-valued header: id;name=value;name:=value;marker

    Qualifier names are kept exactly as written (case-sensitive).
    Markers are the extra segments of a clause that carry no assignment;
    they take no part in equality or hashing.
    The qualifiers are a read-only view over a private copy.
    """
    id: str
    qualifiers: Mapping[str, str] = field(default_factory=dict)
    markers: Tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self):
        object.__setattr__(self, "qualifiers", MappingProxyType(dict(self.qualifiers)))
        object.__setattr__(self, "markers", tuple(self.markers))

    def __hash__(self) -> int:
        return hash((self.id, frozenset(self.qualifiers.items())))

    def get_qualifier(self, name: str, default: str = "") -> str:
        return self.qualifiers.get(name, default)

    def has_qualifier(self, name: str) -> bool:
        return name in self.qualifiers

    def __str__(self) -> str:
        parts = [self.id, *self.markers]
        parts.extend(f'{k}="{_quote(v)}"' for k, v in self.qualifiers.items())
        return ";".join(parts)


def _quote(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


__all__ = ["ValueElement"]
