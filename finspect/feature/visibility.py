from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class Visibility(Enum):
    """
    Feature visibility, ordered from most to least visible.

    The member value is (rank, indicator glyph); ordering uses the rank only.
    """
    PUBLIC = (0, "+")
    PROTECTED = (1, "#")
    PRIVATE = (2, "-")
    DEFAULT = (3, "~")
    UNKNOWN = (3, "~")  # alias of DEFAULT

    def __init__(self, rank: int, indicator: str):
        self.rank = rank
        self.indicator = indicator

    @classmethod
    def parse(cls, value: Optional[str]) -> Visibility:
        """Case-insensitive lookup by name; anything unrecognized is DEFAULT."""
        if not value:
            return cls.DEFAULT
        try:
            return cls[value.strip().upper()]
        except KeyError:
            logger.debug("Unknown visibility %r, using %s", value, cls.DEFAULT.name)
            return cls.DEFAULT

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Visibility):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Visibility):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Visibility):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Visibility):
            return NotImplemented
        return self.rank >= other.rank


__all__ = ["Visibility"]
