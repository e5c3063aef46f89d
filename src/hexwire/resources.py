# Area: Shared
"""
hexwire.resources — Resource kinds and the six-count resource set
=================================================================

The order of ResourceKind is part of the wire format: every message that
carries a ResourceSet writes the counts in this order.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import IntEnum
from typing import Tuple

from .errors import InvalidFieldError

# Every integer on the wire is a 32-bit signed value.
INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


class ResourceKind(IntEnum):
    """Closed set of discardable resource kinds, in wire order."""
    CLAY = 1
    ORE = 2
    SHEEP = 3
    WHEAT = 4
    WOOD = 5
    UNKNOWN = 6


@dataclass(frozen=True)
class ResourceSet:
    """Immutable count per resource kind.

    Counts are not checked for sign or total; that belongs to the rules
    engine. Negative counts are carried as-is. Each count must fit in a
    32-bit signed integer.
    """
    clay: int = 0
    ore: int = 0
    sheep: int = 0
    wheat: int = 0
    wood: int = 0
    unknown: int = 0

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidFieldError(
                    "ResourceSet", f.name, value, "expected an integer count",
                )
            if not INT32_MIN <= value <= INT32_MAX:
                raise InvalidFieldError(
                    "ResourceSet", f.name, value, "outside the 32-bit signed range",
                )

    def amount(self, kind: ResourceKind) -> int:
        return getattr(self, ResourceKind(kind).name.lower())

    def amounts(self) -> Tuple[int, int, int, int, int, int]:
        """Counts in wire order."""
        return (self.clay, self.ore, self.sheep,
                self.wheat, self.wood, self.unknown)

    @property
    def total(self) -> int:
        return sum(self.amounts())

    def __str__(self) -> str:
        return "|".join(
            f"{kind.name.lower()}={self.amount(kind)}" for kind in ResourceKind
        )
