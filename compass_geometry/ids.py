"""Opaque identifiers for points and shapes and their allocator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Container, Generic, TypeVar

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class PointID:
    """Handle of a point definition inside a ``GeometryStore``."""

    value: int

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"P{self.value}"


@dataclass(frozen=True, order=True)
class ShapeID:
    """Handle of a shape definition inside a ``GeometryStore``."""

    value: int

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"S{self.value}"


IdT = TypeVar("IdT", PointID, ShapeID)


class IdAllocator(Generic[IdT]):
    """Issue increasing ids of one kind, skipping values that are still live."""

    def __init__(self, factory: Callable[[int], IdT]) -> None:
        self._factory = factory
        self._last = 0

    @property
    def last_issued(self) -> int:
        return self._last

    def next_id(self, live: Container[IdT]) -> IdT:
        while True:
            self._last += 1
            candidate = self._factory(self._last)
            if candidate not in live:
                return candidate
            logger.debug("Skipping live id %s", candidate)


__all__ = ["PointID", "ShapeID", "IdAllocator"]
