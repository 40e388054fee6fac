"""Data models for graph operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Vertex(Generic[T]):
    """A graph node: a non-negative id carrying a value."""

    id: int
    value: T

    def __str__(self) -> str:
        return str(self.value)


class VisitOrder(Enum):
    """Order of start vertices when visiting a whole graph.

    UNDEFINED follows the graph's own enumeration order, which callers must
    not rely on. ASCENDING sorts ids, adding a sort to the traversal cost.
    TOPOLOGICAL follows a topological order; on a cyclic graph the order is
    unspecified.
    """

    UNDEFINED = "undefined"
    ASCENDING = "ascending"
    TOPOLOGICAL = "topological"
