"""Core Graph class with out-adjacency sets."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import Generic, TypeVar

from trivial_graph.core.exceptions import VertexNotFoundError
from trivial_graph.core.graph.models import Vertex, VisitOrder

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Graph(Generic[T]):
    """Directed graph of vertices carrying values of type T.

    Every vertex owns an out-adjacency set, possibly empty. No reverse index
    is kept, so removing a vertex scans all adjacency sets. O(1) lookups.
    """

    __slots__ = ("_vertices", "_out")

    def __init__(self) -> None:
        self._vertices: dict[int, Vertex[T]] = {}
        self._out: dict[int, set[int]] = {}

    def add_vertex(self, vertex_id: int, value: T) -> None:
        """Insert a vertex, or replace the value of an existing one. O(1)."""
        if isinstance(vertex_id, bool) or not isinstance(vertex_id, int) or vertex_id < 0:
            raise ValueError(f"Vertex id must be a non-negative integer, got {vertex_id!r}")
        self._vertices[vertex_id] = Vertex(vertex_id, value)
        if vertex_id not in self._out:
            self._out[vertex_id] = set()

    def remove_vertex(self, vertex_id: int) -> None:
        """Remove a vertex and every edge touching it. O(V)."""
        if vertex_id not in self._vertices:
            return
        del self._vertices[vertex_id]
        del self._out[vertex_id]
        for successors in self._out.values():
            successors.discard(vertex_id)
        logger.debug("Removed vertex %d", vertex_id)

    def add_edge(self, vertex_from: int, vertex_to: int) -> None:
        """Add a directed edge. Idempotent. O(1).

        Raises VertexNotFoundError if either endpoint is absent.
        """
        for vertex_id in (vertex_from, vertex_to):
            if vertex_id not in self._vertices:
                raise VertexNotFoundError(vertex_id)
        self._out[vertex_from].add(vertex_to)

    def remove_edge(self, vertex_from: int, vertex_to: int) -> None:
        """Remove a directed edge if present. O(1)."""
        successors = self._out.get(vertex_from)
        if successors is not None:
            successors.discard(vertex_to)

    def get_vertex(self, vertex_id: int) -> Vertex[T] | None:
        """Get vertex by ID. O(1)."""
        return self._vertices.get(vertex_id)

    def get_neighbours(self, vertex_id: int) -> set[int] | None:
        """Get direct successors, or None if the vertex does not exist."""
        successors = self._out.get(vertex_id)
        if successors is None:
            return None
        return set(successors)

    def get_vertex_ids(self) -> set[int]:
        return set(self._vertices)

    def out_degree(self, vertex_id: int) -> int:
        """Number of successors. O(1)."""
        return len(self._out.get(vertex_id, ()))

    def edges(self) -> Iterator[tuple[int, int]]:
        """Iterate (from, to) pairs, sources in enumeration order."""
        for vertex_from in self._vertices:
            for vertex_to in sorted(self._out[vertex_from]):
                yield vertex_from, vertex_to

    def bfs(self, callback: Callable[[Vertex[T]], None]) -> None:
        """Breadth-first pass over the whole graph in topological order."""
        from trivial_graph.core.graph.traversal import BfsVisitor

        BfsVisitor(self).visit_all(VisitOrder.TOPOLOGICAL, callback)

    @staticmethod
    def parse(text: str, value_parser: Callable[[str], T] = str) -> Graph[T]:  # type: ignore[assignment]
        """Build a graph from its text form. See codec.parse."""
        from trivial_graph.core.graph import codec

        return codec.parse(text, value_parser)

    def format(self, value_formatter: Callable[[T], str] = str) -> str:
        """Render the graph in its text form. See codec.format."""
        from trivial_graph.core.graph import codec

        return codec.format(self, value_formatter)

    @property
    def vertices(self) -> Mapping[int, Vertex[T]]:
        return MappingProxyType(self._vertices)

    @property
    def num_vertices(self) -> int:
        return len(self._vertices)

    @property
    def num_edges(self) -> int:
        return sum(len(successors) for successors in self._out.values())

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    def __iter__(self) -> Iterator[int]:
        return iter(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"Graph(vertices={self.num_vertices}, edges={self.num_edges})"
