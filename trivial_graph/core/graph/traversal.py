"""Breadth-first and depth-first visitors."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any

from trivial_graph.core.exceptions import VertexNotFoundError
from trivial_graph.core.graph.analysis import sorted_successors
from trivial_graph.core.graph.visitors import visit_all

if TYPE_CHECKING:
    from trivial_graph.core.graph.base import Graph
    from trivial_graph.core.graph.models import Vertex, VisitOrder
    from trivial_graph.core.graph.visitors import VertexCallback


def _lookup(graph: Graph[Any], vertex_id: int) -> Vertex[Any]:
    vertex = graph.get_vertex(vertex_id)
    if vertex is None:
        raise VertexNotFoundError(vertex_id)
    return vertex


class BfsVisitor:
    """Breadth-first visitor keeping visited state between runs.

    Vertices are marked when enqueued, so a vertex with several
    predecessors is queued once. Siblings are taken in ascending id order.
    """

    __slots__ = ("_graph", "_visited")

    def __init__(self, graph: Graph[Any]) -> None:
        self._graph = graph
        self._visited: set[int] = set()

    @property
    def graph(self) -> Graph[Any]:
        return self._graph

    @property
    def visited(self) -> frozenset[int]:
        return frozenset(self._visited)

    def visit(self, start: int, callback: VertexCallback) -> None:
        """BFS from start. No-op if start was already visited. O(V + E)."""
        _lookup(self._graph, start)
        if start in self._visited:
            return

        self._visited.add(start)
        queue: deque[int] = deque([start])
        while queue:
            vertex_id = queue.popleft()
            callback(_lookup(self._graph, vertex_id))
            for next_id in sorted_successors(self._graph, vertex_id):
                if next_id not in self._visited:
                    self._visited.add(next_id)
                    queue.append(next_id)

    def visit_all(self, order: VisitOrder, callback: VertexCallback) -> None:
        visit_all(self, order, callback)

    def clear(self) -> None:
        self._visited.clear()

    def __repr__(self) -> str:
        return f"BfsVisitor({self._graph!r}, visited={len(self._visited)})"


class DfsVisitor:
    """Pre-order depth-first visitor keeping visited state between runs.

    Uses an explicit stack of successor iterators, so depth is not limited
    by the interpreter's recursion limit.
    """

    __slots__ = ("_graph", "_visited")

    def __init__(self, graph: Graph[Any]) -> None:
        self._graph = graph
        self._visited: set[int] = set()

    @property
    def graph(self) -> Graph[Any]:
        return self._graph

    @property
    def visited(self) -> frozenset[int]:
        return frozenset(self._visited)

    def visit(self, start: int, callback: VertexCallback) -> None:
        """DFS from start. No-op if start was already visited. O(V + E)."""
        vertex = _lookup(self._graph, start)
        if start in self._visited:
            return

        self._visited.add(start)
        callback(vertex)
        stack = [iter(sorted_successors(self._graph, start))]
        while stack:
            for next_id in stack[-1]:
                if next_id not in self._visited:
                    self._visited.add(next_id)
                    callback(_lookup(self._graph, next_id))
                    stack.append(iter(sorted_successors(self._graph, next_id)))
                    break
            else:
                stack.pop()

    def visit_all(self, order: VisitOrder, callback: VertexCallback) -> None:
        visit_all(self, order, callback)

    def clear(self) -> None:
        self._visited.clear()

    def __repr__(self) -> str:
        return f"DfsVisitor({self._graph!r}, visited={len(self._visited)})"
