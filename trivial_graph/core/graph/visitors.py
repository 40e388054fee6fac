"""Visitor protocol and the whole-graph visit shared by all visitors."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol

from trivial_graph.core.graph.analysis import topological_order
from trivial_graph.core.graph.models import Vertex, VisitOrder

if TYPE_CHECKING:
    from trivial_graph.core.graph.base import Graph

VertexCallback = Callable[[Vertex[Any]], None]


class GraphVisitor(Protocol):
    """Protocol for traversal strategies bound to one graph.

    A visitor remembers visited vertices across visit() calls until clear().
    """

    @property
    def graph(self) -> Graph[Any]:
        """The graph this visitor walks."""
        ...

    def visit(self, start: int, callback: VertexCallback) -> None:
        """Call callback on every not yet visited vertex reachable from start."""
        ...

    def clear(self) -> None:
        """Forget all visited vertices."""
        ...


def start_order(graph: Graph[Any], order: VisitOrder) -> list[int]:
    """Sequence of start vertices for a whole-graph visit."""
    if order is VisitOrder.UNDEFINED:
        return list(graph)
    if order is VisitOrder.ASCENDING:
        return sorted(graph)
    if order is VisitOrder.TOPOLOGICAL:
        return topological_order(graph)
    raise ValueError(f"Unknown visit order: {order!r}")


def visit_all(visitor: GraphVisitor, order: VisitOrder, callback: VertexCallback) -> None:
    """Visit every vertex of the visitor's graph exactly once.

    Clears the visitor, then starts a visit from each vertex in the given
    order; vertices reached from an earlier start are skipped later.
    """
    visitor.clear()
    for start in start_order(visitor.graph, order):
        visitor.visit(start, callback)
