"""Graph analysis: topological order, cycle detection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from trivial_graph.core.graph.base import Graph

logger = logging.getLogger(__name__)


def sorted_successors(graph: Graph[Any], vertex_id: int) -> list[int]:
    """Successors in ascending id order."""
    return sorted(graph.get_neighbours(vertex_id) or ())


def topological_order(graph: Graph[Any]) -> list[int]:
    """Reverse DFS postorder over all vertices. O(V + E).

    Roots and successors are taken in ascending id order, so the result is
    reproducible. On a cyclic graph every id still appears exactly once, but
    the order carries no guarantee.
    """
    visited: set[int] = set()
    order: list[int] = []

    for root in sorted(graph):
        if root in visited:
            continue
        visited.add(root)
        stack = [(root, iter(sorted_successors(graph, root)))]
        while stack:
            node_id, successors = stack[-1]
            for next_id in successors:
                if next_id not in visited:
                    visited.add(next_id)
                    stack.append((next_id, iter(sorted_successors(graph, next_id))))
                    break
            else:
                stack.pop()
                order.append(node_id)

    order.reverse()
    logger.debug("Topological order: %s", order)
    return order


def has_cycle(graph: Graph[Any]) -> bool:
    """Check for cycles using three-color DFS. O(V + E)."""
    white, gray, black = 0, 1, 2
    color: dict[int, int] = {v: white for v in graph}

    for root in graph:
        if color[root] != white:
            continue
        color[root] = gray
        stack = [(root, iter(sorted_successors(graph, root)))]
        while stack:
            node_id, successors = stack[-1]
            for next_id in successors:
                if color[next_id] == gray:
                    return True
                if color[next_id] == white:
                    color[next_id] = gray
                    stack.append((next_id, iter(sorted_successors(graph, next_id))))
                    break
            else:
                color[node_id] = black
                stack.pop()

    return False
