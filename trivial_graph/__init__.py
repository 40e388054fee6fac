"""
Trivial-graph: a directed graph with pluggable traversals and a text format.

Trivial-graph stores vertices carrying arbitrary values and directed edges
between them, enabling you to:
- Build a graph incrementally or parse it from a small text format
- Walk it breadth-first or depth-first, from one vertex or the whole graph
- Order whole-graph walks by id or topologically

Usage:
    from trivial_graph.core.graph import BfsVisitor, Graph, VisitOrder

    graph = Graph.parse("1 a\\n2 b\\n#\\n1 2\\n")
    BfsVisitor(graph).visit_all(VisitOrder.TOPOLOGICAL, print)
"""

__version__ = "0.1.0"
