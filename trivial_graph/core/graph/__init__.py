"""
Directed graph data structures and algorithms.

Data Structures:
    - Graph: Out-adjacency sets with O(1) lookups
    - Vertex: An id and its value
    - VisitOrder: UNDEFINED, ASCENDING or TOPOLOGICAL start order

Algorithms:
    - traversal: BfsVisitor, DfsVisitor
    - visitors: GraphVisitor protocol, visit_all
    - analysis: Topological order, cycle detection

Text format:
    - parse()/format(): Convert between Graph and text
    - load()/dump(): Same, for files
"""

from trivial_graph.core.graph.analysis import has_cycle, sorted_successors, topological_order
from trivial_graph.core.graph.base import Graph
from trivial_graph.core.graph.codec import dump, format, load, parse, read_from, write_to
from trivial_graph.core.graph.models import Vertex, VisitOrder
from trivial_graph.core.graph.traversal import BfsVisitor, DfsVisitor
from trivial_graph.core.graph.visitors import GraphVisitor, visit_all

__all__ = [
    "BfsVisitor",
    "DfsVisitor",
    "Graph",
    "GraphVisitor",
    "Vertex",
    "VisitOrder",
    "dump",
    "format",
    "has_cycle",
    "load",
    "parse",
    "read_from",
    "sorted_successors",
    "topological_order",
    "visit_all",
    "write_to",
]
