"""
Core module: data models, exceptions, and the graph.

Models (graph/models.py):
    - Vertex: An id and the value it carries
    - VisitOrder: Order of start vertices for whole-graph visits

Exceptions (exceptions.py):
    - GraphError: Base exception for all trivial-graph errors
    - VertexNotFoundError: Requested vertex doesn't exist
    - GraphParseError: Text form could not be read, with one subclass per cause

Graph (graph/):
    - Graph: Vertices plus out-adjacency sets
    - BfsVisitor/DfsVisitor: Traversal strategies
"""

from trivial_graph.core.exceptions import (
    DanglingEdgeError,
    GraphError,
    GraphIOError,
    GraphParseError,
    MalformedIntegerError,
    MalformedLineError,
    MalformedValueError,
    VertexNotFoundError,
)
from trivial_graph.core.graph import BfsVisitor, DfsVisitor, Graph, Vertex, VisitOrder

__all__ = [
    # Models
    "Vertex",
    "VisitOrder",
    # Exceptions
    "GraphError",
    "VertexNotFoundError",
    "GraphParseError",
    "GraphIOError",
    "MalformedIntegerError",
    "MalformedValueError",
    "MalformedLineError",
    "DanglingEdgeError",
    # Graph
    "Graph",
    "BfsVisitor",
    "DfsVisitor",
]
