"""Trivial-graph custom exceptions."""

from __future__ import annotations


class GraphError(Exception):
    """Base exception for trivial-graph errors."""


class VertexNotFoundError(GraphError):
    """Vertex does not exist in the graph."""

    def __init__(self, vertex_id: int) -> None:
        super().__init__(f"Vertex {vertex_id} does not exist")
        self.vertex_id = vertex_id


class GraphParseError(GraphError):
    """Error reading a graph from its text form."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class GraphIOError(GraphParseError):
    """The underlying reader failed."""


class MalformedIntegerError(GraphParseError):
    """A vertex id is not a non-negative integer."""

    def __init__(self, token: str, line_number: int | None = None) -> None:
        super().__init__(f"Fail to parse vertex number {token!r}", line_number)
        self.token = token


class MalformedValueError(GraphParseError):
    """A vertex value was rejected by the value parser."""

    def __init__(self, text: str, line_number: int | None = None) -> None:
        super().__init__(f"Fail to parse vertex value {text!r}", line_number)
        self.text = text


class MalformedLineError(GraphParseError):
    """A line has fewer tokens than required."""

    def __init__(self, expected: int, got: int, line_number: int | None = None) -> None:
        super().__init__(f"Incorrect data, {expected} items expected, {got} got", line_number)
        self.expected = expected
        self.got = got


class DanglingEdgeError(GraphParseError):
    """An edge names a vertex that was not declared."""

    def __init__(self, vertex_id: int, line_number: int | None = None) -> None:
        super().__init__(f"Edge references unknown vertex {vertex_id}", line_number)
        self.vertex_id = vertex_id
