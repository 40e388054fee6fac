"""Line-oriented text format for graphs.

Layout::

    <id> <value>     one line per vertex
    #                section separator
    <from> <to>      one line per directed edge
    <blank or EOF>   end of edge section

Only line terminators are removed, so a value keeps its surrounding spaces
and may be empty. The vertex section also ends at a blank line or EOF. A
vertex line splits on the first space after the id, so values may contain
spaces; an edge line ignores anything after its second token.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TextIO, TypeVar

from trivial_graph.core.exceptions import (
    DanglingEdgeError,
    GraphIOError,
    MalformedIntegerError,
    MalformedLineError,
    MalformedValueError,
    VertexNotFoundError,
)
from trivial_graph.core.graph.base import Graph

logger = logging.getLogger(__name__)

T = TypeVar("T")

SEPARATOR = "#"


def parse(text: str, value_parser: Callable[[str], T] = str) -> Graph[T]:  # type: ignore[assignment]
    """Build a graph from text. Raises a GraphParseError subclass on bad input."""
    return read_from(io.StringIO(text), value_parser)


def read_from(stream: TextIO, value_parser: Callable[[str], T] = str) -> Graph[T]:  # type: ignore[assignment]
    """Read a graph from a text stream.

    The stream is consumed up to the end of the edge section. Any failure
    raises; a partially built graph is never returned.
    """
    graph: Graph[T] = Graph()
    lines = _numbered_lines(stream)

    for line_number, line in lines:
        stripped = line.strip()
        if stripped == SEPARATOR or not stripped:
            break
        parts = line.lstrip().split(" ", 1)
        if len(parts) < 2:
            raise MalformedLineError(2, len(parts), line_number)
        vertex_id = _parse_id(parts[0], line_number)
        try:
            value = value_parser(parts[1])
        except Exception as e:
            raise MalformedValueError(parts[1], line_number) from e
        graph.add_vertex(vertex_id, value)

    for line_number, line in lines:
        line = line.strip()
        if not line:
            break
        parts = line.split(" ", 2)
        if len(parts) < 2:
            raise MalformedLineError(2, len(parts), line_number)
        vertex_from = _parse_id(parts[0], line_number)
        vertex_to = _parse_id(parts[1], line_number)
        try:
            graph.add_edge(vertex_from, vertex_to)
        except VertexNotFoundError as e:
            raise DanglingEdgeError(e.vertex_id, line_number) from e

    logger.debug("Parsed %r", graph)
    return graph


def format(graph: Graph[T], value_formatter: Callable[[T], str] = str) -> str:  # noqa: A001
    """Render a graph as text, newline-terminated."""
    lines = [f"{vertex.id} {value_formatter(vertex.value)}" for vertex in graph.vertices.values()]
    lines.append(SEPARATOR)
    lines.extend(f"{vertex_from} {vertex_to}" for vertex_from, vertex_to in graph.edges())
    return "\n".join(lines) + "\n"


def write_to(
    graph: Graph[T], stream: TextIO, value_formatter: Callable[[T], str] = str
) -> None:
    """Write the text form of a graph to a stream."""
    stream.write(format(graph, value_formatter))


def load(path: Path, value_parser: Callable[[str], T] = str) -> Graph[T]:  # type: ignore[assignment]
    """Read a graph from a UTF-8 file."""
    try:
        f = open(path, encoding="utf-8")
    except OSError as e:
        raise GraphIOError(f"Cannot read {path}: {e}") from e
    with f:
        return read_from(f, value_parser)


def dump(graph: Graph[T], path: Path, value_formatter: Callable[[T], str] = str) -> None:
    """Write a graph to a UTF-8 file, replacing it."""
    with open(path, "w", encoding="utf-8") as f:
        write_to(graph, f, value_formatter)


def _numbered_lines(stream: TextIO) -> Iterator[tuple[int, str]]:
    """Yield (1-based line number, line without terminator) until EOF."""
    line_number = 0
    while True:
        try:
            raw = stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise GraphIOError(f"Input/output error: {e}", line_number + 1) from e
        if not raw:
            return
        line_number += 1
        yield line_number, raw.rstrip("\r\n")


def _parse_id(token: str, line_number: int) -> int:
    """Parse a non-negative decimal vertex id."""
    if not (token.isascii() and token.isdigit()):
        raise MalformedIntegerError(token, line_number)
    return int(token)
