"""CLI entry point for trivial-graph."""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from trivial_graph.core.exceptions import GraphParseError
from trivial_graph.core.graph import BfsVisitor, DfsVisitor, Graph, Vertex, VisitOrder, has_cycle
from trivial_graph.core.graph import load as load_graph

app = typer.Typer(
    name="trivial-graph",
    help="View directed graphs stored in the trivial-graph text format.",
    no_args_is_help=True,
)
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

logger = logging.getLogger(__name__)


class Strategy(Enum):
    """Traversal strategy for whole-graph visits."""

    BFS = "bfs"
    DFS = "dfs"


def setup_logging(verbose: bool) -> None:
    """Route log records through rich, DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def get_graph(path: Path) -> Graph[str]:
    """Load a graph with string values, exiting with status 1 on bad input."""
    try:
        return load_graph(path)
    except GraphParseError as e:
        err_console.print(f"[red]Cannot read graph from {escape(str(path))}:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e


@app.command()
def view(
    file: Annotated[Path, typer.Argument(help="Graph file to read")],
    order: Annotated[
        VisitOrder,
        typer.Option("--order", "-o", help="Start order", envvar="TRIVIAL_GRAPH_ORDER"),
    ] = VisitOrder.TOPOLOGICAL,
    strategy: Annotated[
        Strategy,
        typer.Option("--strategy", "-s", help="Traversal strategy", envvar="TRIVIAL_GRAPH_STRATEGY"),
    ] = Strategy.BFS,
    output_json: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Visit every vertex and print its id, neighbours and value."""
    setup_logging(verbose)
    graph = get_graph(file)

    if order is VisitOrder.TOPOLOGICAL and has_cycle(graph):
        logger.warning("Graph has a cycle, topological order is not guaranteed")

    visitor = BfsVisitor(graph) if strategy is Strategy.BFS else DfsVisitor(graph)
    visited: list[dict[str, Any]] = []

    def on_vertex(vertex: Vertex[str]) -> None:
        neighbours = sorted(graph.get_neighbours(vertex.id) or ())
        if output_json:
            visited.append({"id": vertex.id, "neighbours": neighbours, "value": vertex.value})
        else:
            console.print(f"Vertex: {vertex.id}")
            console.print(f"Neighbours: {' '.join(str(n) for n in neighbours)}")
            console.print(f"Value: {escape(vertex.value)}")

    visitor.visit_all(order, on_vertex)

    if output_json:
        print(json.dumps(visited))


@app.command()
def check(
    file: Annotated[Path, typer.Argument(help="Graph file to read")],
    output_json: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Validate a graph file and show its statistics."""
    setup_logging(verbose)
    graph = get_graph(file)
    acyclic = not has_cycle(graph)

    if output_json:
        print(
            json.dumps(
                {"vertices": graph.num_vertices, "edges": graph.num_edges, "acyclic": acyclic}
            )
        )
    else:
        console.print("[green]Valid graph[/green]")
        console.print(f"  Vertices: {graph.num_vertices}")
        console.print(f"  Edges: {graph.num_edges}")
        console.print(f"  Acyclic: {'yes' if acyclic else '[yellow]no[/]'}")


if __name__ == "__main__":
    app()
