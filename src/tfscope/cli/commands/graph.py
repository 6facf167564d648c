"""
Graph Command - Print the dependency graph of a file.
"""

import sys
from typing import Any, Dict, List

import click
from pydantic import BaseModel, Field

from ...core.exceptions import TfscopeError
from ...core.types import Edge
from ..formatting import format_graph
from ..renderers import JsonRenderer
from ..utils import analyze_source, echo_error


# --- API Models ---
class GraphNodeView(BaseModel):
    id: str
    kind: str
    line_start: int
    line_end: int


class GraphResponse(BaseModel):
    nodes: List[GraphNodeView]
    edges: List[Edge]
    stats: Dict[str, Any] = Field(default_factory=dict)


@click.command()
@click.argument("source", default="-")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def graph(source: str, as_json: bool) -> None:
    """
    Build the dependency graph of a Terraform file.

    Edges point from the block being depended upon to the dependent block.
    """
    renderer = JsonRenderer("graph")

    if not as_json:
        try:
            result = analyze_source(source)
        except TfscopeError as e:
            echo_error(e.message)
            sys.exit(1)
        click.echo(format_graph(result.graph))
        return

    error_to_report = None
    response_data = None

    with renderer.capture():
        try:
            result = analyze_source(source)
            response_data = GraphResponse(
                nodes=[
                    GraphNodeView(
                        id=node.id,
                        kind=node.kind.value,
                        line_start=node.payload.line_start,
                        line_end=node.payload.line_end,
                    )
                    for node in result.nodes
                ],
                edges=result.edges,
                stats=result.graph.get_stats(),
            )
        except Exception as e:
            error_to_report = e

    if error_to_report:
        renderer.render_error(error_to_report)
        sys.exit(1)
    renderer.render_success(response_data)
