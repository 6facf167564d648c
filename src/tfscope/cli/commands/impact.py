"""
Impact Command - Show what a change to one block would affect.
"""

import sys
from typing import List, Optional, Tuple

import click
from pydantic import BaseModel

from ...analysis.impact import ImpactReport
from ...core.exceptions import TfscopeError
from ...core.types import BlockKind, Edge
from ...providers import get_provider_doc_url
from ..formatting import format_impact
from ..renderers import JsonRenderer
from ..utils import analyze_source, echo_error, resolve_node_id


# --- API Models ---
class ImpactResponse(BaseModel):
    node_id: str
    direct_dependencies: List[Edge]
    direct_dependents: List[Edge]
    impact_chain: List[str]
    doc_url: Optional[str] = None


def _analyze(source: str, node: str) -> Tuple[ImpactReport, Optional[str]]:
    result = analyze_source(source)
    node_id = resolve_node_id(result, node)
    report = result.impact.report(node_id)

    doc_url = None
    graph_node = result.graph.get_node(node_id)
    if graph_node is not None and graph_node.kind == BlockKind.RESOURCE:
        doc_url = get_provider_doc_url(graph_node.payload.type)

    return report, doc_url


@click.command()
@click.argument("source")
@click.argument("node")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def impact(source: str, node: str, as_json: bool) -> None:
    """
    Analyze the impact of changing NODE in SOURCE.

    NODE is a block id such as 'aws_instance.web' or 'module.vpc'.
    """
    renderer = JsonRenderer("impact")

    if not as_json:
        try:
            report, doc_url = _analyze(source, node)
        except TfscopeError as e:
            echo_error(e.message)
            sys.exit(1)
        click.echo(format_impact(report, doc_url))
        return

    error_to_report = None
    response_data = None

    with renderer.capture():
        try:
            report, doc_url = _analyze(source, node)
            response_data = ImpactResponse(
                node_id=report.node_id,
                direct_dependencies=report.dependencies,
                direct_dependents=report.dependents,
                impact_chain=report.impact_chain,
                doc_url=doc_url,
            )
        except Exception as e:
            error_to_report = e

    if error_to_report:
        renderer.render_error(error_to_report)
        sys.exit(1)
    renderer.render_success(response_data)
