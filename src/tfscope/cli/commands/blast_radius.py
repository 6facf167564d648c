"""
Blast Radius Command - Calculate downstream impact of several changes.
"""

import logging
import sys
from typing import Dict, List

import click
from pydantic import BaseModel, Field

from ...analysis.blast_radius import BlastRadiusAnalyzer
from ...core.exceptions import TfscopeError
from ..formatting import format_blast_radius
from ..renderers import JsonRenderer
from ..utils import analyze_source, echo_error, resolve_node_id

logger = logging.getLogger(__name__)


# --- API Models ---
class BlastRadiusResponse(BaseModel):
    source_artifacts: List[str]
    impacted_artifacts: List[str]
    count: int
    breakdown: Dict[str, List[str]] = Field(default_factory=dict)


def _calculate(source: str, artifacts: tuple, max_depth: int) -> Dict:
    result = analyze_source(source)
    resolved = [resolve_node_id(result, artifact) for artifact in artifacts]
    logger.debug(f"Resolved {list(artifacts)} to {resolved}")

    analyzer = BlastRadiusAnalyzer(result.graph, result.impact)
    return analyzer.calculate(resolved, max_depth=max_depth)


@click.command("blast")
@click.argument("source")
@click.argument("artifacts", nargs=-1)
@click.option("--max-depth", default=-1, type=int,
              help="Maximum traversal depth (-1 for unlimited)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def blast_radius(source: str, artifacts: tuple, max_depth: int, as_json: bool) -> None:
    """
    Calculate downstream impact for changed blocks in SOURCE.

    \b
    Examples:
      tfscope blast main.tf aws_vpc.main
      tfscope blast main.tf aws_vpc.main module.dns --max-depth 2
    """
    if not artifacts:
        raise click.UsageError("Provide at least one block id to analyze")

    renderer = JsonRenderer("blast")

    if not as_json:
        try:
            raw_result = _calculate(source, artifacts, max_depth)
        except TfscopeError as e:
            echo_error(e.message)
            sys.exit(1)
        click.echo(format_blast_radius(raw_result))
        return

    error_to_report = None
    response_data = None

    with renderer.capture():
        try:
            raw_result = _calculate(source, artifacts, max_depth)
            response_data = BlastRadiusResponse(
                source_artifacts=raw_result["source_artifacts"],
                impacted_artifacts=raw_result["impacted_artifacts"],
                count=raw_result["total_impacted_count"],
                breakdown=raw_result["breakdown"],
            )
        except Exception as e:
            error_to_report = e

    if error_to_report:
        renderer.render_error(error_to_report)
        sys.exit(1)
    renderer.render_success(response_data)
