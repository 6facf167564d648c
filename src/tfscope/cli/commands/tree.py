"""
Tree Command - Show blocks nested under the blocks they depend on.
"""

import sys

import click

from ...analysis.tree import build_dependency_tree
from ...core.exceptions import TfscopeError
from ...parsing.scanner import scan_text
from ..formatting import format_tree
from ..renderers import JsonRenderer
from ..utils import echo_error, read_source


@click.command()
@click.argument("source", default="-")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def tree(source: str, as_json: bool) -> None:
    """Print the dependency tree of a Terraform file."""
    renderer = JsonRenderer("tree")

    if not as_json:
        try:
            result = scan_text(read_source(source))
        except TfscopeError as e:
            echo_error(e.message)
            sys.exit(1)
        click.echo(format_tree(build_dependency_tree(result.resources, result.modules)))
        return

    error_to_report = None
    response_data = None

    with renderer.capture():
        try:
            result = scan_text(read_source(source))
            items = build_dependency_tree(result.resources, result.modules)
            response_data = [item.model_dump(mode="json") for item in items]
        except Exception as e:
            error_to_report = e

    if error_to_report:
        renderer.render_error(error_to_report)
        sys.exit(1)
    renderer.render_success(response_data)
