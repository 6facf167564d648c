"""
Scan Command - Extract resources, modules and advisories from a file.
"""

import logging
import sys
from typing import List

import click
from pydantic import BaseModel

from ...core.exceptions import TfscopeError
from ...core.types import ModuleBlock, ResourceBlock
from ...parsing.scanner import scan_text
from ..formatting import format_scan
from ..renderers import JsonRenderer
from ..utils import echo_error, echo_success, echo_warning, read_source

logger = logging.getLogger(__name__)


# --- API Models ---
class ScanResponse(BaseModel):
    resources: List[ResourceBlock]
    modules: List[ModuleBlock]
    issues: List[str]


@click.command()
@click.argument("source", default="-")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def scan(source: str, as_json: bool) -> None:
    """
    Scan a Terraform file and list its resources and modules.

    SOURCE is a file path, or '-' to read from stdin.
    """
    renderer = JsonRenderer("scan")

    if not as_json:
        try:
            result = scan_text(read_source(source))
        except TfscopeError as e:
            echo_error(e.message)
            sys.exit(1)

        if result.is_empty:
            echo_warning("No resource or module blocks found")
        click.echo(format_scan(result))
        if not result.issues:
            echo_success(f"{len(result.resources)} resources, {len(result.modules)} modules")
        return

    error_to_report = None
    response_data = None

    with renderer.capture():
        try:
            result = scan_text(read_source(source))
            response_data = ScanResponse(
                resources=result.resources,
                modules=result.modules,
                issues=result.issues,
            )
        except Exception as e:
            error_to_report = e

    if error_to_report:
        renderer.render_error(error_to_report)
        sys.exit(1)
    renderer.render_success(response_data)
