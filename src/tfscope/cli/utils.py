"""
CLI Utilities - Shared helper functions for command line operations.

Formatted printing and source loading used by every command.
"""

import sys
from pathlib import Path

import click

from ..core.exceptions import NodeNotFoundError, SourceNotFoundError
from ..pipeline import PipelineResult, run_pipeline


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """Print a warning message with a yellow alert symbol."""
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def read_source(source: str) -> str:
    """
    Read configuration text from a file path, or from stdin for `-`.

    Raises:
        SourceNotFoundError: If the path does not exist.
    """
    if source == "-":
        return sys.stdin.read()

    path = Path(source)
    if not path.is_file():
        raise SourceNotFoundError(source)
    return path.read_text(encoding="utf-8", errors="replace")


def analyze_source(source: str) -> PipelineResult:
    """Read a source and run the full pipeline on it."""
    return run_pipeline(read_source(source))


def resolve_node_id(result: PipelineResult, input_id: str) -> str:
    """
    Resolve user input to a node id.

    Tries the exact id, then a `module.` prefix, then a unique substring
    match.

    Raises:
        NodeNotFoundError: If nothing (or more than one candidate) matches.
    """
    graph = result.graph
    if graph.has_node(input_id):
        return input_id

    candidate = f"module.{input_id}"
    if graph.has_node(candidate):
        return candidate

    matches = graph.find_nodes(input_id)
    if len(matches) == 1:
        return matches[0]

    raise NodeNotFoundError(input_id)
