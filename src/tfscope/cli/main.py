"""
tfscope CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import logging

import click

from .. import __version__

from .commands import blast_radius, graph, impact, scan, tree


@click.group()
@click.version_option(version=__version__, prog_name="tfscope")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """tfscope: Terraform dependency and impact explorer.

    Reads Terraform configuration text and reports its resources, modules,
    dependency graph and the blast radius of changing any block.

    \b
    Quick Start:
      tfscope scan main.tf
      tfscope impact main.tf aws_instance.web
      tfscope blast main.tf aws_vpc.main module.network
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Register commands
main.add_command(scan.scan)
main.add_command(graph.graph)
main.add_command(impact.impact)
main.add_command(blast_radius.blast_radius)
main.add_command(tree.tree)

if __name__ == "__main__":
    main()
