"""
Human-readable output formatting.

Each formatter builds rich renderables and returns the rendered text, so
commands print through click.echo and stay testable with CliRunner.
"""

from typing import Any, Dict, List

from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from ..analysis.impact import ImpactReport
from ..analysis.tree import TreeItem
from ..core.graph import DependencyGraph
from ..core.types import ScanResult

RENDER_WIDTH = 120


def render_to_text(renderable: RenderableType, width: int = RENDER_WIDTH) -> str:
    console = Console(width=width, color_system=None, highlight=False)
    with console.capture() as capture:
        console.print(renderable)
    return capture.get().rstrip("\n")


def format_scan(result: ScanResult) -> str:
    table = Table(title="Blocks", show_lines=False)
    table.add_column("Id")
    table.add_column("Kind")
    table.add_column("Lines", justify="right")
    table.add_column("Attributes", justify="right")
    table.add_column("Source / Depends on")

    for res in result.resources:
        table.add_row(
            Text(res.id), res.kind, f"{res.line_start}-{res.line_end}",
            str(len(res.attributes)), Text(", ".join(res.depends_on)),
        )
    for mod in result.modules:
        table.add_row(
            Text(mod.id), mod.kind, f"{mod.line_start}-{mod.line_end}",
            str(len(mod.attributes)), Text(mod.source),
        )

    parts: List[RenderableType] = [table]
    if result.issues:
        parts.append(Panel(Text("\n".join(result.issues)), title=f"Issues ({len(result.issues)})"))
    else:
        parts.append("No issues found.")
    return render_to_text(Group(*parts))


def format_graph(graph: DependencyGraph) -> str:
    table = Table(title=f"Edges ({graph.edge_count})")
    table.add_column("Source")
    table.add_column("Target")
    table.add_column("Relation")
    for edge in graph.iter_edges():
        table.add_row(Text(edge.source), Text(edge.target), edge.relation.value)

    stats = graph.get_stats()
    summary = f"Nodes: {stats['total_nodes']}  Edges: {stats['total_edges']}  Orphans: {stats['orphans']}"
    return render_to_text(Group(summary, table))


def format_impact(report: ImpactReport, doc_url: str | None = None) -> str:
    lines = [f"Direct Dependencies ({len(report.dependencies)}):"]
    lines += [f"  {edge.source} ({edge.label})" for edge in report.dependencies] or ["  None"]
    lines.append(f"Resources That Depend On This ({len(report.dependents)}):")
    lines += [f"  {edge.target} ({edge.label})" for edge in report.dependents] or ["  None"]
    lines.append(f"Impact Chain ({report.impacted_count} would be affected):")
    lines += [f"  {node_id}" for node_id in report.impact_chain] or ["  No resources would be affected"]
    if doc_url:
        lines.append(f"Docs: {doc_url}")
    return render_to_text(Panel(Text("\n".join(lines)), title=Text(f"Impact Analysis: {report.node_id}")))


def format_blast_radius(result: Dict[str, Any]) -> str:
    lines = [
        f"Changed: {', '.join(result['source_artifacts'])}",
        f"Total impacted: {result['total_impacted_count']}",
    ]
    for category, ids in result["breakdown"].items():
        if ids:
            lines.append(f"  {category}: {', '.join(ids)}")
    return render_to_text(Panel(Text("\n".join(lines)), title="Blast Radius"))


def format_tree(items: List[TreeItem]) -> str:
    root = Tree("Dependency Tree")
    for item in items:
        _add_branch(root, item)
    return render_to_text(root)


def _add_branch(parent: Tree, item: TreeItem) -> None:
    label = f"{item.id} (orphan)" if item.orphan else item.id
    branch = parent.add(Text(label))
    for child in item.children:
        _add_branch(branch, child)
