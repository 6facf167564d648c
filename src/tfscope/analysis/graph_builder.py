"""
Graph Builder.

Turns scanned blocks into a DependencyGraph: one node per block id, one
explicit edge per resolvable `depends_on` entry and one implicit edge per
resolvable reference. Unresolvable targets (variables, locals, blocks
declared elsewhere) are dropped without error.
"""

import logging
from typing import Iterable, List, Sequence, Union

from ..core.graph import DependencyGraph
from ..core.types import Edge, ModuleBlock, Node, RelationType, ResourceBlock, ScanResult

logger = logging.getLogger(__name__)

AnyBlock = Union[ResourceBlock, ModuleBlock]


def build_graph(
    resources: Sequence[ResourceBlock],
    modules: Sequence[ModuleBlock],
) -> DependencyGraph:
    """
    Build the dependency graph for one scan.

    Nodes are registered resources first, then modules, so a module and a
    resource can never collide (module ids carry the `module.` prefix) but
    two blocks declaring the same id collapse into one node holding the
    later block.
    """
    graph = DependencyGraph()
    blocks: List[AnyBlock] = [*resources, *modules]

    for block in blocks:
        graph.add_node(Node.from_block(block))

    dropped = 0
    for block in blocks:
        for edge in _edges_for(block):
            if not graph.add_edge(edge) and not graph.has_node(edge.source):
                dropped += 1

    logger.debug(
        f"Built graph: {graph.node_count} nodes, {graph.edge_count} edges, "
        f"{dropped} unresolved dependencies dropped"
    )
    return graph


def build_graph_from_scan(result: ScanResult) -> DependencyGraph:
    """Convenience wrapper taking a ScanResult."""
    return build_graph(result.resources, result.modules)


def _edges_for(block: AnyBlock) -> Iterable[Edge]:
    """Yield candidate edges for one block, explicit ones first."""
    for dep in block.depends_on:
        yield Edge(source=dep, target=block.id, relation=RelationType.EXPLICIT)

    explicit = set(block.depends_on)
    for ref in block.references:
        if ref in explicit:
            continue
        yield Edge(source=ref, target=block.id, relation=RelationType.IMPLICIT)
