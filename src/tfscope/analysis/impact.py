"""
Impact Analysis.

For every node, computes the set of nodes that directly or indirectly
depend on it (its "impact chain"): everything reachable by following edges
forward from the node. Each start node gets its own traversal with its own
visited set, so cyclic graphs terminate and no result leaks between nodes.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Set

from pydantic import BaseModel, Field

from ..core.graph import DependencyGraph
from ..core.types import Edge, Node

logger = logging.getLogger(__name__)

ImpactIndex = Dict[str, Set[str]]


class ImpactReport(BaseModel):
    """Everything known about the neighbourhood of one node."""
    node_id: str
    dependencies: List[Edge] = Field(default_factory=list)
    dependents: List[Edge] = Field(default_factory=list)
    impact_chain: List[str] = Field(default_factory=list)

    @property
    def impacted_count(self) -> int:
        return len(self.impact_chain)


def build_adjacency(node_ids: Iterable[str], edges: Iterable[Edge]) -> Dict[str, List[str]]:
    """Forward adjacency `source -> [target, ...]`, in edge order."""
    adjacency: Dict[str, List[str]] = {node_id: [] for node_id in node_ids}
    for edge in edges:
        if edge.source in adjacency:
            adjacency[edge.source].append(edge.target)
    return adjacency


def traverse_impact(start: str, adjacency: Dict[str, List[str]]) -> List[str]:
    """
    Depth-first walk from `start`, returning impacted ids in discovery order.

    A node already visited in this walk is recorded but not expanded again,
    which is what makes cycles terminate. `start` itself only appears in the
    result when a cycle leads back to it.
    """
    impacted: List[str] = []
    seen: Set[str] = set()
    visited: Set[str] = {start}
    stack: List[Iterator[str]] = [iter(adjacency.get(start, ()))]

    while stack:
        target = next(stack[-1], None)
        if target is None:
            stack.pop()
            continue

        if target not in seen:
            seen.add(target)
            impacted.append(target)

        if target not in visited:
            visited.add(target)
            stack.append(iter(adjacency.get(target, ())))

    return impacted


def build_impact_index(nodes: Sequence[Node], edges: Sequence[Edge]) -> ImpactIndex:
    """
    Compute the impact set of every node.

    Recomputed independently per start node, O(V * (V + E)) overall.
    """
    adjacency = build_adjacency((node.id for node in nodes), edges)
    return {node_id: set(traverse_impact(node_id, adjacency)) for node_id in adjacency}


def get_impact_chain(node_id: str, index: Optional[ImpactIndex]) -> List[str]:
    """Sorted impact chain for a node; empty for unknown ids or no index."""
    if not index:
        return []
    return sorted(index.get(node_id, set()))


def direct_dependencies(node_id: str, edges: Iterable[Edge]) -> List[str]:
    """Ids that `node_id` depends on directly (edges targeting it)."""
    result: List[str] = []
    for edge in edges:
        if edge.target == node_id and edge.source not in result:
            result.append(edge.source)
    return result


def direct_dependents(node_id: str, edges: Iterable[Edge]) -> List[str]:
    """Ids that depend directly on `node_id` (edges sourced from it)."""
    result: List[str] = []
    for edge in edges:
        if edge.source == node_id and edge.target not in result:
            result.append(edge.target)
    return result


class ImpactAnalyzer:
    """
    Impact queries over one built graph.

    The index is computed eagerly on construction; the analyzer holds no
    reference to any other graph and is discarded with it.
    """

    def __init__(self, graph: DependencyGraph):
        self.graph = graph
        self._nodes = graph.nodes
        self._edges = graph.edges
        adjacency = build_adjacency((node.id for node in self._nodes), self._edges)
        self._chains: Dict[str, List[str]] = {
            node_id: traverse_impact(node_id, adjacency) for node_id in adjacency
        }
        logger.debug(f"Built impact index for {len(self._chains)} nodes")

    @property
    def index(self) -> ImpactIndex:
        return {node_id: set(chain) for node_id, chain in self._chains.items()}

    def impact_set(self, node_id: str) -> Set[str]:
        return set(self._chains.get(node_id, []))

    def impact_chain(self, node_id: str) -> List[str]:
        """Impacted ids in depth-first discovery order."""
        return list(self._chains.get(node_id, []))

    def direct_dependencies(self, node_id: str) -> List[str]:
        return direct_dependencies(node_id, self._edges)

    def direct_dependents(self, node_id: str) -> List[str]:
        return direct_dependents(node_id, self._edges)

    def report(self, node_id: str) -> ImpactReport:
        return ImpactReport(
            node_id=node_id,
            dependencies=[edge for edge in self._edges if edge.target == node_id],
            dependents=[edge for edge in self._edges if edge.source == node_id],
            impact_chain=self.impact_chain(node_id),
        )
