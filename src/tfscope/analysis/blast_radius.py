"""
Blast Radius Analysis.

Calculates the combined downstream impact of changing several blocks at
once, optionally limited to a number of hops.
"""

from collections import deque
from typing import Any, Dict, List, Optional, Set

from ..config import BREAKDOWN_PROVIDERS, provider_for
from ..core.graph import DependencyGraph
from ..core.types import BlockKind
from .impact import ImpactAnalyzer


class BlastRadiusAnalyzer:
    """
    Analyzes the downstream impact of changing specific blocks.
    """

    def __init__(self, graph: DependencyGraph, impact: Optional[ImpactAnalyzer] = None):
        self.graph = graph
        self.impact = impact or ImpactAnalyzer(graph)

    def calculate(self, changed_artifacts: List[str], max_depth: int = -1) -> Dict[str, Any]:
        """
        Calculate the blast radius for a list of changed node ids.

        Unknown ids contribute nothing. With `max_depth >= 0` only nodes
        within that many hops are counted.
        """
        unique_downstream: Set[str] = set()

        for root_id in changed_artifacts:
            unique_downstream.update(self._get_impacted(root_id, max_depth))

        return {
            "source_artifacts": list(changed_artifacts),
            "total_impacted_count": len(unique_downstream),
            "impacted_artifacts": sorted(unique_downstream),
            "breakdown": self._categorize(unique_downstream),
        }

    def _get_impacted(self, node_id: str, max_depth: int) -> Set[str]:
        if not self.graph.has_node(node_id):
            return set()
        if max_depth < 0:
            return self.impact.impact_set(node_id)
        return self._bounded_impact(node_id, max_depth)

    def _bounded_impact(self, node_id: str, max_depth: int) -> Set[str]:
        """Breadth-first walk along outgoing edges, at most max_depth hops."""
        impacted: Set[str] = set()
        visited = {node_id}
        queue = deque([(node_id, 0)])

        while queue:
            current, depth = queue.popleft()
            if depth >= max_depth:
                continue
            for edge in self.graph.out_edges(current):
                impacted.add(edge.target)
                if edge.target not in visited:
                    visited.add(edge.target)
                    queue.append((edge.target, depth + 1))

        return impacted

    def _categorize(self, artifacts: Set[str]) -> Dict[str, List[str]]:
        """Group impacted ids by block kind and by provider."""
        breakdown: Dict[str, List[str]] = {
            "resources": [],
            "modules": [],
            **{provider: [] for provider in BREAKDOWN_PROVIDERS},
            "other": [],
        }

        for art in sorted(artifacts):
            node = self.graph.get_node(art)
            if node is None:
                continue
            if node.kind == BlockKind.MODULE:
                breakdown["modules"].append(art)
                continue

            breakdown["resources"].append(art)
            provider = provider_for(node.payload.type)
            if provider in BREAKDOWN_PROVIDERS:
                breakdown[provider].append(art)
            else:
                breakdown["other"].append(art)

        return breakdown
