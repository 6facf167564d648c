"""
Analysis modules: graph construction, impact, blast radius and trees.
"""

from .blast_radius import BlastRadiusAnalyzer
from .graph_builder import build_graph, build_graph_from_scan
from .impact import (
    ImpactAnalyzer, ImpactReport, build_impact_index,
    direct_dependencies, direct_dependents, get_impact_chain,
)
from .tree import TreeItem, build_dependency_tree

__all__ = [
    "BlastRadiusAnalyzer",
    "ImpactAnalyzer",
    "ImpactReport",
    "TreeItem",
    "build_dependency_tree",
    "build_graph",
    "build_graph_from_scan",
    "build_impact_index",
    "direct_dependencies",
    "direct_dependents",
    "get_impact_chain",
]
