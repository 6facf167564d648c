"""
Dependency Graph implementation backed by rustworkx.

It manages:
- The map from string node ids to rustworkx integer indices.
- Type-safe Node and Edge storage in insertion order.
- Last-write-wins semantics for nodes registered twice under one id.
- Existence checks that silently drop edges to unknown nodes.
"""

import logging
from collections import defaultdict
from typing import Any, Dict, Iterator, List, Optional, Set

import rustworkx as rx

from .types import BlockKind, Edge, Node

logger = logging.getLogger(__name__)


class DependencyGraph:
    """
    Directed multigraph of blocks.

    Edges run from the depended-upon node to the dependent node. Two edges
    with different relations may join the same pair; an edge with an id
    that is already present is ignored.
    """

    def __init__(self):
        self._graph = rx.PyDiGraph(multigraph=True)
        self._id_to_idx: Dict[str, int] = {}
        self._nodes_by_kind: Dict[BlockKind, Set[str]] = defaultdict(set)
        self._edge_ids: Set[str] = set()

    def add_node(self, node: Node) -> None:
        """Add a node, or replace the payload of the node with the same id."""
        if node.id in self._id_to_idx:
            idx = self._id_to_idx[node.id]
            previous: Node = self._graph[idx]
            self._nodes_by_kind[previous.kind].discard(node.id)
            self._graph[idx] = node
            logger.debug(f"Duplicate node id {node.id}, keeping last payload")
        else:
            idx = self._graph.add_node(node)
            self._id_to_idx[node.id] = idx

        self._nodes_by_kind[node.kind].add(node.id)

    def add_edge(self, edge: Edge) -> bool:
        """
        Add a directed edge between two known nodes.

        Returns False, without touching the graph, when either endpoint is
        unknown or the same edge was already added.
        """
        if edge.source not in self._id_to_idx or edge.target not in self._id_to_idx:
            return False
        if edge.id in self._edge_ids:
            return False

        u_idx = self._id_to_idx[edge.source]
        v_idx = self._id_to_idx[edge.target]
        self._graph.add_edge(u_idx, v_idx, edge)
        self._edge_ids.add(edge.id)
        return True

    def get_node(self, node_id: str) -> Optional[Node]:
        """Retrieve a node by id."""
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            return None
        return self._graph[idx]

    def has_node(self, node_id: str) -> bool:
        return node_id in self._id_to_idx

    def find_nodes(self, pattern: str) -> List[str]:
        """Find node ids containing a case-insensitive substring."""
        pattern_lower = pattern.lower()
        return [node.id for node in self.iter_nodes() if pattern_lower in node.id.lower()]

    def out_edges(self, node_id: str) -> List[Edge]:
        """Edges leaving node_id, in insertion order."""
        return [edge for edge in self.iter_edges() if edge.source == node_id]

    def iter_nodes(self) -> Iterator[Node]:
        return iter(self._graph.nodes())

    def iter_edges(self) -> Iterator[Edge]:
        return iter(self._graph.edges())

    @property
    def nodes(self) -> List[Node]:
        return list(self.iter_nodes())

    @property
    def edges(self) -> List[Edge]:
        return list(self.iter_edges())

    @property
    def node_count(self) -> int:
        return self._graph.num_nodes()

    @property
    def edge_count(self) -> int:
        return self._graph.num_edges()

    def get_stats(self) -> Dict[str, Any]:
        edge_counts: Dict[str, int] = defaultdict(int)
        for edge in self.iter_edges():
            edge_counts[edge.relation.value] += 1

        orphans = len([
            idx for idx in self._graph.node_indices()
            if self._graph.in_degree(idx) == 0 and self._graph.out_degree(idx) == 0
        ])

        return {
            "total_nodes": self.node_count,
            "total_edges": self.edge_count,
            "nodes_by_kind": {kind.value: len(ids) for kind, ids in sorted(self._nodes_by_kind.items())},
            "edges_by_relation": dict(sorted(edge_counts.items())),
            "orphans": orphans,
        }

    def __contains__(self, node_id: str) -> bool:
        return node_id in self._id_to_idx

    def __len__(self) -> int:
        return self.node_count

    def __repr__(self) -> str:
        return f"DependencyGraph(nodes={self.node_count}, edges={self.edge_count})"
