"""
Core modules for tfscope.

This package contains the fundamental building blocks:
- types: Data structures (blocks, Node, Edge, ScanResult)
- graph: rustworkx-backed dependency graph
- exceptions: Errors raised by the command line layer
"""

from .exceptions import NodeNotFoundError, SourceNotFoundError, TfscopeError
from .graph import DependencyGraph
from .types import (
    Attribute, Block, BlockKind, Edge, ModuleBlock, Node,
    RelationType, ResourceBlock, ScanResult,
)

__all__ = [
    # Types
    "Attribute", "Block", "BlockKind", "Edge", "ModuleBlock", "Node",
    "RelationType", "ResourceBlock", "ScanResult",
    # Graph
    "DependencyGraph",
    # Errors
    "TfscopeError", "SourceNotFoundError", "NodeNotFoundError",
]
