"""
Dependency Tree.

Arranges blocks as a forest for display: blocks with no resolvable
dependencies are roots, and every block is nested under the first block it
depends on that reaches it. Blocks that sit only on cycles are appended as
orphan roots. Every block appears exactly once.
"""

from typing import Dict, List, Sequence, Set

from pydantic import BaseModel, Field

from ..core.types import BlockKind, ModuleBlock, ResourceBlock


class TreeItem(BaseModel):
    id: str
    kind: BlockKind
    level: int = 0
    orphan: bool = False
    children: List["TreeItem"] = Field(default_factory=list)


def build_dependency_tree(
    resources: Sequence[ResourceBlock],
    modules: Sequence[ModuleBlock],
) -> List[TreeItem]:
    blocks = [*resources, *modules]

    kinds: Dict[str, BlockKind] = {}
    for block in blocks:
        kinds[block.id] = block.kind

    # item -> its resolvable dependencies, in declaration order
    dependency_map: Dict[str, List[str]] = {}
    for block in blocks:
        deps = dependency_map.setdefault(block.id, [])
        for dep in [*block.depends_on, *block.references]:
            if dep in kinds and dep not in deps:
                deps.append(dep)

    visited: Set[str] = set()
    roots: List[TreeItem] = []

    for item_id, deps in dependency_map.items():
        if not deps and item_id not in visited:
            roots.append(_build_item(item_id, 0, False, kinds, dependency_map, visited))

    for item_id in dependency_map:
        if item_id not in visited:
            roots.append(_build_item(item_id, 0, True, kinds, dependency_map, visited))

    return roots


def _build_item(
    item_id: str,
    level: int,
    orphan: bool,
    kinds: Dict[str, BlockKind],
    dependency_map: Dict[str, List[str]],
    visited: Set[str],
) -> TreeItem:
    visited.add(item_id)
    item = TreeItem(id=item_id, kind=kinds[item_id], level=level, orphan=orphan)

    for other_id, deps in dependency_map.items():
        if item_id in deps and other_id not in visited:
            item.children.append(_build_item(other_id, level + 1, False, kinds, dependency_map, visited))

    return item
