"""
Core type definitions for tfscope.

Blocks are produced by the scanner and frozen once a scan completes.
Nodes and edges are produced by the graph builder. None of the models carry
run-dependent values (timestamps, random ids), so serialising the output of
two runs over the same text yields identical bytes.
"""

from enum import StrEnum
from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field


class BlockKind(StrEnum):
    """Kinds of top-level blocks recognised by the scanner."""
    RESOURCE = "resource"
    MODULE = "module"


class RelationType(StrEnum):
    """How a dependency edge was discovered."""
    EXPLICIT = "explicit"  # depends_on
    IMPLICIT = "implicit"  # reference inside an attribute value


class Attribute(BaseModel):
    """A flat `name = value` assignment. The value is kept verbatim."""
    name: str
    value: str

    model_config = ConfigDict(frozen=True)


class _BlockBase(BaseModel):
    name: str
    line_start: int
    line_end: int
    attributes: List[Attribute] = Field(default_factory=list)
    depends_on: List[str] = Field(default_factory=list)
    references: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def get_attribute(self, name: str) -> str | None:
        """Return the raw value of the first attribute called `name`."""
        for attr in self.attributes:
            if attr.name == name:
                return attr.value
        return None

    def has_attribute(self, name: str) -> bool:
        return any(attr.name == name for attr in self.attributes)


class ResourceBlock(_BlockBase):
    """A `resource "<type>" "<name>"` declaration."""
    kind: Literal["resource"] = "resource"
    type: str

    @computed_field
    @property
    def id(self) -> str:
        return f"{self.type}.{self.name}"


class ModuleBlock(_BlockBase):
    """A `module "<name>"` declaration."""
    kind: Literal["module"] = "module"
    source: str = ""

    @computed_field
    @property
    def id(self) -> str:
        return f"module.{self.name}"


Block = Annotated[Union[ResourceBlock, ModuleBlock], Field(discriminator="kind")]


class Node(BaseModel):
    """
    A vertex of the dependency graph.

    Several blocks may share an id; the graph keeps one node per id and the
    payload of the last block registered under it.
    """
    id: str
    kind: BlockKind
    payload: Block

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_block(cls, block: Union[ResourceBlock, ModuleBlock]) -> "Node":
        return cls(id=block.id, kind=block.kind, payload=block)


class Edge(BaseModel):
    """
    Directed relationship between two nodes.

    Points from the node being depended upon (`source`) to the node that
    declares the dependency (`target`), so following edges forward walks
    the impact of a change.
    """
    source: str
    target: str
    relation: RelationType

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def id(self) -> str:
        return f"{self.relation.value}:{self.source}->{self.target}"

    @property
    def label(self) -> str:
        return "depends_on" if self.relation == RelationType.EXPLICIT else "references"


class ScanResult(BaseModel):
    """Everything the scanner found in one input text."""
    resources: List[ResourceBlock] = Field(default_factory=list)
    modules: List[ModuleBlock] = Field(default_factory=list)
    issues: List[str] = Field(default_factory=list)

    @property
    def blocks(self) -> List[Union[ResourceBlock, ModuleBlock]]:
        """Resources followed by modules, in scan order."""
        return [*self.resources, *self.modules]

    @property
    def is_empty(self) -> bool:
        return not self.resources and not self.modules
