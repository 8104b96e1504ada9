from pydantic import BaseModel, Field
from typing import List, Literal


class DiagramNode(BaseModel):
    id: str
    index: int
    label: str
    is_start: bool = False
    is_done: bool = False


class DiagramEdge(BaseModel):
    id: str
    source: str
    target: str
    source_index: int
    target_index: int
    kind: Literal["epsilon", "char", "anchor", "class"]
    label: str = ""                # empty for epsilon edges
    is_neighbor: bool = False      # target is the node just before the source


class SuccessorRelation(BaseModel):
    """Positional ordering only; carries no transition semantics."""
    node: str
    predecessor: str


class DiagramIR(BaseModel):
    nodes: List[DiagramNode] = Field(default_factory=list)
    edges: List[DiagramEdge] = Field(default_factory=list)
    successors: List[SuccessorRelation] = Field(default_factory=list)
    start: str

    @property
    def start_nodes(self) -> List[DiagramNode]:
        return [n for n in self.nodes if n.is_start]

    @property
    def done_nodes(self) -> List[DiagramNode]:
        return [n for n in self.nodes if n.is_done]
