# backend/nfaviz/compiler/builder.py

from typing import List

from nfaviz.ir.nfa import (
    NFA,
    NFANode,
    Done,
    Fail,
    Save,
    Char,
    Epsilon,
    Split,
    Anchor,
    Sparse,
)
from nfaviz.ir.diagram import DiagramIR, DiagramNode, DiagramEdge, SuccessorRelation
from nfaviz.ir.errors import MalformedNFAError, UnsupportedNodeError


def node_id(index: int) -> str:
    return f"n{index}"


class DiagramBuilder:
    """
    Walks an NFA once and collects diagram records.

    Deterministic. Never mutates the NFA. Every reference is checked
    against the node array before the edge that uses it is recorded.
    """

    def __init__(self, nfa: NFA):
        self.nfa = nfa
        self.size = len(nfa.nodes)
        self.nodes: List[DiagramNode] = []
        self.edges: List[DiagramEdge] = []
        self.successors: List[SuccessorRelation] = []

    def build(self) -> DiagramIR:
        self._check_target(None, "start", self.nfa.start)

        # ---------- nodes + layout order ----------
        for i in range(self.size):
            self.nodes.append(DiagramNode(id=node_id(i), index=i, label=""))
            if i > 0:
                self.successors.append(
                    SuccessorRelation(node=node_id(i), predecessor=node_id(i - 1))
                )

        self.nodes[self.nfa.start].is_start = True

        # ---------- labels + transitions ----------
        for i, node in enumerate(self.nfa.nodes):
            self._visit(i, node)

        return DiagramIR(
            nodes=self.nodes,
            edges=self.edges,
            successors=self.successors,
            start=node_id(self.nfa.start),
        )

    def _visit(self, i: int, node: NFANode):
        diagram_node = self.nodes[i]

        if isinstance(node, Done):
            diagram_node.label = "done"
            diagram_node.is_done = True
        elif isinstance(node, Fail):
            diagram_node.label = "fail"
        elif isinstance(node, Save):
            diagram_node.label = f"save {node.slot} {node.next}"
            self._add_edge(i, "next", node.next, "epsilon")
        elif isinstance(node, Char):
            diagram_node.label = f"char '{node.char}' {node.next}"
            self._add_edge(i, "next", node.next, "char", node.char)
        elif isinstance(node, Epsilon):
            diagram_node.label = f"epsilon {node.next}"
            self._add_edge(i, "next", node.next, "epsilon")
        elif isinstance(node, Split):
            diagram_node.label = f"split {node.next1} {node.next2}"
            self._add_edge(i, "next1", node.next1, "epsilon")
            self._add_edge(i, "next2", node.next2, "epsilon")
        elif isinstance(node, Anchor):
            diagram_node.label = f"anchor {node.next}"
            self._add_edge(i, "next", node.next, "anchor", node.anchor.value)
        elif isinstance(node, Sparse):
            diagram_node.label = f"sparse {node.next}"
            self._add_edge(i, "next", node.next, "class", node.char_class.describe())
        else:
            raise UnsupportedNodeError(index=i, node_type=type(node).__name__)

    def _add_edge(self, source: int, field: str, target: int, kind: str, label: str = ""):
        self._check_target(source, field, target)
        self.edges.append(
            DiagramEdge(
                id=f"e{len(self.edges)}",
                source=node_id(source),
                target=node_id(target),
                source_index=source,
                target_index=target,
                kind=kind,
                label=label,
                is_neighbor=target == source - 1,
            )
        )

    def _check_target(self, index, field: str, target: int):
        # Negative indices would silently wrap in Python; reject them too.
        if not isinstance(target, int) or target < 0 or target >= self.size:
            raise MalformedNFAError(index=index, field=field, target=target, size=self.size)


def translate(nfa: NFA) -> DiagramIR:
    return DiagramBuilder(nfa).build()
