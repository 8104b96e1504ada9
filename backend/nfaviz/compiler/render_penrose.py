# backend/nfaviz/compiler/render_penrose.py
"""
Penrose Substance Renderer

Penrose lays diagrams out from three programs:
- Domain: the types, constructors and predicates
- Substance: the objects of one particular diagram
- Style: how objects are drawn

This module emits the Substance program for a DiagramIR and ships the
matching Domain program. Styles (straight vs. curved transitions, the
horizontal position of each state) belong to the drawing side.

Docs: https://penrose.cs.cmu.edu/docs/ref
"""

from typing import List

from nfaviz import config
from nfaviz.ir.diagram import DiagramIR, DiagramEdge


PENROSE_DOMAIN = """\
type State
type Transition

constructor Transition(State from, State to)

predicate IsStart(State s)
predicate IsDone(State s)
predicate IsNeighbor(Transition t)
predicate Successor(State s, State prev)
"""


def render_penrose(diagram: DiagramIR) -> str:
    lines: List[str] = []

    # -------------------------
    # States
    # -------------------------
    for node in diagram.nodes:
        lines.append(f"State {node.id}")
        lines.append(f"Label {node.id} {_quote(node.label)}")

    lines.append(f"IsStart({diagram.start})")
    for node in diagram.done_nodes:
        lines.append(f"IsDone({node.id})")

    # -------------------------
    # Transitions
    # -------------------------
    for edge in diagram.edges:
        lines.append(f"Let {edge.id} := Transition({edge.source}, {edge.target})")
        lines.append(f"Label {edge.id} {_quote(_edge_label(edge))}")
        if edge.is_neighbor:
            lines.append(f"IsNeighbor({edge.id})")

    # -------------------------
    # Layout order (not transitions)
    # -------------------------
    for rel in diagram.successors:
        lines.append(f"Successor({rel.node}, {rel.predecessor})")

    return "\n".join(lines)


def _edge_label(edge: DiagramEdge) -> str:
    if edge.kind == "epsilon":
        return config.EPSILON_SYMBOL
    return edge.label


def _quote(text: str) -> str:
    """Substance string literal"""
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'
