# backend/nfaviz/compiler/render_mermaid.py

from nfaviz import config
from nfaviz.ir.diagram import DiagramIR, DiagramNode, DiagramEdge
from nfaviz.visual.visual_style import NODE_STYLE, node_role, edge_role


# Transitions always point towards lower indices, so read right to left.
DIRECTION = "RL"


def render_mermaid(diagram: DiagramIR) -> str:
    lines = [f"flowchart {DIRECTION}"]

    # -------------------------
    # States (index order is the layout order)
    # -------------------------
    for node in diagram.nodes:
        lines.append(f"  {_render_node(node)}")

    # -------------------------
    # Transitions
    # -------------------------
    for edge in diagram.edges:
        lines.append(f"  {_render_edge(edge)}")

    # -------------------------
    # Successor relation: invisible links keep states in a row
    # -------------------------
    for rel in diagram.successors:
        lines.append(f"  {rel.node} ~~~ {rel.predecessor}")

    # -------------------------
    # Styling
    # -------------------------
    for role, style in NODE_STYLE.items():
        lines.append(
            f"  classDef {role} fill:{style['color']},stroke:{style['stroke']}"
        )
    for node in diagram.nodes:
        role = node_role(node)
        if role != "state":
            lines.append(f"  class {node.id} {role}")

    return "\n".join(lines)


def _render_node(node: DiagramNode) -> str:
    label = _escape(node.label)
    if NODE_STYLE[node_role(node)]["shape"] == "double_circle":
        return f'{node.id}((("{label}")))'
    return f'{node.id}(("{label}"))'


def _render_edge(edge: DiagramEdge) -> str:
    arrow = "-->" if edge_role(edge) == "neighbor" else "-.->"
    label = config.EPSILON_SYMBOL if edge.kind == "epsilon" else edge.label
    return f'{edge.source} {arrow}|"{_escape(label)}"| {edge.target}'


def _escape(text: str) -> str:
    # Mermaid has no backslash escapes inside quoted labels; use entity codes.
    return (
        text.replace("&", "#amp;")
        .replace('"', "#quot;")
        .replace("|", "#124;")
        .replace("\n", "\\n")
    )
