# backend/nfaviz/compiler/render_d2.py
"""
D2 Diagram Renderer

D2 is a modern diagram language with:
- Several layout engines (dagre, elk, tala)
- Per-edge styling (dashes, opacity)
- Native double-border shapes for accepting states

Docs: https://d2lang.com/
"""

from nfaviz import config
from nfaviz.ir.diagram import DiagramIR, DiagramNode, DiagramEdge
from nfaviz.visual.visual_style import NODE_STYLE, EDGE_STYLE, node_role, edge_role


# D2 shape mappings from visual style shapes
D2_SHAPE_MAP = {
    "circle": "circle",
    "double_circle": "circle",
}


def render_d2(diagram: DiagramIR) -> str:
    """
    Render a DiagramIR to D2 format.

    States are declared in index order and chained with transparent
    successor links so the layout engine keeps them in a single row.
    """
    lines = []

    # Direction
    lines.append("direction: left")
    lines.append("")

    for node in diagram.nodes:
        lines.append(_render_node(node))

    lines.append("")

    for edge in diagram.edges:
        lines.append(_render_edge(edge))

    lines.append("")

    for rel in diagram.successors:
        lines.append(f"{rel.node} -> {rel.predecessor}: {{ style.opacity: 0 }}")

    return "\n".join(lines)


def _render_node(node: DiagramNode) -> str:
    """Render a single state to D2 format"""
    style = NODE_STYLE[node_role(node)]
    shape = D2_SHAPE_MAP.get(style["shape"], "circle")

    parts = [
        f"shape: {shape}",
        f"style.fill: '{style['color']}'",
        f"style.stroke: '{style['stroke']}'",
    ]
    if style["shape"] == "double_circle":
        parts.append("style.double-border: true")
    if node.is_start:
        parts.append("style.bold: true")

    return f'{node.id}: {_quote(node.label)} {{ {"; ".join(parts)} }}'


def _render_edge(edge: DiagramEdge) -> str:
    """Render a transition to D2 format"""
    label = config.EPSILON_SYMBOL if edge.kind == "epsilon" else edge.label
    line = f"{edge.source} -> {edge.target}: {_quote(label)}"
    if EDGE_STYLE[edge_role(edge)]["dashed"]:
        line += " { style.stroke-dash: 3 }"
    return line


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'
