from nfaviz.ir.diagram import DiagramNode, DiagramEdge


NODE_STYLE = {
    "state": {
        "shape": "circle",
        "color": "#E3F2FD",
        "stroke": "#1565C0",
    },
    "start": {
        "shape": "circle",
        "color": "#E8F5E9",
        "stroke": "#2E7D32",
    },
    "done": {
        "shape": "double_circle",
        "color": "#FCE4EC",
        "stroke": "#C2185B",
    },
}

EDGE_STYLE = {
    # target is the node immediately to the left
    "neighbor": {
        "path": "straight",
        "dashed": False,
    },
    # anything else has to arc over intermediate nodes
    "jump": {
        "path": "curved",
        "dashed": True,
    },
}


def node_role(node: DiagramNode) -> str:
    # a lone Done node is both start and done; draw it as done
    if node.is_done:
        return "done"
    if node.is_start:
        return "start"
    return "state"


def edge_role(edge: DiagramEdge) -> str:
    return "neighbor" if edge.is_neighbor else "jump"
