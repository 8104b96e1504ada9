# Visual style module
# Shared node/edge styling for the text renderers

from nfaviz.visual.visual_style import NODE_STYLE, EDGE_STYLE, node_role, edge_role

__all__ = [
    "NODE_STYLE",
    "EDGE_STYLE",
    "node_role",
    "edge_role",
]
