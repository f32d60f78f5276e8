"""
Style payloads for the rendering surface.

Centralizes all colors and sizes. Node styles depend only on kind and
classification flags, edge styles only on the connection type.
"""

from typing import Any, Dict

from ..domain.models import GraphNode
from ..domain.enums import ConnectionType, NodeKind


class GraphPalette:
    """Colors and sizes handed to the graph widget."""

    # Node colors
    FILE_BG = "#1e293b"         # Slate
    ORPHAN_BG = "#f97316"       # Orange
    FOLDER_BG = "#facc15"       # Yellow
    FOLDER_BORDER = "#eab308"
    TEXT = "#f8fafc"
    FOLDER_TEXT = "#0f172a"
    BORDER = "#334155"
    SELECTED_BORDER = "#38bdf8"  # Sky blue

    # Edge colors
    EDGE_COLORS: Dict[str, str] = {
        ConnectionType.EXTERNAL.value: "#ef4444",  # Red
    }
    DEFAULT_EDGE_COLOR = "#3b82f6"                 # Blue
    EDGE_LABEL_COLOR = "#94a3b8"

    # Sizes
    FONT_SIZE = "12px"
    EDGE_FONT_SIZE = "10px"
    STROKE_WIDTH = 2


def node_style(node: GraphNode) -> Dict[str, str]:
    """Build the style payload for a node."""
    p = GraphPalette
    if node.kind == NodeKind.FOLDER:
        style = {
            "background": p.FOLDER_BG,
            "color": p.FOLDER_TEXT,
            "border": f"1px solid {p.FOLDER_BORDER}",
            "borderRadius": "8px",
            "padding": "10px",
            "fontSize": p.FONT_SIZE,
            "fontWeight": "bold",
            "minWidth": "100px",
        }
    else:
        style = {
            "background": p.ORPHAN_BG if node.is_orphan else p.FILE_BG,
            "color": p.TEXT,
            "border": f"1px solid {p.BORDER}",
            "borderRadius": "8px",
            "padding": "10px",
            "fontSize": p.FONT_SIZE,
            "minWidth": "120px",
        }

    if node.is_selected:
        style["border"] = f"2px solid {p.SELECTED_BORDER}"
        style["fontWeight"] = "bold"
    return style


def edge_color_class(edge_type: str) -> str:
    return "external" if edge_type == ConnectionType.EXTERNAL.value else "internal"


def edge_style(edge_type: str) -> Dict[str, Any]:
    """Build the style payload for an edge of the given type."""
    p = GraphPalette
    color = p.EDGE_COLORS.get(edge_type, p.DEFAULT_EDGE_COLOR)
    return {
        "type": "smoothstep",
        "stroke": color,
        "strokeWidth": p.STROKE_WIDTH,
        "markerEnd": {"type": "arrowclosed", "color": color},
        "labelStyle": {"fontSize": p.EDGE_FONT_SIZE, "fill": p.EDGE_LABEL_COLOR},
    }
