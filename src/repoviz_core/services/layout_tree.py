"""
Hierarchical Layout Engine.

Places nodes by folder containment only: depth goes along x, siblings are
stacked along y, and every subtree reserves enough vertical room that it
never overlaps the next sibling. Edges are not considered.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..domain.models import Graph, GraphNode
from .paths import parent_of

logger = logging.getLogger(__name__)


@dataclass
class TreeSettings:
    """Tree layout tuning."""
    horizontal_spacing: float = 280.0   # Per depth level
    vertical_spacing: float = 100.0     # Consumed by each leaf
    start_y: float = 50.0


class TreeLayout:
    """Depth-first, left-to-right placement of the containment hierarchy."""

    def __init__(self, settings: Optional[TreeSettings] = None):
        self.settings = settings or TreeSettings()

    def apply(self, graph: Graph) -> float:
        """
        Position every node of the graph in place.

        Returns:
            Total vertical extent consumed
        """
        roots, children_of = self._partition(list(graph.nodes.values()))
        spacing_x = self.settings.horizontal_spacing
        spacing_y = self.settings.vertical_spacing

        def layout_nodes(current: List[GraphNode], depth: int, start_y: float) -> float:
            """Place a sibling list and its subtrees, return the height used."""
            y_offset = start_y
            for node in current:
                node.position.x = depth * spacing_x
                node.position.y = y_offset

                children = children_of.get(node.id)
                if children:
                    y_offset += layout_nodes(children, depth + 1, y_offset)
                    y_offset += spacing_y / 2
                else:
                    y_offset += spacing_y
            return y_offset - start_y

        height = layout_nodes(roots, 0, self.settings.start_y)
        logger.debug("Tree layout: %d roots, %d nodes, height %.0f",
                     len(roots), len(graph.nodes), height)
        return height

    def _partition(self, nodes: List[GraphNode]):
        """Split nodes into roots and parent_path -> children buckets."""
        ids = {n.id for n in nodes}
        roots: List[GraphNode] = []
        children_of: Dict[str, List[GraphNode]] = {}

        for node in nodes:
            if "/" not in node.id:
                roots.append(node)
                continue
            parent = parent_of(node.id)
            if parent not in ids:
                # Parent was never synthesized, place it at the top level
                roots.append(node)
                continue
            children_of.setdefault(parent, []).append(node)

        return roots, children_of
