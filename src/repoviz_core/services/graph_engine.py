"""
Graph Engine - connections in, positioned graph out.

Runs the whole pipeline for one view:
    filter -> synthesize + classify -> layout

Every call recomputes from scratch. Nothing is kept between calls.
"""

import logging
from typing import Optional, Sequence

from ..domain.models import Connection, FileInfo, Graph
from ..domain.enums import GraphStatus, LayoutMode
from .selection_filter import SelectionFilter
from .synthesizer import GraphSynthesizer
from .layout_tree import TreeLayout, TreeSettings
from .layout_force import ForceLayout, ForceSettings

logger = logging.getLogger(__name__)


class GraphEngine:
    """
    Builds the renderable graph for the overview or for a selection.

    Without a focal file the full graph is laid out as a tree; with one,
    the filtered subgraph goes through the force simulation.
    """

    def __init__(
        self,
        tree_settings: Optional[TreeSettings] = None,
        force_settings: Optional[ForceSettings] = None,
    ):
        self.selection_filter = SelectionFilter()
        self.synthesizer = GraphSynthesizer()
        self.tree_layout = TreeLayout(tree_settings)
        self.force_layout = ForceLayout(force_settings)

    def build(
        self,
        connections: Sequence[Connection],
        focal: Optional[FileInfo] = None,
        mode: Optional[LayoutMode] = None,
    ) -> Graph:
        """
        Build and lay out the graph.

        Args:
            connections: Full connection list
            focal: Selected file (directories render the full graph)
            mode: Force a layout; default is tree for the full graph and
                force for an active selection

        Returns:
            Graph with positions and a status telling an empty repository
            apart from a selection with no connections
        """
        filtered = self.selection_filter.apply(connections, focal)

        if filtered.is_empty_for_selection:
            logger.info("No connections for %s", filtered.focal_path)
            return Graph(status=GraphStatus.NO_CONNECTIONS_FOR_SELECTION)

        graph = self.synthesizer.synthesize(
            filtered.connections,
            focal=focal if filtered.active else None,
            classify_from=connections,
        )
        if graph.is_empty:
            if filtered.active:
                # Everything kept for the selection was malformed
                logger.info("No usable connections for %s", filtered.focal_path)
                graph.status = GraphStatus.NO_CONNECTIONS_FOR_SELECTION
            else:
                graph.status = GraphStatus.EMPTY
            return graph

        if mode is None:
            mode = LayoutMode.FORCE if filtered.active else LayoutMode.TREE

        if mode == LayoutMode.FORCE:
            self.force_layout.apply(graph)
        else:
            self.tree_layout.apply(graph)
        graph.layout = mode

        logger.info(
            "Graph built: %d nodes, %d edges, layout=%s",
            len(graph.nodes), len(graph.edges), mode.value,
        )
        return graph
