"""
Graph ViewModel for the graph visualization.

Manages:
- Connection list of the loaded repository
- Focal file (selection-scoped view)
- Layout settings
- The current positioned graph handed to the rendering surface

The graph is rebuilt wholesale whenever the connections or the selection
change. Positions the user dragged are kept as long as the rebuilt graph
has the same node/edge identity set and went through the same layout.
"""

from dataclasses import dataclass
from typing import Optional, List, Dict, Any, Sequence, Set
from PyQt6.QtCore import pyqtSignal

from .base import BaseViewModel
from repoviz_core.domain.models import Connection, FileInfo, Graph
from repoviz_core.domain.enums import GraphStatus, LayoutMode
from repoviz_core.services.graph_engine import GraphEngine
from repoviz_core.services.paths import normalize


@dataclass
class GraphSettings:
    """Graph display settings."""
    layout_mode: Optional[LayoutMode] = None  # None = tree overview, force for selections


class GraphVM(BaseViewModel):
    """
    ViewModel for graph visualization.

    Signals:
        graph_changed: Emitted after the graph was rebuilt
        selection_changed: Emitted when the focal file changes
        settings_changed: Emitted when display settings change

    State:
        graph: The current positioned Graph
        focal_file: Selected FileInfo or None
        empty_message: Text to show instead of an empty canvas
    """

    # Signals
    graph_changed = pyqtSignal()
    selection_changed = pyqtSignal()
    settings_changed = pyqtSignal()

    def __init__(self, engine: Optional[GraphEngine] = None):
        """
        Initialize the ViewModel.

        Args:
            engine: Graph engine (a default one is created if None)
        """
        super().__init__()

        self._engine = engine or GraphEngine()

        # State
        self._connections: List[Connection] = []
        self._focal: Optional[FileInfo] = None
        self._settings = GraphSettings()
        self._graph = Graph(status=GraphStatus.EMPTY)
        self._moved: Set[str] = set()  # Node ids dragged in the current graph

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def graph(self) -> Graph:
        """Get the current graph."""
        return self._graph

    @property
    def connections(self) -> List[Connection]:
        return list(self._connections)

    @property
    def focal_file(self) -> Optional[FileInfo]:
        """Get the selected file (None = full repository)."""
        return self._focal

    @property
    def settings(self) -> GraphSettings:
        return self._settings

    @property
    def status(self) -> GraphStatus:
        return self._graph.status

    @property
    def empty_message(self) -> str:
        """Message for an empty graph, or "" when there is something to draw."""
        if self._graph.status == GraphStatus.NO_CONNECTIONS_FOR_SELECTION:
            name = self._focal.name if self._focal else ""
            return f"No connections for {name}"
        if self._graph.status == GraphStatus.EMPTY:
            return "No connections found"
        return ""

    def payload(self) -> Dict[str, Any]:
        """Nodes and edges for the rendering surface."""
        return self._graph.to_dict()

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def set_connections(self, connections: Sequence[Connection]) -> None:
        """Replace the connection list and rebuild."""
        self._connections = list(connections)
        self._rebuild()

    def select_file(self, file_info: Optional[FileInfo]) -> None:
        """
        Set the focal file.

        Directories do not scope the view; selecting one shows the full
        graph, same as clearing the selection.
        """
        if file_info is not None and file_info.is_dir:
            file_info = None
        if self._same_file(self._focal, file_info):
            return
        self._focal = file_info
        self.selection_changed.emit()
        self._rebuild()

    def clear_selection(self) -> None:
        self.select_file(None)

    def reset(self, connections: Sequence[Connection]) -> None:
        """Replace the connections and drop the selection with a single rebuild."""
        self._connections = list(connections)
        if self._focal is not None:
            self._focal = None
            self.selection_changed.emit()
        self._rebuild()

    def set_layout_mode(self, mode: Optional[LayoutMode]) -> None:
        """Force a layout, or None for the automatic choice."""
        if self._settings.layout_mode != mode:
            self._settings.layout_mode = mode
            self.settings_changed.emit()
            self._rebuild(keep_positions=False)

    def move_node(self, node_id: str, x: float, y: float) -> bool:
        """
        Record a position set by the rendering surface (drag).

        Returns:
            True if the node exists in the current graph
        """
        node = self._graph.nodes.get(node_id)
        if node is None:
            return False
        node.position.x = x
        node.position.y = y
        self._moved.add(node_id)
        return True

    def refresh(self) -> None:
        """Rebuild the graph from the current inputs."""
        self._rebuild()

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _rebuild(self, keep_positions: bool = True) -> None:
        new_graph = self._engine.build(
            self._connections,
            focal=self._focal,
            mode=self._settings.layout_mode,
        )

        same_view = (
            new_graph.identity() == self._graph.identity()
            and new_graph.layout == self._graph.layout
        )
        if keep_positions and same_view:
            for node_id in self._moved:
                old = self._graph.nodes[node_id].position
                new_graph.nodes[node_id].position.x = old.x
                new_graph.nodes[node_id].position.y = old.y
        else:
            self._moved = set()

        self._graph = new_graph
        self.graph_changed.emit()

    @staticmethod
    def _same_file(a: Optional[FileInfo], b: Optional[FileInfo]) -> bool:
        if a is None or b is None:
            return a is b
        return normalize(a.path) == normalize(b.path)
