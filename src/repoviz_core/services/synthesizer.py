"""
Graph Synthesizer.

Merges a flat connection list into one node/edge graph: one file node per
unique endpoint, one edge per connection, and folder nodes for every
ancestor path not already present.
"""

import logging
from typing import Dict, List, Optional, Sequence

from ..domain.models import Connection, FileInfo, Graph, GraphEdge, GraphNode
from ..domain.enums import ConnectionType, EndpointRole, GraphStatus, NodeKind
from .classifier import ConnectionIndex, classify
from .paths import ancestors_of, last_segment, resolve_endpoints
from .styles import edge_color_class, edge_style, node_style

logger = logging.getLogger(__name__)


class GraphSynthesizer:
    """
    Builds a Graph from connections.

    Nodes are keyed by normalized path, never by object identity, so
    "a\\b.py" and "a/b.py" are the same node.
    """

    def synthesize(
        self,
        connections: Sequence[Connection],
        focal: Optional[FileInfo] = None,
        classify_from: Optional[Sequence[Connection]] = None,
    ) -> Graph:
        """
        Synthesize nodes and edges.

        Args:
            connections: Connections to turn into edges (possibly filtered)
            focal: Selected file, marks the matching node as selected
            classify_from: Full pre-filter list used for orphan
                classification (defaults to connections)

        Returns:
            Graph with classified, styled nodes and insertion-ordered edges
        """
        index = ConnectionIndex.build(classify_from if classify_from is not None else connections)

        nodes: Dict[str, GraphNode] = {}
        roles: Dict[str, EndpointRole] = {}
        edges: List[GraphEdge] = []
        dropped = 0

        for ordinal, conn in enumerate(connections):
            from_id, to_id = resolve_endpoints(conn)
            if not from_id or not to_id:
                dropped += 1
                logger.debug("Dropping malformed connection #%d: %r", ordinal, conn)
                continue

            if from_id not in nodes:
                nodes[from_id] = GraphNode(id=from_id, label=conn.from_file or from_id)
                roles[from_id] = EndpointRole.SOURCE
            if to_id not in nodes:
                nodes[to_id] = GraphNode(id=to_id, label=conn.to_file or to_id)
                roles[to_id] = EndpointRole.TARGET

            edges.append(GraphEdge(
                id=f"e{from_id}-{to_id}-{ordinal}",
                source=from_id,
                target=to_id,
                type=conn.type,
                animated=conn.type == ConnectionType.IMPORT.value,
                color_class=edge_color_class(conn.type),
                style=edge_style(conn.type),
            ))

        for folder in self._infer_folders(list(nodes)):
            nodes[folder.id] = folder

        for node in nodes.values():
            classify(node, roles.get(node.id), index, focal)
            node.style = node_style(node)

        if dropped:
            logger.info("Dropped %d malformed connection(s) of %d", dropped, len(connections))

        status = GraphStatus.OK if nodes else GraphStatus.EMPTY
        return Graph(nodes=nodes, edges=edges, status=status, dropped=dropped)

    def _infer_folders(self, node_ids: List[str]) -> List[GraphNode]:
        """Folder nodes for ancestor paths that are not already nodes."""
        known = set(node_ids)
        folders: Dict[str, GraphNode] = {}
        for node_id in node_ids:
            for ancestor in ancestors_of(node_id):
                if ancestor in known or ancestor in folders:
                    continue
                folders[ancestor] = GraphNode(
                    id=ancestor,
                    label=last_segment(ancestor),
                    kind=NodeKind.FOLDER,
                )
        return list(folders.values())
