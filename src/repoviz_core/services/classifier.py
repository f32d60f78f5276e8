"""
Orphan/Selection Classifier.

Tags nodes as orphaned or selected. The flags only drive presentation;
they never change graph topology.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Set

from ..domain.models import Connection, FileInfo, GraphNode
from ..domain.enums import EndpointRole, NodeKind
from .paths import normalize, resolve_endpoints


@dataclass
class ConnectionIndex:
    """Source and target id sets built in one pass over a connection list."""
    all_sources: Set[str] = field(default_factory=set)
    all_targets: Set[str] = field(default_factory=set)

    @classmethod
    def build(cls, connections: Iterable[Connection]) -> "ConnectionIndex":
        """
        Index the full (pre-filter) connection list.

        Only connections with a resolvable source contribute, and they
        contribute both endpoints.
        """
        index = cls()
        for conn in connections:
            from_id, to_id = resolve_endpoints(conn)
            if from_id:
                index.all_sources.add(from_id)
                index.all_targets.add(to_id)
        return index

    def is_orphan(self, node_id: str, role: EndpointRole) -> bool:
        """
        A source nothing points at, or a sink nothing originates from.

        Args:
            node_id: Normalized node id
            role: Role in which the node was first introduced
        """
        if role == EndpointRole.SOURCE:
            return node_id not in self.all_targets
        return node_id not in self.all_sources


def is_selected(node: GraphNode, focal: Optional[FileInfo]) -> bool:
    """
    Check whether a node is the focal file.

    Matches on id or on label, since some callers identify files by
    display name rather than by full path.
    """
    if focal is None or not focal.path:
        return False
    focal_path = normalize(focal.path)
    return node.id == focal_path or node.label == focal_path or node.label == focal.path


def classify(
    node: GraphNode,
    role: Optional[EndpointRole],
    index: ConnectionIndex,
    focal: Optional[FileInfo] = None,
) -> GraphNode:
    """Set is_orphan/is_selected on a node in place and return it."""
    if node.kind == NodeKind.FOLDER or role is None:
        node.is_orphan = False
    else:
        node.is_orphan = index.is_orphan(node.id, role)
    node.is_selected = is_selected(node, focal)
    return node
