"""
Enumerations for RepoViz domain.
"""

from enum import Enum


class NodeKind(str, Enum):
    """What a graph node stands for."""
    FILE = "file"
    FOLDER = "folder"       # Inferred from ancestor paths


class ConnectionType(str, Enum):
    """Well-known connection labels. Other free-form labels are allowed."""
    IMPORT = "import"
    EXTERNAL = "external"


class GraphStatus(str, Enum):
    """Outcome of a graph computation."""
    OK = "ok"
    EMPTY = "empty"                                 # No connections at all
    NO_CONNECTIONS_FOR_SELECTION = "no_connections_for_selection"


class LayoutMode(str, Enum):
    """Layout disciplines."""
    TREE = "tree"     # Hierarchical, full repository overview
    FORCE = "force"   # Physical simulation, selection-scoped view


class EndpointRole(str, Enum):
    """Role in which a node was first introduced by a connection."""
    SOURCE = "source"
    TARGET = "target"
