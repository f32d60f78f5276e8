"""
Domain models for RepoViz.

Contains DTOs, enums, and data structures used throughout the application.
"""

from .models import (
    FileInfo,
    Connection,
    Position,
    GraphNode,
    GraphEdge,
    Graph,
)
from .enums import (
    NodeKind,
    ConnectionType,
    GraphStatus,
    LayoutMode,
    EndpointRole,
)

__all__ = [
    # Models
    "FileInfo",
    "Connection",
    "Position",
    "GraphNode",
    "GraphEdge",
    "Graph",
    # Enums
    "NodeKind",
    "ConnectionType",
    "GraphStatus",
    "LayoutMode",
    "EndpointRole",
]
