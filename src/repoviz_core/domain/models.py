"""
Domain models (DTOs) for RepoViz.

These are pure data classes with no filesystem or UI dependencies.
"""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any, Iterator, Set

from .enums import NodeKind, GraphStatus, LayoutMode


@dataclass
class FileInfo:
    """A file or directory produced by the scanner."""
    name: str
    path: str                    # Root-relative, may contain backslashes
    is_dir: bool
    children: Optional[List["FileInfo"]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FileInfo":
        """Build a tree from the scanner wire shape (name/path/isDir/children)."""
        children = data.get("children")
        return cls(
            name=data.get("name", ""),
            path=data.get("path", ""),
            is_dir=bool(data.get("isDir", data.get("is_dir", False))),
            children=[cls.from_dict(c) for c in children] if children is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"name": self.name, "path": self.path, "isDir": self.is_dir}
        if self.children is not None:
            result["children"] = [c.to_dict() for c in self.children]
        return result

    def walk(self) -> Iterator["FileInfo"]:
        """Yield this entry and every descendant, depth-first."""
        yield self
        for child in self.children or []:
            yield from child.walk()

    def count(self) -> int:
        """Number of entries in the tree, including this one."""
        return sum(1 for _ in self.walk())


@dataclass
class Connection:
    """A directed relationship between two files as reported by the extractor."""
    from_path: str = ""
    to_path: str = ""
    from_file: str = ""          # Display name
    to_file: str = ""            # Display name
    type: str = ""               # "import", "external" or any free-form label

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Connection":
        """Accept the extractor wire keys (from/to/fromFile/toFile/type)."""
        return cls(
            from_path=data.get("from") or "",
            to_path=data.get("to") or "",
            from_file=data.get("fromFile") or "",
            to_file=data.get("toFile") or "",
            type=data.get("type") or "",
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "from": self.from_path,
            "to": self.to_path,
            "fromFile": self.from_file,
            "toFile": self.to_file,
            "type": self.type,
        }


@dataclass
class Position:
    """Mutable 2-D position of a node."""
    x: float = 0.0
    y: float = 0.0


@dataclass
class GraphNode:
    """A synthesized vertex: a file or an inferred folder."""
    id: str                      # Normalized path
    label: str
    kind: NodeKind = NodeKind.FILE
    position: Position = field(default_factory=Position)
    is_orphan: bool = False
    is_selected: bool = False
    style: Dict[str, str] = field(default_factory=dict)

    @property
    def segments(self) -> List[str]:
        return self.id.split("/")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "data": {"label": self.label, "kind": self.kind.value},
            "position": {"x": self.position.x, "y": self.position.y},
            "style": dict(self.style),
        }


@dataclass
class GraphEdge:
    """A directed edge. Parallel edges are kept distinct by their ordinal."""
    id: str
    source: str
    target: str
    type: str
    animated: bool = False
    color_class: str = "internal"
    style: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "source": self.source,
            "target": self.target,
            "label": self.type,
            "animated": self.animated,
            "className": self.color_class,
            "style": dict(self.style),
        }


@dataclass
class Graph:
    """The renderable output: nodes keyed by id plus insertion-ordered edges."""
    nodes: Dict[str, GraphNode] = field(default_factory=dict)
    edges: List[GraphEdge] = field(default_factory=list)
    status: GraphStatus = GraphStatus.OK
    dropped: int = 0             # Malformed connections skipped during synthesis
    layout: Optional[LayoutMode] = None  # Layout the engine applied, None when nothing was laid out

    def node_ids(self) -> Set[str]:
        return set(self.nodes)

    def edge_ids(self) -> List[str]:
        return [e.id for e in self.edges]

    def identity(self) -> tuple:
        """Node/edge identity set, used to decide whether positions can be kept."""
        return (frozenset(self.nodes), tuple(self.edge_ids()))

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    def to_dict(self) -> Dict[str, Any]:
        """Payload handed to the rendering surface."""
        return {
            "nodes": [n.to_dict() for n in self.nodes.values()],
            "edges": [e.to_dict() for e in self.edges],
        }
