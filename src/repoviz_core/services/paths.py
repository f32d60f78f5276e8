"""
Path utilities.

Node identity is the normalized path string, so every component that
compares or splits paths goes through these helpers.
"""

from typing import List, Tuple

from ..domain.models import Connection

SEPARATOR = "/"


def normalize(path: str) -> str:
    """Replace every backslash with a forward slash. Idempotent."""
    return (path or "").replace("\\", SEPARATOR)


def ancestors_of(path: str) -> List[str]:
    """
    Get the ancestor folder paths of a path, shallowest first.

    "a/b/c" -> ["a", "a/b"]. The path itself is excluded, so a
    single-segment path has no ancestors.
    """
    parts = path.split(SEPARATOR)
    return [SEPARATOR.join(parts[:i + 1]) for i in range(len(parts) - 1)]


def parent_of(path: str) -> str:
    """All segments except the last ("" for a single-segment path)."""
    return SEPARATOR.join(path.split(SEPARATOR)[:-1])


def last_segment(path: str) -> str:
    return path.split(SEPARATOR)[-1]


def depth_of(path: str) -> int:
    """Number of separators, i.e. 0 for a root-level path."""
    return len(path.split(SEPARATOR)) - 1


def resolve_endpoints(conn: Connection) -> Tuple[str, str]:
    """
    Resolve the (from, to) node ids of a connection.

    The path fields win over the display-name fields when both are
    populated. Either id may come back empty for a malformed connection.
    """
    from_id = normalize(conn.from_path or conn.from_file)
    to_id = normalize(conn.to_path or conn.to_file)
    return from_id, to_id
