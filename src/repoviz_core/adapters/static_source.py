"""
In-memory connection source.

Serves a fixed connection list, for embedding the engine behind another
extractor and for tests.
"""

from typing import Any, Dict, Iterable, List, Union

from ..domain.models import Connection
from ..ports.scanner_port import ConnectionSourcePort


class StaticConnectionSource(ConnectionSourcePort):
    """Returns the same connections for every root."""

    def __init__(self, connections: Iterable[Union[Connection, Dict[str, Any]]] = ()):
        self._connections: List[Connection] = [
            c if isinstance(c, Connection) else Connection.from_dict(c)
            for c in connections
        ]

    def get_connections(self, root_path: str) -> List[Connection]:
        return list(self._connections)
