"""
Repository Loader.

Fetches the two inputs of the graph engine, the file tree and the
connection list, through their ports.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.models import Connection, FileInfo
from ..ports.scanner_port import ScannerPort, ConnectionSourcePort, ScanError

logger = logging.getLogger(__name__)


@dataclass
class RepositorySnapshot:
    """Everything known about a repository after loading."""
    root_path: str
    tree: Optional[FileInfo] = None
    connections: List[Connection] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        return self.tree.count() if self.tree else 0

    @property
    def connection_count(self) -> int:
        return len(self.connections)


class RepositoryLoader:
    """Scans a repository and collects its connections."""

    def __init__(self, scanner: ScannerPort, source: ConnectionSourcePort):
        """
        Initialize the loader.

        Args:
            scanner: Produces the file tree (must be read-only)
            source: Produces the connection list
        """
        self.scanner = scanner
        self.source = source

    def load(self, root_path: str) -> RepositorySnapshot:
        """
        Load a repository.

        Raises:
            ScanError: When either collaborator fails. Other exceptions
                are wrapped so callers only handle one error kind.
        """
        try:
            tree = self.scanner.scan(root_path)
            connections = list(self.source.get_connections(root_path) or [])
        except ScanError:
            raise
        except Exception as e:
            raise ScanError(str(e)) from e

        logger.info("Loaded %s: %d entries, %d connections",
                    root_path, tree.count() if tree else 0, len(connections))
        return RepositorySnapshot(root_path=root_path, tree=tree, connections=connections)
