"""
Scanner and connection source port interfaces.

Define the contracts for the collaborators that feed the graph engine.
All implementations MUST be read-only.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..domain.models import FileInfo, Connection


class ScanError(Exception):
    """Raised when a repository cannot be scanned or analyzed."""


class ScannerPort(ABC):
    """Produces the file tree of a repository."""

    @abstractmethod
    def scan(self, root_path: str) -> FileInfo:
        """
        Scan a repository directory.

        Args:
            root_path: Directory to scan

        Returns:
            Root FileInfo with root-relative child paths

        Raises:
            ScanError: On I/O failure or an invalid path
        """
        pass


class ConnectionSourcePort(ABC):
    """Produces the already-resolved connection list of a repository."""

    @abstractmethod
    def get_connections(self, root_path: str) -> List[Connection]:
        """
        Get all file connections of a repository.

        May include connections to paths outside the tree
        (e.g. external packages, tagged type="external").

        Raises:
            ScanError: On I/O failure or an invalid path
        """
        pass


class DirectoryPickerPort(ABC):
    """Lets the user pick a repository directory."""

    @abstractmethod
    def select_directory(self) -> Optional[str]:
        """Return the chosen directory, or None/"" when cancelled."""
        pass
