"""
Repository ViewModel.

Manages:
- The selected repository path
- Loading state and the single user-visible error string
- The scanned file tree and the connection list
- Which view (graph or tree) the dashboard shows
"""

from typing import Optional, List
from PyQt6.QtCore import pyqtSignal

from .base import BaseViewModel
from repoviz_core.domain.models import Connection, FileInfo
from repoviz_core.ports.scanner_port import DirectoryPickerPort
from repoviz_core.services.repository import RepositoryLoader, RepositorySnapshot

DEFAULT_ERROR = "Failed to load repository"

VIEW_GRAPH = "graph"
VIEW_TREE = "tree"


class RepositoryVM(BaseViewModel):
    """
    ViewModel for the repository dashboard.

    Signals:
        repository_changed(str): Emitted when a repository is opened or closed
        loading_changed(bool): Emitted when loading starts or stops
        loaded(): Emitted after tree and connections were replaced
        error_changed(str): Emitted when the error message changes
        view_mode_changed(str): Emitted when switching graph/tree view
    """

    repository_changed = pyqtSignal(str)
    loading_changed = pyqtSignal(bool)
    loaded = pyqtSignal()
    error_changed = pyqtSignal(str)
    view_mode_changed = pyqtSignal(str)

    def __init__(self, loader: RepositoryLoader, picker: Optional[DirectoryPickerPort] = None):
        """
        Initialize the ViewModel.

        Args:
            loader: Fetches tree and connections
            picker: Directory picker (optional, e.g. headless use)
        """
        super().__init__()

        self._loader = loader
        self._picker = picker

        # State
        self._repo_path: Optional[str] = None
        self._snapshot: Optional[RepositorySnapshot] = None
        self._loading = False
        self._error: Optional[str] = None
        self._view_mode = VIEW_GRAPH

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def loader(self) -> RepositoryLoader:
        return self._loader

    @property
    def repo_path(self) -> Optional[str]:
        return self._repo_path

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def file_tree(self) -> List[FileInfo]:
        """Top-level entries for the tree widget (the root, if loaded)."""
        if self._snapshot and self._snapshot.tree:
            return [self._snapshot.tree]
        return []

    @property
    def connections(self) -> List[Connection]:
        return list(self._snapshot.connections) if self._snapshot else []

    @property
    def file_count(self) -> int:
        return self._snapshot.file_count if self._snapshot else 0

    @property
    def connection_count(self) -> int:
        return self._snapshot.connection_count if self._snapshot else 0

    @property
    def view_mode(self) -> str:
        return self._view_mode

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def select_directory(self) -> bool:
        """
        Ask the picker for a directory and open it.

        Returns:
            True if a repository was opened
        """
        if self._picker is None:
            return False
        path = self._picker.select_directory()
        if not path:
            return False
        self.open_repository(path)
        return True

    def open_repository(self, path: str) -> None:
        """Set the current repository. Loading is a separate step."""
        self._repo_path = path
        self._snapshot = None
        self.repository_changed.emit(path)

    def back(self) -> None:
        """Close the repository and return to the welcome screen."""
        self._repo_path = None
        self._snapshot = None
        self._set_error(None)
        self.repository_changed.emit("")

    def load(self) -> bool:
        """
        Load the current repository synchronously.

        Returns:
            True on success; on failure `error` holds the message
        """
        if not self._repo_path:
            return False

        self.begin_loading()
        try:
            snapshot = self._loader.load(self._repo_path)
        except Exception as e:
            self.apply_error(str(e))
            return False
        self.apply_snapshot(snapshot)
        return True

    def begin_loading(self) -> None:
        self._set_error(None)
        self._set_loading(True)

    def apply_snapshot(self, snapshot: RepositorySnapshot) -> None:
        """Publish a loaded snapshot (also used by LoadWorker)."""
        self._snapshot = snapshot
        self._set_loading(False)
        self.loaded.emit()

    def apply_error(self, message: str) -> None:
        """Publish a load failure (also used by LoadWorker)."""
        self._set_error(message or DEFAULT_ERROR)
        self._set_loading(False)

    def set_view_mode(self, mode: str) -> None:
        """Switch between the graph and tree views."""
        if mode not in (VIEW_GRAPH, VIEW_TREE):
            raise ValueError(f"Unknown view mode: {mode}")
        if self._view_mode != mode:
            self._view_mode = mode
            self.view_mode_changed.emit(mode)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _set_loading(self, loading: bool) -> None:
        if self._loading != loading:
            self._loading = loading
            self.loading_changed.emit(loading)

    def _set_error(self, message: Optional[str]) -> None:
        if self._error != message:
            self._error = message
            self.error_changed.emit(message or "")
