"""
App Coordinator for cross-ViewModel communication.

Handles:
- Repository loaded -> Graph connections
- Repository closed -> Graph reset
- File selected in the tree -> Graph focal file
"""

from typing import Optional
from PyQt6.QtCore import QObject, pyqtSignal

from .repository_vm import RepositoryVM
from .graph_vm import GraphVM
from repoviz_core.domain.models import FileInfo
from repoviz_core.services.repository import RepositorySnapshot
from repoviz_app.workers.load_worker import LoadWorker


class AppCoordinator(QObject):
    """
    Coordinates communication between ViewModels.

    Responsibilities:
    - When a repository finishes loading: feed its connections to the graph
    - When the repository is closed: clear the graph
    - When a file is selected: scope the graph to it
    - Run loads on a LoadWorker
    """

    # Signal emitted when status bar should update
    status_message = pyqtSignal(str, int)  # message, timeout_ms

    def __init__(self, repository_vm: RepositoryVM, graph_vm: GraphVM):
        """
        Initialize the coordinator.

        Args:
            repository_vm: Repository/dashboard ViewModel
            graph_vm: Graph ViewModel
        """
        super().__init__()

        self._repository_vm = repository_vm
        self._graph_vm = graph_vm
        self._worker: Optional[LoadWorker] = None

        # Wire up cross-VM connections
        self._connect_signals()

    def _connect_signals(self) -> None:
        """Connect cross-ViewModel signals."""
        self._repository_vm.loaded.connect(self._on_repository_loaded)
        self._repository_vm.repository_changed.connect(self._on_repository_changed)

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def select_file(self, file_info: Optional[FileInfo]) -> None:
        """Tree selection -> graph focal file."""
        self._graph_vm.select_file(file_info)

    def load_in_background(self) -> bool:
        """
        Start loading the current repository on a worker thread.

        Returns:
            True if a worker was started
        """
        path = self._repository_vm.repo_path
        if not path or (self._worker is not None and self._worker.isRunning()):
            return False

        self._repository_vm.begin_loading()
        self._worker = LoadWorker(self._repository_vm.loader, path)
        self._worker.loaded.connect(self._on_worker_loaded)
        self._worker.finished.connect(self._on_worker_finished)
        self._worker.start()
        return True

    # -------------------------------------------------------------------------
    # Handlers
    # -------------------------------------------------------------------------

    def _on_repository_loaded(self) -> None:
        self._graph_vm.reset(self._repository_vm.connections)
        self.status_message.emit(
            f"{self._repository_vm.file_count} files, "
            f"{self._repository_vm.connection_count} connections",
            5000,
        )

    def _on_repository_changed(self, path: str) -> None:
        if not path:
            self._graph_vm.reset([])

    def _on_worker_loaded(self, snapshot: RepositorySnapshot) -> None:
        self._repository_vm.apply_snapshot(snapshot)

    def _on_worker_finished(self, success: bool, message: str) -> None:
        if not success:
            self._repository_vm.apply_error(message)
        self.status_message.emit(message, 5000)
