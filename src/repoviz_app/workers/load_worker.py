"""
Load worker thread.

Runs repository scanning and connection loading in the background
without blocking the UI.
"""

from PyQt6.QtCore import QThread, pyqtSignal

from repoviz_core.services.repository import RepositoryLoader


class LoadWorker(QThread):
    """
    Background thread for loading a repository.

    Signals:
        loaded(object): Emitted with the RepositorySnapshot on success
        finished(bool, str): Emitted when loading completes with (success, message)
    """

    loaded = pyqtSignal(object)  # RepositorySnapshot
    finished = pyqtSignal(bool, str)  # success, message

    def __init__(self, loader: RepositoryLoader, root_path: str):
        """
        Initialize the worker.

        Args:
            loader: The repository loader to use
            root_path: Repository directory to load
        """
        super().__init__()
        self.loader = loader
        self.root_path = root_path

    def run(self):
        """Run the load operation."""
        try:
            snapshot = self.loader.load(self.root_path)
            self.loaded.emit(snapshot)
            self.finished.emit(
                True,
                f"Loaded {snapshot.file_count:,} files, {snapshot.connection_count:,} connections"
            )
        except Exception as e:
            self.finished.emit(False, str(e))
