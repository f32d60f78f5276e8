"""
Background worker threads for RepoViz.

These QThread subclasses run long operations without blocking the UI.
"""

from .load_worker import LoadWorker

__all__ = [
    "LoadWorker",
]
