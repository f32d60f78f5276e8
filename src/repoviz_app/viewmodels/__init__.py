"""
ViewModels for RepoViz app.

MVVM architecture separating business logic from UI:
- ViewModels handle state and business logic
- Views (the graph widget) handle rendering and user input
- Services handle data access and operations
"""

from .base import BaseViewModel
from .graph_vm import GraphVM, GraphSettings
from .repository_vm import RepositoryVM
from .coordinator import AppCoordinator

__all__ = [
    # Base
    "BaseViewModel",

    # ViewModels
    "GraphVM",
    "RepositoryVM",
    "AppCoordinator",

    # Data classes
    "GraphSettings",
]
