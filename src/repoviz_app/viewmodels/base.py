"""
Base ViewModel class for RepoViz MVVM architecture.

Provides the foundation for all ViewModels with:
- PyQt6 signal support for UI binding
- Property change notification pattern
- Service injection support
"""

from typing import Optional
from PyQt6.QtCore import QObject


class BaseViewModel(QObject):
    """
    Base class for all ViewModels.

    Pattern:
    - Properties with signals on change
    - Commands as methods
    - No widget references (UI-agnostic)
    - Services injected via constructor
    """

    def __init__(self, parent: Optional[QObject] = None):
        """
        Initialize the ViewModel.

        Args:
            parent: Optional parent QObject for Qt memory management
        """
        super().__init__(parent)
