"""
Ports (interfaces) for RepoViz.

These define the contracts that adapters must implement.
This enables dependency injection and testing with mocks.
"""

from .scanner_port import (
    ScanError,
    ScannerPort,
    ConnectionSourcePort,
    DirectoryPickerPort,
)

__all__ = ["ScanError", "ScannerPort", "ConnectionSourcePort", "DirectoryPickerPort"]
