"""
Adapters implementing RepoViz ports.
"""

from .local_scanner import LocalScanner, IgnoreMatcher
from .static_source import StaticConnectionSource

__all__ = ["LocalScanner", "IgnoreMatcher", "StaticConnectionSource"]
