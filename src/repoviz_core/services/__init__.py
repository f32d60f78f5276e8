"""
Services for RepoViz.

Graph synthesis, classification, filtering and layout.
"""

from .synthesizer import GraphSynthesizer
from .selection_filter import SelectionFilter, FilterResult
from .layout_tree import TreeLayout, TreeSettings
from .layout_force import ForceLayout, ForceSettings
from .graph_engine import GraphEngine
from .repository import RepositoryLoader, RepositorySnapshot

__all__ = [
    "GraphSynthesizer",
    "SelectionFilter",
    "FilterResult",
    "TreeLayout",
    "TreeSettings",
    "ForceLayout",
    "ForceSettings",
    "GraphEngine",
    "RepositoryLoader",
    "RepositorySnapshot",
]
