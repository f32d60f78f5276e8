"""
RepoViz App - PyQt6 view models driving the graph engine.
"""

__version__ = "0.1.0"
