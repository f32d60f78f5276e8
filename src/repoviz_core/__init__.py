"""
RepoViz Core - Headless library for repository graph synthesis and layout.

Turns a scanned file tree and a list of file connections into a
positioned node/edge graph. It has no UI dependencies and can be
embedded in other applications.
"""

__version__ = "0.1.0"

# Lazy imports to avoid loading everything at once
def __getattr__(name):
    if name == "GraphEngine":
        from .services.graph_engine import GraphEngine
        return GraphEngine
    elif name == "LocalScanner":
        from .adapters.local_scanner import LocalScanner
        return LocalScanner
    elif name == "StaticConnectionSource":
        from .adapters.static_source import StaticConnectionSource
        return StaticConnectionSource
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    "__version__",
    "GraphEngine",
    "LocalScanner",
    "StaticConnectionSource",
]
