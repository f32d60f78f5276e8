"""
Selection-Scoped Filter.

Restricts the connection list to the neighbourhood of a focal file
before synthesis.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..domain.models import Connection, FileInfo
from .paths import normalize, resolve_endpoints

logger = logging.getLogger(__name__)


@dataclass
class FilterResult:
    """Connections that survived filtering."""
    connections: List[Connection] = field(default_factory=list)
    focal_path: Optional[str] = None
    active: bool = False         # False = no focal file, full list returned

    @property
    def is_empty_for_selection(self) -> bool:
        """True when a focal file is set but nothing touches it."""
        return self.active and not self.connections


class SelectionFilter:
    """
    Keeps the connections among the focal file and its direct neighbours.

    The related set is the focal path plus every path sharing a
    connection with it. A connection is kept when both endpoints are in
    the related set, so edges between two neighbours are kept as well.
    """

    def apply(
        self,
        connections: Sequence[Connection],
        focal: Optional[FileInfo],
    ) -> FilterResult:
        """
        Filter connections around a focal file.

        Args:
            connections: Full connection list
            focal: Selected file; None or a directory disables filtering

        Returns:
            FilterResult with the kept connections
        """
        if focal is None or focal.is_dir or not focal.path:
            return FilterResult(connections=list(connections), active=False)

        focal_path = normalize(focal.path)
        related = {focal_path}

        for conn in connections:
            from_path, to_path = resolve_endpoints(conn)
            if from_path == focal_path:
                related.add(to_path)
            elif to_path == focal_path:
                related.add(from_path)

        kept = []
        for conn in connections:
            from_path, to_path = resolve_endpoints(conn)
            if from_path in related and to_path in related:
                kept.append(conn)

        logger.debug(
            "Selection %s: %d related paths, %d/%d connections kept",
            focal_path, len(related), len(kept), len(connections),
        )
        return FilterResult(connections=kept, focal_path=focal_path, active=True)
