"""
Force-Directed Layout Engine.

Velocity-based physical simulation for the selection-scoped view:
- many-body repulsion between every node pair
- spring attraction along edges towards a rest length
- centering on the canvas center
- collision keeping node centers a minimum distance apart

The simulation always runs a fixed number of ticks while alpha cools
from 1 to alpha_min. There is no convergence test.
"""

import logging
import math
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..domain.models import Graph

logger = logging.getLogger(__name__)

# Golden angle, used for the deterministic initial spiral
INITIAL_ANGLE = math.pi * (3 - math.sqrt(5))


@dataclass
class ForceSettings:
    """Simulation tuning."""
    iterations: int = 300
    charge_strength: float = -400.0
    link_distance: float = 200.0
    center_x: float = 600.0             # 1200 x 800 canvas
    center_y: float = 400.0
    collision_radius: float = 100.0
    alpha_min: float = 0.001
    velocity_decay: float = 0.4
    initial_radius: float = 10.0
    seed: int = 1


class _Body:
    """Simulated state of one node."""

    __slots__ = ("x", "y", "vx", "vy")

    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y
        self.vx = 0.0
        self.vy = 0.0


class ForceLayout:
    """
    Runs the simulation and writes positions back into the graph.

    Reproducible: initial positions follow a phyllotaxis spiral in node
    order, and the tiny offsets that separate coincident points come from
    a Random seeded per run.
    """

    def __init__(self, settings: Optional[ForceSettings] = None):
        self.settings = settings or ForceSettings()
        self._rng = random.Random(self.settings.seed)

    def apply(self, graph: Graph) -> None:
        """Position every node of the graph in place."""
        s = self.settings
        self._rng = random.Random(s.seed)

        ids = list(graph.nodes)
        bodies = self._initial_bodies(len(ids))
        index_of = {node_id: i for i, node_id in enumerate(ids)}

        links: List[Tuple[int, int]] = []
        for edge in graph.edges:
            src = index_of.get(edge.source)
            dst = index_of.get(edge.target)
            if src is None or dst is None or src == dst:
                continue
            links.append((src, dst))

        degree = [0] * len(bodies)
        for src, dst in links:
            degree[src] += 1
            degree[dst] += 1

        alpha = 1.0
        alpha_decay = 1 - s.alpha_min ** (1 / s.iterations) if s.iterations > 0 else 0.0
        keep = 1 - s.velocity_decay

        for _ in range(s.iterations):
            alpha += (0.0 - alpha) * alpha_decay

            self._apply_charge(bodies, alpha)
            self._apply_links(bodies, links, degree, alpha)
            self._apply_center(bodies)
            self._apply_collision(bodies)

            for body in bodies:
                body.vx *= keep
                body.x += body.vx
                body.vy *= keep
                body.y += body.vy

        for node_id, node in graph.nodes.items():
            i = index_of.get(node_id)
            if i is None:
                node.position.x, node.position.y = 0.0, 0.0
                continue
            node.position.x = bodies[i].x
            node.position.y = bodies[i].y

        logger.debug("Force layout: %d nodes, %d links, %d ticks",
                     len(bodies), len(links), s.iterations)

    def positions(self, graph: Graph) -> Dict[str, Tuple[float, float]]:
        """Run the layout and return id -> (x, y)."""
        self.apply(graph)
        return {nid: (n.position.x, n.position.y) for nid, n in graph.nodes.items()}

    # -------------------------------------------------------------------------
    # Forces
    # -------------------------------------------------------------------------

    def _initial_bodies(self, count: int) -> List[_Body]:
        r0 = self.settings.initial_radius
        bodies = []
        for i in range(count):
            radius = r0 * math.sqrt(0.5 + i)
            angle = i * INITIAL_ANGLE
            bodies.append(_Body(radius * math.cos(angle), radius * math.sin(angle)))
        return bodies

    def _jiggle(self) -> float:
        return (self._rng.random() - 0.5) * 1e-6

    def _apply_charge(self, bodies: List[_Body], alpha: float) -> None:
        """Pairwise repulsion with inverse-distance falloff."""
        strength = self.settings.charge_strength
        for i, body in enumerate(bodies):
            for j, other in enumerate(bodies):
                if i == j:
                    continue
                dx = other.x - body.x
                dy = other.y - body.y
                l = dx * dx + dy * dy
                if dx == 0:
                    dx = self._jiggle()
                    l += dx * dx
                if dy == 0:
                    dy = self._jiggle()
                    l += dy * dy
                if l < 1:
                    l = math.sqrt(l)
                w = strength * alpha / l
                body.vx += dx * w
                body.vy += dy * w

    def _apply_links(self, bodies, links, degree, alpha: float) -> None:
        """Springs pulling each linked pair towards the rest length."""
        distance = self.settings.link_distance
        for src, dst in links:
            source, target = bodies[src], bodies[dst]
            dx = target.x + target.vx - source.x - source.vx or self._jiggle()
            dy = target.y + target.vy - source.y - source.vy or self._jiggle()
            l = math.sqrt(dx * dx + dy * dy)
            strength = 1 / min(degree[src], degree[dst])
            l = (l - distance) / l * alpha * strength
            dx *= l
            dy *= l
            bias = degree[src] / (degree[src] + degree[dst])
            target.vx -= dx * bias
            target.vy -= dy * bias
            source.vx += dx * (1 - bias)
            source.vy += dy * (1 - bias)

    def _apply_center(self, bodies: List[_Body]) -> None:
        """Shift every body so the mean position sits on the canvas center."""
        if not bodies:
            return
        n = len(bodies)
        shift_x = sum(b.x for b in bodies) / n - self.settings.center_x
        shift_y = sum(b.y for b in bodies) / n - self.settings.center_y
        for body in bodies:
            body.x -= shift_x
            body.y -= shift_y

    def _apply_collision(self, bodies: List[_Body]) -> None:
        """Push apart any two bodies closer than twice the collision radius."""
        radius = self.settings.collision_radius
        min_dist = radius + radius
        for i, body in enumerate(bodies):
            xi = body.x + body.vx
            yi = body.y + body.vy
            for other in bodies[i + 1:]:
                dx = xi - other.x - other.vx
                dy = yi - other.y - other.vy
                l = dx * dx + dy * dy
                if l >= min_dist * min_dist:
                    continue
                if dx == 0:
                    dx = self._jiggle()
                    l += dx * dx
                if dy == 0:
                    dy = self._jiggle()
                    l += dy * dy
                l = math.sqrt(l)
                l = (min_dist - l) / l
                dx *= l
                dy *= l
                # Equal radii split the correction evenly
                body.vx += dx * 0.5
                body.vy += dy * 0.5
                other.vx -= dx * 0.5
                other.vy -= dy * 0.5
