"""Cast Duet solver façade.

Builds the move graph once and answers "how do I get from here to
there?" questions in terms of position strings.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass

from castduet.engine.graphbuilder.builder import Graph, build_graph
from castduet.engine.pathfinder.pathfinder import reconstruct_path, shortest_paths
from castduet.models.errors import DuetError, PositionError
from castduet.models.ring import FREE, Ring, decode, encode

logger = logging.getLogger(__name__)

INITIAL_HALF_RING_RIGHT = "U(3,1)-(4,1)"
INITIAL_HALF_RING_LEFT = "D(3,1)-(3,0)"
FREE_HALF_RING = FREE


@dataclass(frozen=True)
class Position:
    """A parsed position: either FREE or a half-ring inside the frame."""

    ring: Ring | None

    @property
    def is_free(self) -> bool:
        return self.ring is None or self.ring.is_free

    @property
    def node_name(self) -> str:
        return encode(self.ring)


class Solver:
    """Shortest move sequences between half-ring positions."""

    def __init__(self, graph: Graph | None = None) -> None:
        self.graph = graph if graph is not None else build_graph()

    # -- raising API ----------------------------------------------------------

    @staticmethod
    def parse(text: str) -> Position:
        """Parse *text*, raising a ``PositionError`` if it is invalid."""
        return Position(decode(text))

    def solve(self, source: str, target: str = FREE) -> list[str]:
        """Return the positions visited from *source* to *target*, both included.

        The path holds canonical node names: a position with both cells
        outside the frame, such as ``U(0,0)-(0,1)``, appears as ``FREE``
        rather than as the string that was passed in.

        Raises ``PositionError`` for unparsable input and ``SearchError``
        when the target cannot be reached.
        """
        start = self.parse(source).node_name
        goal = self.parse(target).node_name
        return reconstruct_path(self.graph, start, goal)

    # -- non-raising API ------------------------------------------------------

    def parse_position(self, text: str) -> Position | None:
        try:
            return self.parse(text)
        except PositionError as exc:
            logger.info("%s", exc)
            return None

    def find_solution(self, source: str, target: str = FREE) -> list[str] | None:
        """Like ``solve`` but returns ``None`` instead of raising.

        Both ends of the path are canonical node names, so a detached
        *source* or *target* shows up as ``FREE``.
        """
        try:
            return self.solve(source, target)
        except DuetError as exc:
            logger.info("No solution from %s to %s: %s", source, target, exc)
            return None

    def distance(self, source: str, target: str = FREE) -> int | None:
        """Minimum number of moves, or ``None`` if there is no path."""
        try:
            start = self.parse(source).node_name
            goal = self.parse(target).node_name
            paths = shortest_paths(self.graph, start, goal)
            if not paths.is_reachable(goal):
                return None
            return int(paths.distance(goal))
        except DuetError as exc:
            logger.info("%s", exc)
            return None


@functools.cache
def default_solver() -> Solver:
    """Shared solver over the standard puzzle, built on first use."""
    return Solver()


def find_solution(source: str, target: str = FREE) -> list[str] | None:
    return default_solver().find_solution(source, target)


def parse_position(text: str) -> Position | None:
    return default_solver().parse_position(text)
