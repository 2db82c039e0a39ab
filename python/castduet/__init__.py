"""Minimum-move solver for the Hanayama Cast Duet puzzle."""

from castduet.engine.gamesolver import (
    FREE_HALF_RING,
    INITIAL_HALF_RING_LEFT,
    INITIAL_HALF_RING_RIGHT,
    Position,
    Solver,
    find_solution,
    parse_position,
)

__all__ = [
    "FREE_HALF_RING",
    "INITIAL_HALF_RING_LEFT",
    "INITIAL_HALF_RING_RIGHT",
    "Position",
    "Solver",
    "find_solution",
    "parse_position",
]
