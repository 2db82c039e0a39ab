from castduet.engine.gamesolver.solver import (
    FREE_HALF_RING,
    INITIAL_HALF_RING_LEFT,
    INITIAL_HALF_RING_RIGHT,
    Position,
    Solver,
    default_solver,
    find_solution,
    parse_position,
)

__all__ = [
    "FREE_HALF_RING",
    "INITIAL_HALF_RING_LEFT",
    "INITIAL_HALF_RING_RIGHT",
    "Position",
    "Solver",
    "default_solver",
    "find_solution",
    "parse_position",
]
