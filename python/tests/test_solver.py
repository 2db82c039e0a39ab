"""Solver façade — end-to-end scenarios on the real puzzle.

Every returned path is replayed edge by edge against the move graph and
its length compared with an independent breadth-first search.
"""

from __future__ import annotations

import pytest

from castduet import (
    FREE_HALF_RING,
    INITIAL_HALF_RING_LEFT,
    INITIAL_HALF_RING_RIGHT,
    find_solution,
    parse_position,
)
from castduet.engine.gamesolver import Solver, default_solver
from castduet.engine.graphbuilder import Graph
from castduet.models.errors import InvalidGeometry, MalformedPosition
from castduet.models.ring import FREE, PegPos

from conftest import bfs_distances


# -- helpers ------------------------------------------------------------------


@pytest.fixture(scope="module")
def solver(graph: Graph) -> Solver:
    return Solver(graph)


def _assert_shortest(solver: Solver, path: list[str], source: str, target: str) -> None:
    assert isinstance(path, list), "solve() must return a list of positions"
    assert path[0] == source
    assert path[-1] == target
    for i, (a, b) in enumerate(zip(path, path[1:])):
        assert solver.graph.has_edge(a, b), f"Move {i} ({a} -> {b}) is not legal"
    assert len(path) - 1 == bfs_distances(solver.graph, source)[target]


# -- scenarios ----------------------------------------------------------------


def test_initial_right_half_ring_to_free(solver: Solver) -> None:
    path = solver.find_solution(INITIAL_HALF_RING_RIGHT, FREE_HALF_RING)
    _assert_shortest(solver, path, "U(3,1)-(4,1)", "FREE")
    # Not one move away: the peg has to get around the frame first.
    assert len(path) >= 3


def test_initial_left_half_ring_to_free(solver: Solver) -> None:
    path = solver.find_solution(INITIAL_HALF_RING_LEFT)
    _assert_shortest(solver, path, "D(3,1)-(3,0)", "FREE")


def test_four_dot_relocation(solver: Solver) -> None:
    path = solver.find_solution("D(3,1)-(3,0)", "D(2,2)-(3,1)")
    assert path
    _assert_shortest(solver, path, "D(3,1)-(3,0)", "D(2,2)-(3,1)")


def test_reassembly(solver: Solver) -> None:
    path = solver.solve("FREE", INITIAL_HALF_RING_RIGHT)
    _assert_shortest(solver, path, "FREE", "U(3,1)-(4,1)")


def test_same_position(solver: Solver) -> None:
    assert solver.solve("U(2,2)-(3,3)", "U(2,2)-(3,3)") == ["U(2,2)-(3,3)"]
    assert solver.distance("FREE", "FREE") == 0


def test_outside_positions_alias_free(solver: Solver) -> None:
    assert solver.solve("U(0,0)-(0,1)", "FREE") == ["FREE"]
    assert solver.solve("D(4,4)-(4,3)", "U(0,0)-(1,0)") == ["FREE"]
    # A detached start is reported by its node name, not the string given.
    path = solver.solve("U(0,0)-(0,1)", INITIAL_HALF_RING_RIGHT)
    assert path[0] == FREE
    assert path[-1] == INITIAL_HALF_RING_RIGHT


def test_distance_matches_path(solver: Solver) -> None:
    path = solver.solve(INITIAL_HALF_RING_RIGHT)
    assert solver.distance(INITIAL_HALF_RING_RIGHT) == len(path) - 1


# -- failures -----------------------------------------------------------------


def test_parse_errors_raise(solver: Solver) -> None:
    with pytest.raises(MalformedPosition):
        solver.solve("X(1,1)-(2,2)", "FREE")
    with pytest.raises(InvalidGeometry):
        solver.solve("FREE", "U(1,1)-(3,3)")


@pytest.mark.parametrize(
    "source, target",
    [
        ("X(1,1)-(2,2)", "FREE"),
        ("FREE", "U(1,1)-(3,3)"),
        ("", ""),
    ],
)
def test_find_solution_returns_none(solver: Solver, source: str, target: str) -> None:
    assert solver.find_solution(source, target) is None
    assert solver.distance(source, target) is None


def test_unreachable_target_returns_none() -> None:
    lonely = Graph(names=("FREE", "U(2,2)-(2,3)"), rings=(None, None), adjacency=((), ()))
    solver = Solver(lonely)
    assert solver.find_solution("U(2,2)-(2,3)", "FREE") is None
    assert solver.find_solution("FREE", "U(1,1)-(2,2)") is None
    assert solver.distance("U(2,2)-(2,3)") is None


def test_trailing_newline_is_rejected(solver: Solver) -> None:
    with pytest.raises(MalformedPosition):
        solver.solve("U(3,1)-(4,1)\n", "FREE")
    assert solver.parse_position("U(3,1)-(4,1)\n") is None
    assert solver.find_solution("U(3,1)-(4,1)\n", "FREE") is None
    assert solver.find_solution("U(3,1)-(4,1)", "FREE\n") is None


def test_parse_position(solver: Solver) -> None:
    pos = solver.parse_position("U(3,1)-(4,1)")
    assert not pos.is_free
    assert pos.ring.peg_pos is PegPos.UP
    assert pos.ring.rotation == 5
    assert pos.node_name == "U(3,1)-(4,1)"

    assert solver.parse_position("FREE").is_free
    assert solver.parse_position("D(0,0)-(1,0)").is_free
    assert solver.parse_position("X(1,1)-(2,2)") is None
    assert solver.parse_position("U(1,1)-(3,3)") is None


# -- module-level façade ------------------------------------------------------


def test_default_solver_is_shared() -> None:
    assert default_solver() is default_solver()


def test_module_functions() -> None:
    path = find_solution("U(3,1)-(4,1)", "FREE")
    assert path[0] == "U(3,1)-(4,1)"
    assert path[-1] == FREE
    assert find_solution("X(1,1)-(2,2)", "FREE") is None
    assert parse_position("U(1,1)-(3,3)") is None
    assert parse_position("D(3,1)-(3,0)").ring.peg == (3, 1)
