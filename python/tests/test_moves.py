"""Per-rotation move rules."""

from __future__ import annotations

import pytest

from castduet.engine.graphbuilder.moves import (
    MOVE_TABLE,
    Move,
    candidate_moves,
    legal_moves,
)
from castduet.models.ring import PegPos, Ring, decode
from castduet.models.topology import Dent, Slot, dents_around


@pytest.mark.parametrize("rotation", range(8))
def test_table_shape(rotation: int) -> None:
    moves = MOVE_TABLE[rotation]
    slides = [m for m in moves if m.is_slide]
    if rotation % 2 == 0:
        assert len(moves) == 2
        assert slides == []
    else:
        assert len(moves) == 4
        assert len(slides) == 2
        for m in slides:
            assert m.ring_delta == m.peg_delta


def test_table_slots() -> None:
    tested = {r: [m.slot for m in moves] for r, moves in MOVE_TABLE.items()}
    assert tested[0] == [Slot.LEFT_TOP, Slot.BOTTOM_RIGHT]
    assert tested[3] == [Slot.LEFT_BOTTOM, Slot.RIGHT_BOTTOM, Slot.LEFT_TOP, Slot.RIGHT_TOP]
    assert tested[6] == [Slot.RIGHT_TOP, Slot.BOTTOM_LEFT]


def test_slides_need_free_ring_part() -> None:
    inside = Ring(PegPos.UP, (2, 2), (1, 2))
    assert [m.is_slide for m in candidate_moves(inside)] == [False, False]

    outside = Ring(PegPos.UP, (1, 2), (0, 2))
    assert [m.is_slide for m in candidate_moves(outside)] == [False, False, True, True]


def test_legal_moves_follow_peg_orientation() -> None:
    up = decode("U(3,1)-(4,1)")
    assert legal_moves(up, dents_around(up.peg)) == [Move(Slot.TOP_LEFT, (0, 1))]

    down = decode("D(3,1)-(4,1)")
    assert legal_moves(down, dents_around(down.peg)) == []


def test_slide_through_hanayama_dent() -> None:
    ring = decode("D(3,1)-(3,0)")
    assert legal_moves(ring, dents_around(ring.peg)) == [
        Move(Slot.LEFT_BOTTOM, (-1, 0), (-1, 0)),
    ]


def test_missing_dent_blocks_move() -> None:
    ring = Ring(PegPos.UP, (2, 2), (1, 1))
    assert legal_moves(ring, {}) == []
    assert legal_moves(ring, {Slot.LEFT_TOP: Dent.HANAYAMA}) == []
    assert legal_moves(ring, {Slot.LEFT_TOP: Dent.BOTH}) == [Move(Slot.LEFT_TOP, (-1, 0))]
