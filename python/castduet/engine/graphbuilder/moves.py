"""Per-rotation move rules.

A half-ring turns 45° around one of its cells when the peg can pass
through a compatible dent next to the peg cell. Which dent is tested
depends only on the current rotation. When the solid part of the ring is
outside the frame the ring can also slide sideways through a dent,
dragging the ring cell along with the peg.
"""

from __future__ import annotations

from dataclasses import dataclass

from castduet.models.ring import Cell, Ring
from castduet.models.topology import Dent, Slot


@dataclass(frozen=True)
class Move:
    slot: Slot
    peg_delta: Cell
    ring_delta: Cell = (0, 0)

    @property
    def is_slide(self) -> bool:
        return self.ring_delta != (0, 0)


_S = Slot

# rotation index -> moves; slides are only tried while the ring cell is free.
MOVE_TABLE: dict[int, tuple[Move, ...]] = {
    0: (  # BottomLeft
        Move(_S.LEFT_TOP, (-1, 0)),
        Move(_S.BOTTOM_RIGHT, (0, -1)),
    ),
    1: (  # Left
        Move(_S.TOP_RIGHT, (0, 1)),
        Move(_S.BOTTOM_RIGHT, (0, -1)),
        Move(_S.TOP_LEFT, (0, 1), (0, 1)),
        Move(_S.BOTTOM_LEFT, (0, -1), (0, -1)),
    ),
    2: (  # TopLeft
        Move(_S.LEFT_BOTTOM, (-1, 0)),
        Move(_S.TOP_RIGHT, (0, 1)),
    ),
    3: (  # Top
        Move(_S.LEFT_BOTTOM, (-1, 0)),
        Move(_S.RIGHT_BOTTOM, (1, 0)),
        Move(_S.LEFT_TOP, (-1, 0), (-1, 0)),
        Move(_S.RIGHT_TOP, (1, 0), (1, 0)),
    ),
    4: (  # TopRight
        Move(_S.TOP_LEFT, (0, 1)),
        Move(_S.RIGHT_BOTTOM, (1, 0)),
    ),
    5: (  # Right
        Move(_S.TOP_LEFT, (0, 1)),
        Move(_S.BOTTOM_LEFT, (0, -1)),
        Move(_S.TOP_RIGHT, (0, 1), (0, 1)),
        Move(_S.BOTTOM_RIGHT, (0, -1), (0, -1)),
    ),
    6: (  # BottomRight
        Move(_S.RIGHT_TOP, (1, 0)),
        Move(_S.BOTTOM_LEFT, (0, -1)),
    ),
    7: (  # Bottom
        Move(_S.LEFT_TOP, (-1, 0)),
        Move(_S.RIGHT_TOP, (1, 0)),
        Move(_S.LEFT_BOTTOM, (-1, 0), (-1, 0)),
        Move(_S.RIGHT_BOTTOM, (1, 0), (1, 0)),
    ),
}


def candidate_moves(ring: Ring) -> tuple[Move, ...]:
    """Moves worth testing for *ring*, before looking at any dent."""
    moves = MOVE_TABLE[ring.rotation]
    if ring.is_ring_part_free:
        return moves
    return tuple(m for m in moves if not m.is_slide)


def is_legal(move: Move, ring: Ring, dents: dict[Slot, Dent]) -> bool:
    dent = dents.get(move.slot)
    return dent is not None and dent.accepts(ring.peg_pos)


def legal_moves(ring: Ring, dents: dict[Slot, Dent]) -> list[Move]:
    """Moves of *ring* allowed by the *dents* around its peg cell."""
    return [m for m in candidate_moves(ring) if is_legal(m, ring, dents)]
