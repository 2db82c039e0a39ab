"""Dent layout of the Cast Duet frame.

The puzzle is in "standard" position: the DUET sign can be read and the
rounded corner is at the bottom right. Each cell is 8 characters wide and
4 lines tall in the sketch below; row 1 is at the bottom::

    +-H-----+-H---H-+-----H-+
    |       H       D       H
    |       |       |       |  3
    |       |       |       |
    +-D-----+-B---D-+-H-----+
    H       D       B       H
    |       |       |       |  2
    H       B       D       H
    +-----H-+-B---B-+-D-----+
    |       |       |       |
    |       |       |       |  1
    H       D       H       /
    +-B-----+-----D-+------/

        1       2       3

``D`` marks a dent on the Duet (top) side, ``H`` on the Hanayama
(bottom) side and ``B`` on both sides.
"""

from __future__ import annotations

from enum import StrEnum

from castduet.models.ring import Cell, PegPos

CAST_DUET_SKETCH: tuple[str, ...] = (
    "+-H-----+-H---H-+-----H-+",
    "|       H       D       H",
    "|       |       |       |",
    "|       |       |       |",
    "+-D-----+-B---D-+-H-----+",
    "H       D       B       H",
    "|       |       |       |",
    "H       B       D       H",
    "+-----H-+-B---B-+-D-----+",
    "|       |       |       |",
    "|       |       |       |",
    "H       D       H       /",
    "+-B-----+-----D-+------/ ",
)

CELL_WIDTH = 8
CELL_HEIGHT = 4


class Dent(StrEnum):
    DUET = "D"
    HANAYAMA = "H"
    BOTH = "B"

    def accepts(self, peg_pos: PegPos) -> bool:
        """Can a peg facing *peg_pos* pass through this dent?"""
        if self is Dent.BOTH:
            return True
        if peg_pos is PegPos.UP:
            return self is Dent.DUET
        return self is Dent.HANAYAMA


class Slot(StrEnum):
    """Boundary positions around a cell."""

    TOP_LEFT = "tl"
    TOP_RIGHT = "tr"
    BOTTOM_LEFT = "bl"
    BOTTOM_RIGHT = "br"
    LEFT_TOP = "lt"
    LEFT_BOTTOM = "lb"
    RIGHT_TOP = "rt"
    RIGHT_BOTTOM = "rb"


_DENT_CHARS = frozenset(d.value for d in Dent)


def sketch_char(sketch: tuple[str, ...], line: int, column: int) -> str:
    """Character at (*line*, *column*); ``B`` when outside the sketch.

    Margin cells are not drawn, so anything past the edges counts as
    passable from both sides.
    """
    if 0 <= line < len(sketch) and 0 <= column < len(sketch[line]):
        return sketch[line][column]
    return Dent.BOTH.value


def slot_coordinates(cell: Cell, sketch: tuple[str, ...] = CAST_DUET_SKETCH) -> dict[Slot, tuple[int, int]]:
    """Sketch (line, column) of each boundary slot around *cell*."""
    col, row = cell
    top = (len(sketch) - 1) - row * CELL_HEIGHT
    bottom = top + CELL_HEIGHT
    left = (col - 1) * CELL_WIDTH
    right = left + CELL_WIDTH
    return {
        Slot.TOP_LEFT: (top, left + 2),
        Slot.TOP_RIGHT: (top, right - 2),
        Slot.BOTTOM_LEFT: (bottom, left + 2),
        Slot.BOTTOM_RIGHT: (bottom, right - 2),
        Slot.LEFT_TOP: (top + 1, left),
        Slot.LEFT_BOTTOM: (bottom - 1, left),
        Slot.RIGHT_TOP: (top + 1, right),
        Slot.RIGHT_BOTTOM: (bottom - 1, right),
    }


def dents_around(cell: Cell, sketch: tuple[str, ...] = CAST_DUET_SKETCH) -> dict[Slot, Dent]:
    """Return the dents on the 8 boundary slots around *cell*.

    Slots without a dent are left out of the mapping.
    """
    dents: dict[Slot, Dent] = {}
    for slot, (line, column) in slot_coordinates(cell, sketch).items():
        ch = sketch_char(sketch, line, column)
        if ch in _DENT_CHARS:
            dents[slot] = Dent(ch)
    return dents
