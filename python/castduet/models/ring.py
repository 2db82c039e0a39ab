"""Half-ring placements and their textual encoding.

Cells are ``(col, row)`` pairs. The frame covers columns and rows 1..3;
anything with a coordinate ``<= 0`` or ``>= 4`` lies outside it.

A half-ring is written as the peg orientation followed by the peg cell
and the cell holding the solid part of the ring::

    U(3,1)-(4,1)
    D(3,1)-(3,0)

A ring with both cells outside the frame is simply ``FREE``.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import StrEnum

from castduet.models.errors import InvalidGeometry, MalformedPosition

Cell = tuple[int, int]

FREE = "FREE"

FRAME_SIZE = 3

_POSITION_RE = re.compile(r"^([UD])\(([0-4]),([0-4])\)-\(([0-4]),([0-4])\)$")

# (dx, dy) from peg cell to ring cell -> rotation index, BottomLeft first,
# then clockwise in 45° steps.
ROTATION_DELTAS: tuple[Cell, ...] = (
    (-1, -1),  # BottomLeft
    (-1, 0),   # Left
    (-1, 1),   # TopLeft
    (0, 1),    # Top
    (1, 1),    # TopRight
    (1, 0),    # Right
    (1, -1),   # BottomRight
    (0, -1),   # Bottom
)
_ROTATION_OF = {delta: i for i, delta in enumerate(ROTATION_DELTAS)}


class PegPos(StrEnum):
    UP = "U"
    DOWN = "D"

    def flipped(self) -> PegPos:
        return PegPos.DOWN if self is PegPos.UP else PegPos.UP


# -- cells --------------------------------------------------------------------


def is_cell_free(cell: Cell) -> bool:
    """True if *cell* is outside the 3×3 frame."""
    col, row = cell
    return col <= 0 or row <= 0 or col > FRAME_SIZE or row > FRAME_SIZE


def cell_name(cell: Cell) -> str:
    return f"({cell[0]},{cell[1]})"


def is_kings_move(a: Cell, b: Cell) -> bool:
    """True if *a* and *b* are distinct neighbours (distance 1 or √2)."""
    return 0 < math.hypot(a[0] - b[0], a[1] - b[1]) < 2


def shift(cell: Cell, delta: Cell) -> Cell:
    return (cell[0] + delta[0], cell[1] + delta[1])


def node_name(peg_pos: PegPos, peg: Cell, ring: Cell) -> str:
    """Canonical graph name: ``FREE`` when both cells are outside the frame."""
    if is_cell_free(peg) and is_cell_free(ring):
        return FREE
    return f"{peg_pos}{cell_name(peg)}-{cell_name(ring)}"


# -- rings --------------------------------------------------------------------


@dataclass(frozen=True)
class Ring:
    """A single half-ring placement.

    Raises ``InvalidGeometry`` if the peg and ring cells are not a
    king's move apart.
    """

    peg_pos: PegPos
    peg: Cell
    ring: Cell

    def __post_init__(self) -> None:
        if not is_kings_move(self.peg, self.ring):
            raise InvalidGeometry(self.name)

    @property
    def name(self) -> str:
        """Raw encoding, without collapsing free placements."""
        return f"{self.peg_pos}{cell_name(self.peg)}-{cell_name(self.ring)}"

    @property
    def node_name(self) -> str:
        return node_name(self.peg_pos, self.peg, self.ring)

    @property
    def rotation(self) -> int:
        dx = self.ring[0] - self.peg[0]
        dy = self.ring[1] - self.peg[1]
        return _ROTATION_OF[(dx, dy)]

    @property
    def is_free(self) -> bool:
        return is_cell_free(self.peg) and is_cell_free(self.ring)

    @property
    def is_ring_part_free(self) -> bool:
        return is_cell_free(self.ring)

    def flipped(self) -> Ring:
        """The same half-ring turned over by 180°."""
        return Ring(self.peg_pos.flipped(), self.ring, self.peg)


# -- encoding -----------------------------------------------------------------


def encode(ring: Ring | None) -> str:
    """Return the position string for *ring*; ``None`` stands for FREE."""
    if ring is None:
        return FREE
    return ring.node_name


def decode(text: str) -> Ring | None:
    """Parse a position string.

    Returns ``None`` for ``FREE``. Raises ``MalformedPosition`` when the
    text does not follow the grammar and ``InvalidGeometry`` when the two
    cells are not neighbours.
    """
    if text == FREE:
        return None

    match = _POSITION_RE.fullmatch(text)
    if match is None:
        raise MalformedPosition(text)

    peg_pos, pc, pr, rc, rr = match.groups()
    peg = (int(pc), int(pr))
    ring = (int(rc), int(rr))
    if not is_kings_move(peg, ring):
        raise InvalidGeometry(text)
    return Ring(PegPos(peg_pos), peg, ring)
