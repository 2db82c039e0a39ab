"""Builds the graph of every half-ring position and the legal moves between them."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from castduet.engine.graphbuilder.moves import legal_moves
from castduet.models.errors import UnknownNode
from castduet.models.ring import (
    FRAME_SIZE,
    FREE,
    ROTATION_DELTAS,
    Cell,
    PegPos,
    Ring,
    is_cell_free,
    is_kings_move,
    node_name,
    shift,
)
from castduet.models.topology import CAST_DUET_SKETCH, Dent, Slot, dents_around

logger = logging.getLogger(__name__)

# Peg cells considered: the frame plus one cell of margin on every side.
GRID_RANGE = range(0, FRAME_SIZE + 2)


@dataclass(frozen=True)
class Graph:
    """Immutable move graph.

    Nodes live in an arena indexed by integers; ``names[i]`` is the
    position string of node ``i`` and ``adjacency[i]`` the indices it
    reaches in one move. ``rings[i]`` is ``None`` for the FREE node.
    """

    names: tuple[str, ...]
    rings: tuple[Ring | None, ...]
    adjacency: tuple[tuple[int, ...], ...]
    index: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "index", MappingProxyType({n: i for i, n in enumerate(self.names)})
        )

    # -- queries --------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.names)

    def __contains__(self, name: object) -> bool:
        return name in self.index

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def index_of(self, name: str) -> int:
        try:
            return self.index[name]
        except KeyError:
            raise UnknownNode(name) from None

    def ring(self, name: str) -> Ring | None:
        return self.rings[self.index_of(name)]

    def neighbours(self, name: str) -> tuple[str, ...]:
        return tuple(self.names[j] for j in self.adjacency[self.index_of(name)])

    def has_edge(self, source: str, target: str) -> bool:
        if source not in self.index or target not in self.index:
            return False
        return self.index[target] in self.adjacency[self.index[source]]

    @property
    def edge_count(self) -> int:
        return sum(len(a) for a in self.adjacency)


# -- node generation ----------------------------------------------------------


def generate_rings_for_cell(peg: Cell) -> list[Ring]:
    """All 16 placements with the peg in *peg*: 8 rotations × Up/Down."""
    rings: list[Ring] = []
    for delta in ROTATION_DELTAS:
        ring_cell = shift(peg, delta)
        rings.append(Ring(PegPos.UP, peg, ring_cell))
        rings.append(Ring(PegPos.DOWN, peg, ring_cell))
    return rings


def neighbours(ring: Ring, dents: dict[Slot, Dent]) -> list[str]:
    """Names of the positions *ring* can reach with one move."""
    targets: dict[str, None] = {}

    for move in legal_moves(ring, dents):
        peg = shift(ring.peg, move.peg_delta)
        ring_cell = shift(ring.ring, move.ring_delta)
        targets[node_name(ring.peg_pos, peg, ring_cell)] = None

    # A ring hanging outside the frame swings freely around the peg.
    if ring.is_ring_part_free:
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                ring_cell = shift(ring.ring, (dx, dy))
                if is_cell_free(ring_cell) and is_kings_move(ring.peg, ring_cell):
                    targets[node_name(ring.peg_pos, ring.peg, ring_cell)] = None

    # Turning the ring over is always possible.
    targets[node_name(ring.peg_pos.flipped(), ring.ring, ring.peg)] = None

    return list(targets)


def build_graph(sketch: tuple[str, ...] = CAST_DUET_SKETCH) -> Graph:
    """Enumerate every position and connect the ones a single move apart."""
    nodes: dict[str, Ring | None] = {FREE: None}
    for col in GRID_RANGE:
        for row in GRID_RANGE:
            for ring in generate_rings_for_cell((col, row)):
                name = ring.node_name
                nodes[name] = None if name == FREE else ring

    edges: dict[str, dict[str, None]] = {name: {} for name in nodes}
    for name, ring in nodes.items():
        if ring is None:
            continue
        for target in neighbours(ring, dents_around(ring.peg, sketch)):
            edges[name][target] = None
        # FREE has no moves of its own; it is reached back from its neighbours.
        if FREE in edges[name]:
            edges[FREE][name] = None

    names = tuple(nodes)
    index = {n: i for i, n in enumerate(names)}
    adjacency = tuple(tuple(index[t] for t in edges[n]) for n in names)

    graph = Graph(names=names, rings=tuple(nodes.values()), adjacency=adjacency)
    logger.debug(
        "Built move graph: %d nodes, %d edges, FREE degree %d",
        len(graph),
        graph.edge_count,
        len(graph.adjacency[0]),
    )
    return graph
