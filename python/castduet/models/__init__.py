from castduet.models.errors import (
    DuetError,
    InvalidGeometry,
    MalformedPosition,
    NotReachable,
    PositionError,
    SearchError,
    UnknownNode,
)
from castduet.models.ring import FREE, Cell, PegPos, Ring, decode, encode, node_name
from castduet.models.topology import CAST_DUET_SKETCH, Dent, Slot, dents_around

__all__ = [
    "CAST_DUET_SKETCH",
    "Cell",
    "Dent",
    "DuetError",
    "FREE",
    "InvalidGeometry",
    "MalformedPosition",
    "NotReachable",
    "PegPos",
    "PositionError",
    "Ring",
    "SearchError",
    "Slot",
    "UnknownNode",
    "decode",
    "dents_around",
    "encode",
    "node_name",
]
