from castduet.engine.graphbuilder.builder import Graph, build_graph, generate_rings_for_cell
from castduet.engine.graphbuilder.moves import MOVE_TABLE, Move, legal_moves

__all__ = ["Graph", "MOVE_TABLE", "Move", "build_graph", "generate_rings_for_cell", "legal_moves"]
