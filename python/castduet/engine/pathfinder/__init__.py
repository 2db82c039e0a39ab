from castduet.engine.pathfinder.pathfinder import ShortestPaths, reconstruct_path, shortest_paths

__all__ = ["ShortestPaths", "reconstruct_path", "shortest_paths"]
