from .astar import AStar, NodeArena, find_path
from .errors import InvalidCellError, InvalidGridError, PathfindingError, SearchCancelled
from .grid import Grid
from .node import Cell, SearchNode

__all__ = [
    "AStar",
    "Cell",
    "Grid",
    "InvalidCellError",
    "InvalidGridError",
    "NodeArena",
    "PathfindingError",
    "SearchCancelled",
    "SearchNode",
    "find_path",
]
