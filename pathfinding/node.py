from typing import NamedTuple, Optional


class Cell(NamedTuple):
    x: int
    y: int

    def __str__(self):
        return f"({self.x}, {self.y})"


class SearchNode:
    """
    Search bookkeeping for one discovered cell.

    ``parent`` holds the predecessor's Cell, not the predecessor node itself,
    so the chain is resolved through the arena that owns both.
    ``order`` is the insertion sequence number used to break ties on ``f``.
    """

    __slots__ = ("cell", "g", "h", "parent", "order")

    def __init__(self, cell: Cell, g: float, h: float, parent: Optional[Cell] = None, order: int = 0):
        self.cell = cell
        self.g = g              # Distance from start
        self.h = h              # Heuristic estimate to target
        self.parent = parent
        self.order = order

    @property
    def f(self) -> float:
        return self.g + self.h

    @property
    def priority(self):
        return (self.f, self.order)

    def __lt__(self, other):
        return self.priority < other.priority

    def __repr__(self):
        return f"SearchNode(cell={self.cell}, g={self.g:.3f}, h={self.h:.3f}, parent={self.parent})"
