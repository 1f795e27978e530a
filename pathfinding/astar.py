import heapq
import logging
import math

from . import config
from .errors import SearchCancelled
from .grid import Grid
from .node import Cell, SearchNode

logger = logging.getLogger(__name__)


class NodeArena:
    """
    Owns every SearchNode of one search, keyed by Cell.

    The open set is a heap of ``(f, order, cell)`` entries plus the ``open``
    index. Lowering a node's cost pushes a fresh entry; entries whose priority
    no longer matches the node are skipped when popped.
    """

    def __init__(self):
        self.nodes = {}
        self.open = {}
        self.closed = set()
        self._heap = []
        self._counter = 0

    def __contains__(self, cell):
        return cell in self.nodes

    def __len__(self):
        return len(self.nodes)

    def get(self, cell: Cell) -> SearchNode:
        return self.nodes[cell]

    def has_open(self) -> bool:
        return bool(self.open)

    def is_open(self, cell: Cell) -> bool:
        return cell in self.open

    def is_closed(self, cell: Cell) -> bool:
        return cell in self.closed

    def add_node(self, cell: Cell, g: float, h: float, parent=None) -> SearchNode:
        assert cell not in self.closed, f"{cell} re-entered the open set after closing"
        assert cell not in self.open, f"{cell} is already open"

        node = SearchNode(cell, g, h, parent, self._counter)
        self._counter += 1
        self.nodes[cell] = node
        self.open[cell] = node
        heapq.heappush(self._heap, (*node.priority, cell))
        return node

    def update_node(self, cell: Cell, new_g: float, new_parent: Cell) -> SearchNode:
        node = self.open.get(cell)
        assert node is not None, f"Only open nodes can be updated, {cell} is not open"
        assert new_g < node.g, f"Update for {cell} does not lower its cost"

        # The node keeps its insertion order, only f changes
        node.g = new_g
        node.parent = new_parent
        heapq.heappush(self._heap, (*node.priority, cell))
        return node

    def pop_lowest(self) -> SearchNode:
        """Move the open node with the lowest (f, order) to the closed set and return it."""
        while self._heap:
            f, order, cell = heapq.heappop(self._heap)
            node = self.open.get(cell)
            if node is None or node.priority != (f, order):
                continue  # stale

            del self.open[cell]
            self.closed.add(cell)
            return node
        raise IndexError("pop from an empty open set")


class AStar:
    @staticmethod
    def calculate_distance(cell_a, cell_b) -> float:
        dx = cell_b[0] - cell_a[0]
        dy = cell_b[1] - cell_a[1]
        return math.sqrt(dx ** 2 + dy ** 2)

    @staticmethod
    def reverse_path(arena: NodeArena, end_cell: Cell):
        path = []
        current = end_cell
        while current is not None:
            path.append(current)
            current = arena.get(current).parent
            assert len(path) <= len(arena), "Parent chain contains a cycle"
        return path[::-1]

    @staticmethod
    def find_path(grid: Grid, start, end, should_cancel=None, max_expansions=config.MAX_EXPANSIONS):
        """
        Find the cheapest 8-connected path from start to end using the A* algorithm.

        Step costs and the heuristic are both the Euclidean distance, so an
        orthogonal step costs 1 and a diagonal step costs sqrt(2).

        Parameters:
        ----------
        grid : Grid
            The obstruction field to search
        start : Cell or tuple[int, int]
            The starting cell
        end : Cell or tuple[int, int]
            The destination cell
        should_cancel : callable, optional
            Polled once per expansion; a truthy result stops the search
        max_expansions : int, optional
            Stop the search after this many expanded nodes

        Returns:
        -------
        list[Cell]
            Cells from start to end inclusive, empty list if no path exists

        Raises:
        ------
        InvalidCellError
            If start or end lies outside the grid
        SearchCancelled
            If should_cancel fired or max_expansions was reached
        """
        start = grid.to_cell(start)
        end = grid.to_cell(end)

        if start == end:
            return [start]

        logger.debug("Searching %s from %s to %s", grid, start, end)

        arena = NodeArena()
        arena.add_node(start, 0.0, AStar.calculate_distance(start, end))
        expanded = 0

        while arena.has_open():
            if should_cancel is not None and should_cancel():
                raise SearchCancelled(expanded)
            if max_expansions is not None and expanded >= max_expansions:
                raise SearchCancelled(expanded)

            current = arena.pop_lowest()
            expanded += 1

            if current.cell == end:
                path = AStar.reverse_path(arena, current.cell)
                logger.info("Found path of %d cells (cost %.3f) after %d expansions",
                            len(path), current.g, expanded)
                return path

            for neighbour in grid.get_neighbours(current.cell):
                if arena.is_closed(neighbour):
                    continue

                tentative_g = current.g + AStar.calculate_distance(current.cell, neighbour)

                if not arena.is_open(neighbour):
                    arena.add_node(neighbour, tentative_g, AStar.calculate_distance(neighbour, end), current.cell)
                elif tentative_g < arena.get(neighbour).g:
                    arena.update_node(neighbour, tentative_g, current.cell)

        logger.info("No path from %s to %s, frontier exhausted after %d expansions", start, end, expanded)
        return []

    @staticmethod
    def find_path_fragment(length: int, grid: Grid, start, end):
        """
        Finds the first `length` cells of the path from `start` to `end` using A* algorithm.
        """
        full_path = AStar.find_path(grid, start, end)
        return full_path[:length] if full_path else []

    @staticmethod
    def path_cost(path) -> float:
        return sum(AStar.calculate_distance(a, b) for a, b in zip(path, path[1:]))


def find_path(grid: Grid, start, end, **kwargs):
    return AStar.find_path(grid, start, end, **kwargs)
