import heapq
import math

import numpy as np
import pytest

from pathfinding.grid import Grid


def dijkstra_cost(grid, start, end):
    """Reference shortest 8-connected path cost, None when end is unreachable."""
    best = {start: 0.0}
    queue = [(0.0, start)]
    while queue:
        cost, cell = heapq.heappop(queue)
        if cell == end:
            return cost
        if cost > best[cell]:
            continue
        for neighbour in grid.get_neighbours(cell):
            step = math.hypot(neighbour[0] - cell[0], neighbour[1] - cell[1])
            new_cost = cost + step
            if new_cost < best.get(neighbour, float("inf")):
                best[neighbour] = new_cost
                heapq.heappush(queue, (new_cost, neighbour))
    return None


def assert_valid_path(grid, path, start, end):
    assert path[0] == start
    assert path[-1] == end
    for cell in path:
        assert grid.in_bounds(*cell)
    for a, b in zip(path, path[1:]):
        assert max(abs(a[0] - b[0]), abs(a[1] - b[1])) == 1


@pytest.fixture
def open_grid():
    return Grid(3, 3)


@pytest.fixture
def maze_grid():
    return Grid.from_rows([
        ".......",
        ".#####.",
        ".#...#.",
        ".#.#.#.",
        ".#.#...",
        "...#.#.",
    ])


@pytest.fixture
def random_grids():
    grids = []
    for seed in range(8):
        rng = np.random.default_rng(seed)
        field = rng.random((9, 7)) < 0.3
        field[0, 0] = False
        field[8, 6] = False
        grids.append(Grid.from_matrix(field))
    return grids
