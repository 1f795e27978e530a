import numpy as np

from . import config
from .direction import Direction
from .errors import InvalidCellError, InvalidGridError
from .node import Cell

OBSTACLE_CHARS = "#1"
FREE_CHARS = ".0"


class Grid:
    def __init__(self, width: int, height: int, obstacles=None, respect_obstacles: bool = config.RESPECT_OBSTACLES):
        if not isinstance(width, (int, np.integer)) or not isinstance(height, (int, np.integer)):
            raise InvalidGridError(f"Grid size must be integers, got {width!r}x{height!r}")
        if width <= 0 or height <= 0:
            raise InvalidGridError(f"Grid size must be positive, got {width}x{height}")

        self.width = int(width)     # Number of cells along x
        self.height = int(height)   # Number of cells along y
        self.respect_obstacles = respect_obstacles

        # Indexed [x, y]; True marks an obstructed cell
        self.obstacles = np.zeros((self.width, self.height), dtype=bool)
        if obstacles is not None:
            for cell in obstacles:
                self.add_obstacle(cell)

    @classmethod
    def from_matrix(cls, matrix, respect_obstacles: bool = config.RESPECT_OBSTACLES):
        """
        Build a grid from a 2-D obstruction matrix indexed [x][y].

        Parameters:
        ----------
        matrix : array-like
            Boolean or 0/1 integer values, first axis is x (width)
        respect_obstacles : bool, optional
            Whether neighbour enumeration skips obstructed cells

        Returns:
        -------
        Grid
        """
        try:
            field = np.asarray(matrix)
        except ValueError as exc:
            raise InvalidGridError(f"Obstruction matrix is not rectangular: {exc}") from exc

        if field.ndim != 2 or field.size == 0:
            raise InvalidGridError(f"Obstruction matrix must be a non-empty 2-D array, got shape {field.shape}")
        if field.dtype != bool:
            if not np.issubdtype(field.dtype, np.number) or not np.isin(field, (0, 1)).all():
                raise InvalidGridError("Obstruction matrix may only contain 0/1 or boolean values")

        grid = cls(field.shape[0], field.shape[1], respect_obstacles=respect_obstacles)
        grid.obstacles = field.astype(bool)
        return grid

    @classmethod
    def from_rows(cls, rows, respect_obstacles: bool = config.RESPECT_OBSTACLES):
        """Build a grid from text rows, one row per y. '#' or '1' is an obstacle, '.' or '0' is free."""
        rows = [row.strip() for row in rows if row.strip()]
        if not rows:
            raise InvalidGridError("No grid rows given")

        width = len(rows[0])
        grid = cls(width, len(rows), respect_obstacles=respect_obstacles)
        for y, row in enumerate(rows):
            if len(row) != width:
                raise InvalidGridError(f"Row {y} has {len(row)} cells, expected {width}")
            for x, char in enumerate(row):
                if char in OBSTACLE_CHARS:
                    grid.obstacles[x, y] = True
                elif char not in FREE_CHARS:
                    raise InvalidGridError(f"Unknown grid character {char!r} at ({x}, {y})")
        return grid

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_obstacle(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and bool(self.obstacles[x, y])

    def is_passable(self, x: int, y: int) -> bool:
        """False outside the grid or on an obstructed cell."""
        if not self.in_bounds(x, y):
            return False
        return not self.obstacles[x, y]

    def to_cell(self, point) -> Cell:
        """Coerce an (x, y) pair into a Cell inside the grid."""
        try:
            x, y = point
        except (TypeError, ValueError) as exc:
            raise InvalidCellError(point) from exc
        if not isinstance(x, (int, np.integer)) or not isinstance(y, (int, np.integer)):
            raise InvalidCellError(point)
        if not self.in_bounds(x, y):
            raise InvalidCellError(point, self.width, self.height)
        return Cell(int(x), int(y))

    def get_neighbours(self, cell: Cell):
        x, y = cell
        for _, (dx, dy) in Direction.ALL_DIRECTIONS:
            nx, ny = x + dx, y + dy
            if not self.in_bounds(nx, ny):
                continue
            if self.respect_obstacles and self.obstacles[nx, ny]:
                continue
            yield Cell(nx, ny)

    def add_obstacle(self, cell):
        x, y = self.to_cell(cell)
        self.obstacles[x, y] = True

    def remove_obstacle(self, cell):
        x, y = self.to_cell(cell)
        self.obstacles[x, y] = False

    def __repr__(self):
        return f"Grid({self.width}x{self.height}, obstacles={int(self.obstacles.sum())})"
