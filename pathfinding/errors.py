class PathfindingError(Exception):
    """Base class for errors raised by the pathfinding package."""


class InvalidGridError(PathfindingError, ValueError):
    """The obstruction field could not be turned into a Grid."""


class InvalidCellError(PathfindingError, ValueError):
    """A start or end cell lies outside the grid or is malformed."""

    def __init__(self, cell, width=None, height=None):
        self.cell = cell
        if width is None or height is None:
            message = f"Invalid cell: {cell!r}"
        else:
            message = f"Cell {cell!r} is outside the {width}x{height} grid"
        super().__init__(message)


class SearchCancelled(PathfindingError):
    """The search was stopped before it succeeded or exhausted the frontier."""

    def __init__(self, expanded):
        self.expanded = expanded
        super().__init__(f"Search cancelled after {expanded} expansions")
