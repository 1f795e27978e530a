# Search settings
RESPECT_OBSTACLES = True   # False walks through obstructed cells, only bounds are checked
MAX_EXPANSIONS = None      # Upper bound on expanded nodes, None for unlimited

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Text rendering
PATH_SYMBOL = "o"
OBSTACLE_SYMBOL = "#"
FREE_SYMBOL = "."

# Image rendering (BGR)
CELL_SIZE = 32
FREE_COLOR = (255, 255, 255)
OBSTACLE_COLOR = (60, 40, 20)
PATH_COLOR = (255, 0, 0)
ENDPOINT_COLOR = (0, 0, 255)
GRID_LINE_COLOR = (200, 200, 200)
PATH_THICKNESS = 2

# Demo grid, indexed [x][y]
DEMO_GRID = [
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 1, 0, 0, 0, 1, 0, 0],
    [0, 0, 0, 1, 0, 0, 0, 1, 0, 1],
    [1, 1, 1, 0, 0, 0, 0, 1, 0, 0],
    [0, 0, 0, 0, 1, 1, 1, 1, 0, 0],
    [0, 0, 0, 0, 1, 0, 0, 0, 0, 0],
    [1, 0, 0, 0, 1, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 1, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 1, 0, 0, 0, 0, 0],
]
DEMO_START = (0, 7)
DEMO_END = (9, 3)
