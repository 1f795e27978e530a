import sys
import logging
import argparse
from pathlib import Path

from pathfinding import config
from pathfinding.astar import AStar
from pathfinding.errors import PathfindingError, InvalidCellError, InvalidGridError
from pathfinding.grid import Grid
from util.path_visualizer import render_grid, save_path_image

logger = logging.getLogger("main")

EXIT_FOUND = 0
EXIT_NO_PATH = 1
EXIT_INVALID = 2

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_cell(text):
    """Parse 'x,y' (optionally wrapped in braces) into a coordinate pair."""
    c = text.strip().strip("{}()")
    try:
        x, y = map(int, c.split(","))
    except ValueError:
        raise InvalidCellError(text)
    return x, y


def load_grid(path, respect_obstacles):
    if path is None:
        return Grid.from_matrix(config.DEMO_GRID, respect_obstacles=respect_obstacles)
    try:
        rows = Path(path).read_text().splitlines()
    except UnicodeDecodeError as exc:
        raise InvalidGridError(f"Grid file {path} is not valid text: {exc}") from exc
    return Grid.from_rows(rows, respect_obstacles=respect_obstacles)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Find the shortest 8-connected path between two cells of an obstacle grid using A*."
    )
    parser.add_argument(
        "--grid", default=None,
        help="Text file with one row per line ('#'/'1' obstacle, '.'/'0' free). Defaults to the demo grid."
    )
    parser.add_argument("--start", default=None, help="Start cell as X,Y")
    parser.add_argument("--end", default=None, help="End cell as X,Y")
    parser.add_argument("--image", default=None, help="Also write the rendered path to this image file")
    parser.add_argument(
        "--ignore-obstacles", action="store_true",
        help="Only check bounds when expanding neighbours"
    )
    parser.add_argument(
        "--log-level", default=config.LOG_LEVEL, type=str.upper, choices=LOG_LEVELS,
        help="Logging level (default: %(default)s)"
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT)

    try:
        grid = load_grid(args.grid, respect_obstacles=not args.ignore_obstacles)
        start = parse_cell(args.start) if args.start else config.DEMO_START
        end = parse_cell(args.end) if args.end else config.DEMO_END
        path = AStar.find_path(grid, start, end)
    except (PathfindingError, OSError) as exc:
        logger.error("%s", exc)
        return EXIT_INVALID

    print(render_grid(grid, path))

    if args.image:
        try:
            save_path_image(args.image, grid, path)
        except OSError as exc:
            logger.error("%s", exc)
            return EXIT_INVALID
        logger.info("Saved path image to %s", args.image)

    if not path:
        print("No path found.")
        return EXIT_NO_PATH

    print(f"Path of {len(path)} cells, cost {AStar.path_cost(path):.3f}:")
    print(" -> ".join(str(cell) for cell in path))
    return EXIT_FOUND


if __name__ == "__main__":
    sys.exit(main())
