# util/path_visualizer.py

import cv2
import numpy as np

from pathfinding import config


def render_grid(grid, path, path_symbol=config.PATH_SYMBOL, obstacle_symbol=config.OBSTACLE_SYMBOL,
                free_symbol=config.FREE_SYMBOL):
    """
    Renders the grid as text, one line per row (y), marking the path cells.

    :param grid: The Grid that was searched
    :param path: A list of cells (x, y) returned by the search
    :return: The rendered grid, each cell followed by a space
    """
    on_path = {(x, y) for x, y in path}
    lines = []
    for y in range(grid.height):
        line = ""
        for x in range(grid.width):
            if (x, y) in on_path:
                line += path_symbol + " "
            elif grid.is_obstacle(x, y):
                line += obstacle_symbol + " "
            else:
                line += free_symbol + " "
        lines.append(line)
    return "\n".join(lines)


def cell_center(x, y, cell_size):
    return (int(x * cell_size + cell_size // 2), int(y * cell_size + cell_size // 2))


def draw_path_image(grid, path, cell_size=config.CELL_SIZE, color=config.PATH_COLOR,
                    thickness=config.PATH_THICKNESS):
    """
    Draws the grid and the given A* path into a new BGR image.

    :param grid: The Grid that was searched
    :param path: A list of cells (x, y) representing the path
    :param cell_size: Side length of a cell in pixels
    :param color: BGR color tuple of the path line
    :param thickness: Line thickness
    :return: The image as a (height * cell_size, width * cell_size, 3) uint8 array
    """
    image = np.full((grid.height * cell_size, grid.width * cell_size, 3), config.FREE_COLOR, dtype=np.uint8)

    # obstacles is indexed [x, y], the image [row, col]
    for x, y in np.argwhere(grid.obstacles):
        top_left = (int(x * cell_size), int(y * cell_size))
        bottom_right = (int((x + 1) * cell_size - 1), int((y + 1) * cell_size - 1))
        cv2.rectangle(image, top_left, bottom_right, config.OBSTACLE_COLOR, -1)

    for i in range(1, grid.width):
        cv2.line(image, (i * cell_size, 0), (i * cell_size, image.shape[0] - 1), config.GRID_LINE_COLOR, 1)
    for j in range(1, grid.height):
        cv2.line(image, (0, j * cell_size), (image.shape[1] - 1, j * cell_size), config.GRID_LINE_COLOR, 1)

    if not path:
        return image

    points = np.array([cell_center(x, y, cell_size) for x, y in path], dtype=np.int32).reshape(-1, 1, 2)
    cv2.polylines(image, [points], False, color, thickness)

    radius = max(cell_size // 4, 1)
    for point in (points[0][0], points[-1][0]):
        cv2.circle(image, tuple(int(v) for v in point), radius, config.ENDPOINT_COLOR, -1)

    return image


def save_path_image(filename, grid, path, cell_size=config.CELL_SIZE):
    image = draw_path_image(grid, path, cell_size=cell_size)
    try:
        written = cv2.imwrite(str(filename), image)
    except cv2.error as exc:
        raise OSError(f"Could not write image to {filename}: {exc}") from exc
    if not written:
        raise OSError(f"Could not write image to {filename}")
    return image
