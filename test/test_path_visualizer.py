import numpy as np
import pytest

from pathfinding import config
from pathfinding.grid import Grid
from util.path_visualizer import draw_path_image, render_grid, save_path_image


def test_render_grid_marks_path_obstacles_and_free_cells():
    grid = Grid.from_rows(["...", ".#.", "..."])

    text = render_grid(grid, [(0, 0), (1, 0), (2, 1), (2, 2)])

    assert text.splitlines() == ["o o . ", ". # o ", ". . o "]


def test_render_grid_path_wins_over_obstacle():
    grid = Grid.from_rows([".#."], respect_obstacles=False)

    assert render_grid(grid, [(0, 0), (1, 0), (2, 0)]) == "o o o "


def test_render_grid_without_path():
    grid = Grid.from_rows(["#.", ".."])

    assert render_grid(grid, []) == "# . \n. . "


def test_draw_path_image_shape_and_colors():
    grid = Grid.from_rows(["...", ".#.", "..."])

    image = draw_path_image(grid, [], cell_size=10)

    assert image.shape == (30, 30, 3)
    assert image.dtype == np.uint8
    assert tuple(image[15, 15]) == config.OBSTACLE_COLOR
    assert tuple(image[25, 5]) == config.FREE_COLOR


def test_draw_path_image_marks_endpoints():
    grid = Grid(3, 3)

    image = draw_path_image(grid, [(0, 0), (1, 1), (2, 2)], cell_size=10)

    assert tuple(image[5, 5]) == config.ENDPOINT_COLOR
    assert tuple(image[25, 25]) == config.ENDPOINT_COLOR
    assert tuple(image[15, 15]) == config.PATH_COLOR


def test_save_path_image_writes_file(tmp_path):
    target = tmp_path / "path.png"

    save_path_image(target, Grid(2, 2), [(0, 0), (1, 1)], cell_size=8)

    assert target.exists()


def test_save_path_image_unknown_extension_raises_os_error(tmp_path):
    with pytest.raises(OSError):
        save_path_image(tmp_path / "path.xyz", Grid(2, 2), [(0, 0), (1, 1)], cell_size=8)
