import pytest

import main


def test_demo_grid_finds_path(capsys):
    assert main.main([]) == main.EXIT_FOUND

    out = capsys.readouterr().out
    assert "Path of" in out
    assert out.splitlines()[7].startswith("o ")


def test_blocked_grid_reports_no_path(tmp_path, capsys):
    grid_file = tmp_path / "grid.txt"
    grid_file.write_text("...\n###\n...\n")

    assert main.main(["--grid", str(grid_file), "--start", "0,0", "--end", "{2,2}"]) == main.EXIT_NO_PATH
    assert "No path found." in capsys.readouterr().out


def test_ignore_obstacles_walks_through_wall(tmp_path):
    grid_file = tmp_path / "grid.txt"
    grid_file.write_text("...\n###\n...\n")

    args = ["--grid", str(grid_file), "--start", "0,0", "--end", "2,2", "--ignore-obstacles"]
    assert main.main(args) == main.EXIT_FOUND


def test_out_of_bounds_cell_is_invalid():
    assert main.main(["--start", "0,0", "--end", "20,20"]) == main.EXIT_INVALID


def test_malformed_cell_is_invalid():
    assert main.main(["--start", "zero"]) == main.EXIT_INVALID


def test_missing_grid_file_is_invalid(tmp_path):
    assert main.main(["--grid", str(tmp_path / "missing.txt")]) == main.EXIT_INVALID


def test_image_is_written(tmp_path):
    target = tmp_path / "demo.png"

    assert main.main(["--image", str(target)]) == main.EXIT_FOUND
    assert target.exists()


def test_undecodable_grid_file_is_invalid(tmp_path):
    grid_file = tmp_path / "grid.txt"
    grid_file.write_bytes(b"..\xff\n...\n")

    assert main.main(["--grid", str(grid_file), "--start", "0,0", "--end", "1,1"]) == main.EXIT_INVALID


def test_unsupported_image_extension_is_invalid(tmp_path):
    assert main.main(["--image", str(tmp_path / "out.xyz")]) == main.EXIT_INVALID


def test_unknown_log_level_is_a_usage_error():
    with pytest.raises(SystemExit) as info:
        main.main(["--log-level", "loud"])

    assert info.value.code == 2


def test_log_level_is_case_insensitive():
    assert main.main(["--log-level", "warning"]) == main.EXIT_FOUND
