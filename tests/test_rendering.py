from kruskal_maze import Maze
from kruskal_maze.rendering import (CELL_SIZE, MARGIN, path_dots, to_ascii,
                                    wall_segments, window_size)


def test_window_size_fits_maze_and_margins():
    assert window_size(Maze(3, seed=0)) == (3 * CELL_SIZE + 2 * MARGIN,) * 2
    assert window_size(Maze(0)) == (2 * MARGIN, 2 * MARGIN)


def test_single_cell_geometry():
    maze = Maze(1)
    # West and east are the outer openings, so only north and south are drawn
    assert wall_segments(maze) == [(50, 50, 70, 50), (50, 70, 70, 70)]
    assert path_dots(maze) == [(55, 55, 65, 65)]


def test_segment_count_matches_closed_sides():
    maze = Maze(6, seed=1)
    closed = sum(4 - len(maze.open_walls(c)) for c in range(maze.cell_count))
    assert len(wall_segments(maze)) == closed


def test_one_dot_per_path_cell():
    maze = Maze(9, seed=2)
    assert len(path_dots(maze)) == len(maze.path)


def test_ascii_single_cell():
    assert to_ascii(Maze(1)) == "###\n o \n###"


def test_ascii_shape_and_marks():
    maze = Maze(5, seed=3)
    lines = to_ascii(maze).split("\n")
    assert len(lines) == 11
    assert all(len(line) == 11 for line in lines)
    assert sum(line.count("o") for line in lines) == len(maze.path)
    # Entrance and exit openings
    assert lines[1][0] == " "
    assert lines[-2][-1] == " "


def test_empty_maze_renders_nothing():
    maze = Maze(0)
    assert to_ascii(maze) == ""
    assert wall_segments(maze) == []
    assert path_dots(maze) == []
