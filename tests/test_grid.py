import pytest

from kruskal_maze.errors import IndexOutOfRange
from kruskal_maze.grid import BLOCKED, BORDER, OPEN, Grid, Wall


def test_fresh_grid_walls():
    grid = Grid(3)
    assert len(grid) == 9
    corner = grid.cells[0].walls
    assert corner['N'] == Wall(BORDER, None)
    assert corner['W'] == Wall(BORDER, None)
    assert corner['E'] == Wall(BLOCKED, 1)
    assert corner['S'] == Wall(BLOCKED, 3)

    center = grid.cells[4].walls
    assert center == {
        'N': Wall(BLOCKED, 1),
        'S': Wall(BLOCKED, 7),
        'E': Wall(BLOCKED, 5),
        'W': Wall(BLOCKED, 3),
    }
    assert all(cell.visited_by is None for cell in grid.cells)


def test_border_count():
    grid = Grid(4)
    borders = sum(1 for cell in grid.cells for w in cell.walls.values() if w.state == BORDER)
    assert borders == 4 * 4


def test_open_edge_is_bilateral():
    grid = Grid(3)
    assert grid.open_edge(4, 'N') == 1
    assert grid.wall(4, 'N') == Wall(OPEN, 1)
    assert grid.wall(1, 'S') == Wall(OPEN, 4)
    assert grid.is_open(1, 'S')
    assert grid.open_directions(4) == frozenset({'N'})
    assert list(grid.passages()) == [(1, 4)]


def test_open_edge_rejects_border_and_open_sides():
    grid = Grid(2)
    with pytest.raises(ValueError):
        grid.open_edge(0, 'N')
    grid.open_edge(0, 'E')
    with pytest.raises(ValueError):
        grid.open_edge(1, 'W')


def test_open_border_only_on_edges():
    grid = Grid(2)
    grid.open_border(0, 'W')
    assert grid.wall(0, 'W') == Wall(OPEN, None)
    with pytest.raises(ValueError):
        grid.open_border(0, 'E')
    # Outer openings are not interior passages
    assert list(grid.passages()) == []


def test_index_and_coordinates():
    grid = Grid(3)
    assert grid.index(2, 1) == 5
    assert grid.coordinates(5) == (2, 1)
    with pytest.raises(IndexOutOfRange):
        grid.index(3, 0)
    with pytest.raises(IndexOutOfRange):
        grid.coordinates(9)


def test_queries_validate_arguments():
    grid = Grid(2)
    with pytest.raises(IndexOutOfRange):
        grid.wall(-1, 'N')
    with pytest.raises(IndexOutOfRange):
        grid.open_directions(4)
    with pytest.raises(ValueError):
        grid.wall(0, 'X')


def test_empty_grid():
    grid = Grid(0)
    assert len(grid) == 0
    assert list(grid.passages()) == []
    with pytest.raises(IndexOutOfRange):
        grid.wall(0, 'N')
