import random

from .carver import Carver
from .errors import InvalidSize
from .grid import Grid
from .path_finder import PathFinder


class Maze:
    """
    A perfect maze of size x size cells together with its solution.

    The constructor runs the whole pipeline and returns only when it is done:
      1. Build the grid (all interior walls present, outer sides on the border)
      2. Carve a spanning tree with the randomized Kruskal carver
      3. Find the unique path from the top-left cell to the bottom-right cell
      4. Open the west side of the entrance and the east side of the exit

    After that the maze is read-only. Renderers use side_length, cell_count,
    is_wall_open, open_walls and is_on_path.

    Parameters:
      size (int): Side length N, must be a non-negative integer
      seed: Optional seed for a private random.Random
      rng (random.Random): Optional random source, overrides seed

    Raises:
      InvalidSize: for negative or non-integer sizes
    """
    def __init__(self, size, seed=None, rng=None):
        if isinstance(size, bool) or not isinstance(size, int):
            raise InvalidSize(f"Maze size must be an integer, got {size!r}")
        if size < 0:
            raise InvalidSize(f"Maze size must be non-negative, got {size}")

        self._size = size
        self._grid = Grid(size)

        carver = Carver(self._grid, rng if rng is not None else random.Random(seed))
        carver.carve()
        self._carve_stats = carver.stats()

        finder = PathFinder(self._grid)
        self._path = tuple(finder.solve())
        self._on_path = tuple(finder.on_path)

    # --- Dimensions ---
    @property
    def side_length(self):
        return self._size

    @property
    def cell_count(self):
        return len(self._grid)

    # --- Per-cell queries ---
    def is_wall_open(self, cell, direction):
        """True if side `direction` ('N', 'S', 'E' or 'W') of `cell` is passable."""
        return self._grid.is_open(cell, direction)

    def open_walls(self, cell):
        return self._grid.open_directions(cell)

    def is_on_path(self, cell):
        self._grid.check_index(cell)
        return self._on_path[cell]

    def visited_by(self, cell):
        """Cell that discovered `cell` during the solving traversal (the entrance names itself)."""
        self._grid.check_index(cell)
        return self._grid.cells[cell].visited_by

    def index(self, x, y):
        return self._grid.index(x, y)

    def coordinates(self, cell):
        return self._grid.coordinates(cell)

    # --- Whole-maze queries ---
    @property
    def path(self):
        """Cells of the solution from the entrance to the exit."""
        return self._path

    @property
    def entrance(self):
        return 0 if self.cell_count else None

    @property
    def exit(self):
        return self.cell_count - 1 if self.cell_count else None

    @property
    def carve_stats(self):
        return dict(self._carve_stats)

    def passages(self):
        """Open interior edges as (a, b) pairs with a < b."""
        return list(self._grid.passages())

    def __repr__(self):
        return f"Maze(size={self._size}, path_length={len(self._path)})"
