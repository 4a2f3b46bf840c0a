import collections

from .errors import IndexOutOfRange

# --- Directions ---
# Order matters: the carver samples from this tuple and the path finder
# explores neighbours in this order.
DIRECTIONS = ('N', 'S', 'E', 'W')
OPPOSITE = {'N': 'S', 'S': 'N', 'E': 'W', 'W': 'E'}
DELTAS = {'N': (0, -1), 'S': (0, 1), 'E': (1, 0), 'W': (-1, 0)}

# --- Wall states ---
BLOCKED = 'blocked'  # wall present, neighbour reachable only by carving
OPEN = 'open'        # wall removed, passable
BORDER = 'border'    # edge of the grid, no neighbour on this side

Wall = collections.namedtuple('Wall', ['state', 'neighbor'])
BORDER_WALL = Wall(BORDER, None)
OUTER_OPENING = Wall(OPEN, None)


class Cell:
    """One maze square: a wall slot per direction plus the traversal parent pointer."""
    __slots__ = ('walls', 'visited_by')

    def __init__(self, walls):
        self.walls = walls
        self.visited_by = None


class Grid:
    """
    Flat store of size * size cells in row-major order.

    Representation:
      - self.cells[i] is the Cell at index i = y * size + x, where x is the
        column (0 is the left edge) and y the row (0 is the top edge).
      - Every Cell maps 'N', 'S', 'E', 'W' to a Wall(state, neighbor).
      - A fresh grid has every interior wall BLOCKED and every outer side BORDER.

    Invariant:
      - Walls between two cells are opened on both sides at once via
        open_edge, so cell a sees b as OPEN exactly when b sees a as OPEN.
    """
    def __init__(self, size):
        self.size = size
        self.cells = [Cell(self._initial_walls(i)) for i in range(size * size)]

    def _initial_walls(self, index):
        x, y = index % self.size, index // self.size
        walls = {}
        for direction in DIRECTIONS:
            dx, dy = DELTAS[direction]
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.size and 0 <= ny < self.size:
                walls[direction] = Wall(BLOCKED, ny * self.size + nx)
            else:
                walls[direction] = BORDER_WALL
        return walls

    def __len__(self):
        return len(self.cells)

    def index(self, x, y):
        if 0 <= x < self.size and 0 <= y < self.size:
            return y * self.size + x
        raise IndexOutOfRange(f"Coordinate ({x}, {y}) out of bounds for a {self.size}x{self.size} grid")

    def coordinates(self, index):
        self.check_index(index)
        return index % self.size, index // self.size

    def check_index(self, index):
        if not 0 <= index < len(self.cells):
            raise IndexOutOfRange(f"Cell {index} out of range [0, {len(self.cells)})")

    def wall(self, index, direction):
        self.check_index(index)
        if direction not in OPPOSITE:
            raise ValueError(f"Unknown direction {direction!r}, expected one of {DIRECTIONS}")
        return self.cells[index].walls[direction]

    def is_open(self, index, direction):
        return self.wall(index, direction).state == OPEN

    def open_directions(self, index):
        self.check_index(index)
        return frozenset(d for d, w in self.cells[index].walls.items() if w.state == OPEN)

    def open_edge(self, index, direction):
        """
        Knocks down the wall between a cell and its neighbour in `direction`.

        Both the cell's slot and the neighbour's mirrored slot become OPEN.

        Returns:
          int: Index of the neighbour that is now reachable

        Raises:
          ValueError: if the side is a BORDER or already OPEN
        """
        wall = self.wall(index, direction)
        if wall.state != BLOCKED:
            raise ValueError(f"Cell {index} has no wall to remove on side {direction} ({wall.state})")
        neighbor = wall.neighbor
        self.cells[index].walls[direction] = Wall(OPEN, neighbor)
        self.cells[neighbor].walls[OPPOSITE[direction]] = Wall(OPEN, index)
        return neighbor

    def open_border(self, index, direction):
        """Opens an outer side of the grid (an entrance or exit to the outside)."""
        wall = self.wall(index, direction)
        if wall.state != BORDER:
            raise ValueError(f"Side {direction} of cell {index} is not on the border")
        self.cells[index].walls[direction] = OUTER_OPENING

    def passages(self):
        """Yields each open interior edge once as (a, b) with a < b."""
        for index, cell in enumerate(self.cells):
            for direction in ('S', 'E'):
                wall = cell.walls[direction]
                if wall.state == OPEN and wall.neighbor is not None:
                    yield index, wall.neighbor
