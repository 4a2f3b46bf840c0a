from .grid import DIRECTIONS, OPEN


class PathFinder:
    """
    Recovers the unique entrance-to-exit path of a carved grid.

    High-level overview:
      - After carving, the open passages form a tree, so exactly one simple
        path joins any two cells
      - A depth-first traversal from the entrance (cell 0) records, for every
        cell it discovers, the cell it came from (cell.visited_by)
      - Following those parent pointers backwards from the exit
        (cell size * size - 1) walks the solution path in reverse

    The traversal uses an explicit stack so long corridors in large mazes
    cannot hit the interpreter's recursion limit.
    """
    def __init__(self, grid):
        self.grid = grid
        self.on_path = [False] * len(grid)
        self.path = []

    def solve(self):
        """
        Marks the solution path and opens the outer entrance and exit.

        Returns:
          list: Cell indices from the entrance to the exit (empty for an empty grid)
        """
        cell_count = len(self.grid)
        if cell_count == 0:
            return self.path

        entrance, exit_ = 0, cell_count - 1
        if cell_count > 1:
            self._depth_search(entrance)

        path = [exit_]
        current = exit_
        while current != entrance:
            current = self.grid.cells[current].visited_by
            path.append(current)
        path.reverse()

        for index in path:
            self.on_path[index] = True
        self.path = path

        # Openings to the outside are applied only once the path is known
        self.grid.open_border(entrance, 'W')
        self.grid.open_border(exit_, 'E')
        return self.path

    def _depth_search(self, start):
        cells = self.grid.cells
        cells[start].visited_by = start  # the root points at itself
        stack = [start]
        while stack:
            current = stack.pop()
            walls = cells[current].walls
            # Push in reverse so neighbours are explored in DIRECTIONS order
            for direction in reversed(DIRECTIONS):
                wall = walls[direction]
                if wall.state != OPEN or wall.neighbor is None:
                    continue
                neighbor = cells[wall.neighbor]
                if neighbor.visited_by is None:
                    neighbor.visited_by = current
                    stack.append(wall.neighbor)
