import random

from .disjoint_set import DisjointSet
from .grid import BLOCKED, DIRECTIONS


class Carver:
    """
    Carves a perfect maze with a randomized variant of Kruskal's algorithm.

    Instead of sorting a list of all edges, each step samples a random cell and
    a random side:
      1. If the side is the grid border (or already open), discard the sample
      2. Look up both cells' representatives in the disjoint set
      3. Different sets: no path joins them yet, so remove the wall on both
         sides and union the two sets
      4. Same set: removing the wall would close a cycle, discard the sample
      5. Stop once the disjoint set holds a single component

    A discarded sample changes nothing, and every wall still separating two
    components keeps a positive chance of being drawn, so the loop ends with
    probability 1 after exactly size * size - 1 walls have been removed.

    Counters (samples, discarded, walls_removed) are kept for the metrics runner.
    """
    def __init__(self, grid, rng=None):
        self.grid = grid
        self.rng = rng if rng is not None else random.Random()
        self.sets = DisjointSet(len(grid))
        self.samples = 0
        self.discarded = 0
        self.walls_removed = 0

    def carve(self):
        cell_count = len(self.grid)
        # Grids with 0 or 1 cells already form a single (or no) component
        while not self.sets.all_connected():
            self.samples += 1
            cell = self.rng.randrange(cell_count)
            direction = self.rng.choice(DIRECTIONS)

            wall = self.grid.cells[cell].walls[direction]
            if wall.state != BLOCKED:
                self.discarded += 1
                continue

            root_a = self.sets.find(cell)
            root_b = self.sets.find(wall.neighbor)
            if root_a == root_b:
                self.discarded += 1
                continue

            self.grid.open_edge(cell, direction)
            self.sets.union(root_a, root_b)
            self.walls_removed += 1
        return self.grid

    def stats(self):
        return {
            "samples": self.samples,
            "discarded": self.discarded,
            "walls_removed": self.walls_removed,
        }
