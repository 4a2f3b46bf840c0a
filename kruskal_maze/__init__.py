from .disjoint_set import DisjointSet
from .errors import IndexOutOfRange, InvalidSize
from .grid import BLOCKED, BORDER, DIRECTIONS, OPEN, OPPOSITE, Grid, Wall
from .maze import Maze

__all__ = [
    "BLOCKED",
    "BORDER",
    "DIRECTIONS",
    "DisjointSet",
    "Grid",
    "IndexOutOfRange",
    "InvalidSize",
    "Maze",
    "OPEN",
    "OPPOSITE",
    "Wall",
]
