import os

from kruskal_maze import Maze
from kruskal_maze.visualization import export_traversal_tree, traversal_tree


def test_tree_has_one_edge_per_discovered_cell():
    maze = Maze(4, seed=6)
    source = traversal_tree(maze).source
    edges = [line for line in source.splitlines() if "->" in line]
    assert len(edges) == maze.cell_count - 1
    for a, b in zip(maze.path, maze.path[1:]):
        assert f"\t{a} -> {b}" in source


def test_path_nodes_are_highlighted():
    maze = Maze(3, seed=1)
    source = traversal_tree(maze).source
    assert source.count("#f39c12") == len(maze.path)


def test_empty_and_single_cell_trees():
    assert "->" not in traversal_tree(Maze(0)).source
    assert "->" not in traversal_tree(Maze(1)).source


def test_export_writes_dot_source(tmp_path):
    target = tmp_path / "tree.gv"
    written = export_traversal_tree(Maze(3, seed=2), str(target))
    assert os.path.exists(written)
    assert "digraph traversal_tree" in target.read_text()
