from graphviz import Digraph

PATH_NODE_COLOR = "#f39c12"
NODE_COLOR = "#ecf0f1"


def traversal_tree(maze):
    """
    Builds the depth-first traversal tree of a solved maze as a Graphviz graph.

    Nodes are cells labelled with their (x, y) coordinates, edges point from
    the discovering cell to the discovered one, and cells on the solution path
    are filled in the path colour.
    """
    dot = Digraph(name="traversal_tree")
    dot.attr("node", shape="circle", style="filled", fontsize="10")

    for cell in range(maze.cell_count):
        color = PATH_NODE_COLOR if maze.is_on_path(cell) else NODE_COLOR
        dot.node(str(cell), label=str(maze.coordinates(cell)), fillcolor=color)

    for cell in range(maze.cell_count):
        parent = maze.visited_by(cell)
        if parent is None or parent == cell:
            continue
        dot.edge(str(parent), str(cell))
    return dot


def export_traversal_tree(maze, filename, render=False, view=False):
    """Writes the DOT source to `filename`; with render=True also runs Graphviz on it."""
    dot = traversal_tree(maze)
    if render:
        # Needs the Graphviz `dot` executable on PATH
        return dot.render(filename, view=view)
    return dot.save(filename)
