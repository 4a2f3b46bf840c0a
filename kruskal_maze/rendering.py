"""Toolkit-independent drawing geometry and text output for a solved Maze."""

# --- Configuration ---
CELL_SIZE = 20   # pixel side of one maze square
MARGIN = 50      # gap between the window edge and the maze
DOT_SIZE = 10    # diameter of a solution dot
DOT_MARGIN = 5   # gap between a cell's wall and its dot


def window_size(maze, cell_size=CELL_SIZE, margin=MARGIN):
    """Ideal (width, height) of a drawing surface that fits the whole maze."""
    side = maze.side_length * cell_size + margin * 2
    return side, side


def cell_box(maze, cell, cell_size=CELL_SIZE, margin=MARGIN):
    x, y = maze.coordinates(cell)
    x1, y1 = x * cell_size + margin, y * cell_size + margin
    return x1, y1, x1 + cell_size, y1 + cell_size


def wall_segments(maze, cell_size=CELL_SIZE, margin=MARGIN):
    """
    Line segments (x1, y1, x2, y2) for every closed side of every cell.

    A wall shared by two cells appears once for each of them.
    """
    segments = []
    for cell in range(maze.cell_count):
        x1, y1, x2, y2 = cell_box(maze, cell, cell_size, margin)
        open_walls = maze.open_walls(cell)
        if 'N' not in open_walls: segments.append((x1, y1, x2, y1))
        if 'S' not in open_walls: segments.append((x1, y2, x2, y2))
        if 'E' not in open_walls: segments.append((x2, y1, x2, y2))
        if 'W' not in open_walls: segments.append((x1, y1, x1, y2))
    return segments


def path_dots(maze, cell_size=CELL_SIZE, margin=MARGIN, dot_size=DOT_SIZE, dot_margin=DOT_MARGIN):
    """Bounding boxes (x1, y1, x2, y2) of the dots marking the solution path."""
    dots = []
    for cell in maze.path:
        x1, y1, _, _ = cell_box(maze, cell, cell_size, margin)
        x1, y1 = x1 + dot_margin, y1 + dot_margin
        dots.append((x1, y1, x1 + dot_size, y1 + dot_size))
    return dots


def to_ascii(maze, wall='#', path_mark='o'):
    """Renders the maze as text, one character per cell and one per wall."""
    size = maze.side_length
    if size == 0:
        return ""

    lines = []
    for y in range(size):
        top = [wall]
        body = []
        for x in range(size):
            cell = maze.index(x, y)
            top.append(' ' if maze.is_wall_open(cell, 'N') else wall)
            top.append(wall)
            body.append(' ' if maze.is_wall_open(cell, 'W') else wall)
            body.append(path_mark if maze.is_on_path(cell) else ' ')
        last = maze.index(size - 1, y)
        body.append(' ' if maze.is_wall_open(last, 'E') else wall)
        lines.append("".join(top))
        lines.append("".join(body))

    bottom = [wall]
    for x in range(size):
        bottom.append(' ' if maze.is_wall_open(maze.index(x, size - 1), 'S') else wall)
        bottom.append(wall)
    lines.append("".join(bottom))
    return "\n".join(lines)
