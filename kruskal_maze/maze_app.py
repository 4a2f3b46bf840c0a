import argparse
import sys
import tkinter as tk
from tkinter import ttk

from .maze import Maze
from .rendering import path_dots, to_ascii, wall_segments, window_size
from .visualization import export_traversal_tree

# --- Configuration ---
WINDOW_GEOMETRY = "1000x800"
WALL_WIDTH = 1
MAX_SPIN_SIZE = 200

# --- Color Scheme ---
BG_COLOR = "#2c3e50"
CANVAS_COLOR = "#ffffff"
WALL_COLOR = "#000000"
FINAL_PATH_COLOR = "#e74c3c"

SIZE_ERROR = "The input number for the maze size must be an integer"


class MazeApp:
    """
    Tkinter window showing one maze and its solution.

    Layout:
      - Control row: side length spinbox, "New Maze" button, path summary
      - Scrollable canvas sized from the maze (rendering.window_size), so
        large mazes can be panned instead of squeezed

    Drawing uses only the Maze query surface through rendering.wall_segments
    and rendering.path_dots.
    """
    def __init__(self, root, size, seed=None):
        self.root = root
        self.root.title("Maze")
        self.root.configure(bg=BG_COLOR)
        try:
            self.root.geometry(WINDOW_GEOMETRY)
        except tk.TclError:
            pass

        self.size_var = tk.IntVar(value=size)
        self.summary_var = tk.StringVar(value="")
        self.seed = seed
        self.maze = None

        self._setup_ui()
        self.new_maze()

    def _setup_ui(self):
        style = ttk.Style(); style.configure("TLabel", background=BG_COLOR, foreground="white")
        style.configure("Black.TButton", padding=6, relief="flat", background="#34495e", foreground="black"); style.map("Black.TButton", background=[('active', '#4a627a')])

        control_frame = tk.Frame(self.root, bg=BG_COLOR, padx=10, pady=5); control_frame.pack(side=tk.TOP, fill=tk.X)
        maze_frame = tk.Frame(self.root, bg=BG_COLOR); maze_frame.pack(side=tk.TOP, fill=tk.BOTH, expand=True)

        ttk.Label(control_frame, text="Size:").pack(side=tk.LEFT, padx=(0, 5))
        ttk.Spinbox(control_frame, from_=0, to=MAX_SPIN_SIZE, textvariable=self.size_var, width=6).pack(side=tk.LEFT)
        ttk.Button(control_frame, text="New Maze", command=self.new_maze, style="Black.TButton").pack(side=tk.LEFT, padx=5)
        ttk.Label(control_frame, textvariable=self.summary_var, anchor=tk.E).pack(side=tk.RIGHT)

        # Scrollable canvas
        self.canvas = tk.Canvas(maze_frame, bg=CANVAS_COLOR, highlightthickness=0)
        x_scroll = ttk.Scrollbar(maze_frame, orient=tk.HORIZONTAL, command=self.canvas.xview)
        y_scroll = ttk.Scrollbar(maze_frame, orient=tk.VERTICAL, command=self.canvas.yview)
        self.canvas.configure(xscrollcommand=x_scroll.set, yscrollcommand=y_scroll.set)
        x_scroll.pack(side=tk.BOTTOM, fill=tk.X); y_scroll.pack(side=tk.RIGHT, fill=tk.Y)
        self.canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

    def new_maze(self):
        try:
            size = self.size_var.get()
        except tk.TclError:
            self.summary_var.set(SIZE_ERROR)
            return
        if size < 0:
            self.summary_var.set(SIZE_ERROR)
            return
        # A fixed seed only applies to the first maze; later ones are fresh
        self.maze = Maze(size, seed=self.seed)
        self.seed = None
        self.summary_var.set(f"{size}x{size} cells, path length {len(self.maze.path)}")
        self.draw_maze()

    def draw_maze(self):
        canvas = self.canvas
        canvas.delete("all")
        width, height = window_size(self.maze)
        canvas.configure(scrollregion=(0, 0, width, height))
        for x1, y1, x2, y2 in wall_segments(self.maze):
            canvas.create_line(x1, y1, x2, y2, fill=WALL_COLOR, width=WALL_WIDTH)
        for x1, y1, x2, y2 in path_dots(self.maze):
            canvas.create_oval(x1, y1, x2, y2, fill=FINAL_PATH_COLOR, outline="")


def maze_size(text):
    """argparse type for the side length: a non-negative integer."""
    try:
        size = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(SIZE_ERROR)
    if size < 0:
        raise argparse.ArgumentTypeError("The input number for the maze size must not be negative")
    return size


def build_parser():
    parser = argparse.ArgumentParser(description="Generate a perfect maze with randomized Kruskal and show its solution.")
    parser.add_argument("size", type=maze_size, help="Side length of the square maze (cells per row)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible maze")
    parser.add_argument("--ascii", action="store_true", help="Print the maze as text instead of opening a window")
    parser.add_argument("--tree", metavar="FILE", default=None, help="Write the traversal tree as Graphviz DOT source")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.ascii or args.tree:
        maze = Maze(args.size, seed=args.seed)
        if args.tree:
            path = export_traversal_tree(maze, args.tree)
            print(f"Wrote traversal tree to {path}")
        if args.ascii:
            print(to_ascii(maze))
        return 0

    root = tk.Tk()
    MazeApp(root, args.size, seed=args.seed)
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
