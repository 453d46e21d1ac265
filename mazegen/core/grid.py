"""Grid model for the maze generator.

Node-cells live in node-space ``(x, y)``. The canvas is a character grid of
shape ``(4 * width + 1, 2 * height + 1)`` indexed as ``canvas[col, row]``;
node-cell ``(x, y)`` sits at canvas position ``(4x + 2, 2y + 1)``.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

import numpy as np

from mazegen.core.errors import InvalidDimension

WALL = "X"
OPEN = " "
VISITED = "V"

Key = Tuple[int, int]


@dataclass
class Cell:
    """A node-cell with the keys of its not-yet-traversed neighbors."""

    x: int
    y: int
    adjacents: List[Key] = field(default_factory=list)

    @property
    def key(self) -> Key:
        return (self.x, self.y)

    @property
    def canvas_position(self) -> Tuple[int, int]:
        return 4 * self.x + 2, 2 * self.y + 1

    def __repr__(self):
        return f"({self.x}, {self.y})"


def check_dimension(name: str, value) -> int:
    # bool is an int subclass but never a meaningful size
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
        raise InvalidDimension(name, value)
    return int(value)


def midpoint(a: Tuple[int, int], b: Tuple[int, int]) -> Tuple[int, int]:
    """Canvas position halfway between two canvas positions."""
    return a[0] + (b[0] - a[0]) // 2, a[1] + (b[1] - a[1]) // 2


class Grid:
    """Arena of node-cells keyed by node-space coordinate, plus the canvas.

    Each cell is linked to its left and upper neighbor; the link is stored on
    both cells, so every undirected edge appears twice. Cells are created in
    row-major order and the adjacency lists keep that insertion order, which
    makes generation reproducible for a given random sequence.
    """

    def __init__(self, width: int, height: int):
        self.width = check_dimension("width", width)
        self.height = check_dimension("height", height)
        self.cells: Dict[Key, Cell] = {}
        self.canvas = np.full((4 * self.width + 1, 2 * self.height + 1), WALL, dtype="<U1")
        self._paint()
        self._link()

    @property
    def shape(self) -> Tuple[int, int]:
        return self.canvas.shape

    def _paint(self):
        n_cols, n_rows = self.canvas.shape
        for row in range(n_rows):
            for col in range(n_cols):
                if row % 2 == 1 and col % 4 == 2:
                    self.canvas[col, row] = OPEN
                elif col % 4 in (1, 3):
                    # spacer columns widen each cell to three characters
                    self.canvas[col, row] = OPEN
                else:
                    self.canvas[col, row] = WALL

    def _link(self):
        for y in range(self.height):
            for x in range(self.width):
                cell = Cell(x, y)
                self.cells[cell.key] = cell
                if x > 0:
                    self.connect(cell.key, (x - 1, y))
                if y > 0:
                    self.connect(cell.key, (x, y - 1))

    def connect(self, a: Key, b: Key):
        self.cells[a].adjacents.append(b)
        self.cells[b].adjacents.append(a)

    def __getitem__(self, key: Key) -> Cell:
        return self.cells[key]

    def __len__(self):
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells.values())

    @property
    def start(self) -> Cell:
        return self.cells[(0, 0)]

    def edge_count(self) -> int:
        """Number of directed adjacency entries still present."""
        return sum(len(cell.adjacents) for cell in self.cells.values())

    def carve_between(self, a: Key, b: Key) -> Tuple[int, int]:
        """Open the wall position between two adjacent cells."""
        pos = midpoint(self.cells[a].canvas_position, self.cells[b].canvas_position)
        self.canvas[pos] = OPEN
        return pos

    def mark(self, key: Key, char: str = VISITED):
        self.canvas[self.cells[key].canvas_position] = char
