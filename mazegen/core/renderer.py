import sys

import numpy as np

from mazegen.core.grid import OPEN, VISITED


class Renderer:
    """Prints a maze canvas row by row.

    Walls are drawn as ``'X'``. In debug mode visited cells keep their ``'V'``
    marker; otherwise markers are cleared from the canvas before printing.
    """

    def __init__(self, canvas: np.ndarray, file=None):
        self.canvas = canvas
        self.file = file

    def clear_markers(self):
        self.canvas[self.canvas == VISITED] = OPEN

    def to_text(self, debug: bool = False) -> str:
        if not debug:
            self.clear_markers()
        n_cols, n_rows = self.canvas.shape
        lines = ["".join(self.canvas[col, row] for col in range(n_cols)) for row in range(n_rows)]
        return "\n".join(lines) + "\n"

    def display(self, debug: bool = False):
        """Print the canvas followed by a blank line."""
        out = self.file if self.file is not None else sys.stdout
        out.write(self.to_text(debug))
        out.write("\n")
