import random
from typing import Callable, List, Optional, Sequence, Set, Tuple, Union

import numpy as np

from mazegen.core.builder import BaseBuilder
from mazegen.core.errors import InvalidOpening
from mazegen.core.grid import Cell, Grid, Key, OPEN
from mazegen.core.renderer import Renderer
from mazegen.utils.logger import Logger
from mazegen.utils.validation import carved_passages


def _is_integer(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


class Maze:
    """A perfect maze carved by randomized depth-first search.

    The grid is built, the entrance and exit are opened on the canvas border
    and the passages are carved, all during construction. Afterwards the
    canvas is only read, apart from clearing debug markers on display.

    Args:
        width: number of node-cells per row, at least 1.
        height: number of node-cells per column, at least 1.
        debug: print the canvas after every cell visit, with the visited
            cells marked ``'V'``.
        seed: seed for a private ``random.Random``. Mutually exclusive with
            ``rng``.
        rng: random source to draw neighbor choices from.
        builder: builder name (``"recursive"`` or ``"iterative"``) or class.
        entrance: canvas ``(col, row)`` of the entry opening, default ``(2, 0)``.
        exit: canvas ``(col, row)`` of the exit opening, default the bottom
            wall under the last cell.
        on_visit: extra observer called with each visited cell.
        should_stop: polled at each step; returning True leaves a partial maze.
        logger: optional metrics logger.
        file: stream to print to, default ``sys.stdout``.
    """

    def __init__(
        self,
        width: int,
        height: int,
        debug: bool = False,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        builder: Union[str, type] = "iterative",
        entrance: Optional[Sequence[int]] = None,
        exit: Optional[Sequence[int]] = None,
        on_visit: Optional[Callable[[Cell], None]] = None,
        should_stop: Optional[Callable[[], bool]] = None,
        logger: Optional[Logger] = None,
        file=None,
    ):
        if seed is not None and rng is not None:
            raise ValueError("Pass either seed or rng, not both")

        self.grid = Grid(width, height)
        self.debug = debug
        self.logger = logger
        self.renderer = Renderer(self.grid.canvas, file=file)
        self._user_on_visit = on_visit

        n_cols, n_rows = self.grid.shape
        self.entrance = self._opening(entrance, (2, 0), "entrance")
        self.exit = self._opening(exit, (n_cols - 3, n_rows - 1), "exit")
        self.canvas[self.entrance] = OPEN
        self.canvas[self.exit] = OPEN

        if isinstance(builder, str):
            from mazegen.core import builder_from_str

            builder = builder_from_str(builder)
        self.builder: BaseBuilder = builder(
            self.grid,
            rng=rng if rng is not None else random.Random(seed),
            on_visit=self._visit,
            should_stop=should_stop,
            logger=logger,
        )
        self.visited: Set[Key] = self.builder.build(self.grid.start.key)
        if logger is not None:
            logger.log("passages", len(self.passages()))

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def canvas(self) -> np.ndarray:
        return self.grid.canvas

    @property
    def visits(self) -> int:
        return self.builder.visits

    def _opening(self, position, default, name) -> Tuple[int, int]:
        if position is None:
            return default
        n_cols, n_rows = self.grid.shape
        if (
            isinstance(position, (str, bytes))
            or not isinstance(position, Sequence)
            or len(position) != 2
            or not all(_is_integer(v) for v in position)
        ):
            raise InvalidOpening(
                f"Maze {name} must be a (col, row) pair of integers, got {position!r}"
            )
        col, row = (int(v) for v in position)
        if not (0 <= col < n_cols and 0 <= row < n_rows):
            raise InvalidOpening(
                f"Maze {name} {(col, row)} is outside the {n_cols}x{n_rows} canvas"
            )
        on_horizontal = row in (0, n_rows - 1)
        on_vertical = col in (0, n_cols - 1)
        if not (on_horizontal or on_vertical):
            raise InvalidOpening(f"Maze {name} {(col, row)} is not on the canvas border")
        if (on_horizontal and col % 4 == 0) or (on_vertical and row % 2 == 0):
            raise InvalidOpening(f"Maze {name} {(col, row)} is a corner post")
        return col, row

    def _visit(self, cell: Cell):
        if self.debug:
            self.grid.mark(cell.key)
            self.renderer.display(debug=True)
        if self._user_on_visit is not None:
            self._user_on_visit(cell)

    def passages(self) -> List[Tuple[Key, Key]]:
        """Carved connections between adjacent node-cells."""
        return carved_passages(self.canvas, self.width, self.height)

    def to_text(self, debug: bool = False) -> str:
        return self.renderer.to_text(debug)

    def display(self, debug: bool = False):
        """Print the maze. Visited markers are kept only when ``debug`` is set."""
        self.renderer.display(debug)

    def __str__(self):
        return self.to_text()

    def __repr__(self):
        return f"Maze(width={self.width}, height={self.height})"
