import io
import random

import numpy as np
import pytest

from mazegen import Maze, InvalidDimension, InvalidOpening
from mazegen.core.grid import OPEN, WALL
from mazegen.utils import Logger
from mazegen.utils.validation import check_canvas_shape, is_spanning_tree


class FirstChoice:
    def randrange(self, n):
        return 0


@pytest.mark.parametrize("width, height", [(1, 1), (2, 1), (3, 7), (10, 4)])
def test_canvas_shape(width, height):
    maze = Maze(width, height, seed=0)
    assert maze.canvas.shape == (4 * width + 1, 2 * height + 1)
    assert check_canvas_shape(maze.canvas, width, height)


@pytest.mark.parametrize("seed", range(10))
def test_perfect_maze(seed):
    maze = Maze(8, 6, seed=seed)
    assert is_spanning_tree(maze.passages(), 8, 6)
    assert maze.visited == {(x, y) for x in range(8) for y in range(6)}


@pytest.mark.parametrize("seed", range(5))
def test_border_openings(seed):
    maze = Maze(5, 4, seed=seed)
    n_cols, n_rows = maze.canvas.shape
    assert maze.canvas[2, 0] == OPEN
    assert maze.canvas[n_cols - 3, n_rows - 1] == OPEN


def test_single_cell():
    maze = Maze(1, 1, seed=0)
    assert maze.canvas.shape == (5, 3)
    assert maze.passages() == []
    assert maze.canvas[2, 1] == OPEN
    assert maze.canvas[2, 0] == OPEN
    assert maze.canvas[2, 2] == OPEN
    for row in range(3):
        assert maze.canvas[0, row] == WALL
        assert maze.canvas[4, row] == WALL
    assert maze.to_text() == "X   X\nX   X\nX   X\n"


def test_two_cells_one_passage():
    maze = Maze(2, 1, seed=1234)
    assert maze.passages() == [((0, 0), (1, 0))]
    assert maze.canvas[4, 1] == OPEN
    assert maze.to_text() == "X   X X X\nX       X\nX X X   X\n"


def test_exact_layout():
    maze = Maze(2, 2, rng=FirstChoice())
    assert maze.to_text() == (
        "X   X X X\n"
        "X       X\n"
        "X X X   X\n"
        "X       X\n"
        "X X X   X\n"
    )


def test_determinism():
    a = Maze(12, 9, seed=99)
    b = Maze(12, 9, rng=random.Random(99))
    assert a.to_text() == b.to_text()
    assert (a.canvas == b.canvas).all()


def test_builders_produce_same_maze():
    a = Maze(9, 7, seed=5, builder="recursive")
    b = Maze(9, 7, seed=5, builder="iterative")
    assert a.to_text() == b.to_text()


def test_seed_and_rng_are_exclusive():
    with pytest.raises(ValueError):
        Maze(2, 2, seed=1, rng=random.Random(1))


@pytest.mark.parametrize("width, height", [(0, 1), (1, 0), (-3, 2)])
def test_invalid_dimension(width, height):
    with pytest.raises(InvalidDimension):
        Maze(width, height)


def test_custom_openings():
    maze = Maze(3, 2, seed=0, entrance=(0, 1), exit=[12, 3])
    assert maze.entrance == (0, 1)
    assert maze.exit == (12, 3)
    assert maze.canvas[0, 1] == OPEN
    assert maze.canvas[12, 3] == OPEN
    assert maze.canvas[2, 0] == WALL
    assert maze.canvas[10, 4] == WALL


@pytest.mark.parametrize(
    "position",
    [(0, 0), (12, 4), (6, 2), (20, 0), (3,), "ab", "60", (2.9, 0.4), (2.0, 0), (True, 1), 7],
)
def test_invalid_openings(position):
    with pytest.raises(InvalidOpening):
        Maze(3, 2, seed=0, entrance=position)


def test_debug_renders_once_per_cell():
    out = io.StringIO()
    width, height = 3, 2
    Maze(width, height, debug=True, seed=4, file=out)
    n_rows = 2 * height + 1
    lines = out.getvalue().split("\n")
    # each render is n_rows canvas lines plus one blank line
    assert len(lines) - 1 == width * height * (n_rows + 1)
    first_render = "\n".join(lines[:n_rows])
    assert first_render.count("V") == 1


def test_debug_markers_cleared_on_plain_display(capsys):
    maze = Maze(4, 3, debug=True, seed=2, file=None)
    capsys.readouterr()

    maze.display(debug=True)
    debug_out = capsys.readouterr().out
    assert debug_out.count("V") == 12

    maze.display()
    first = capsys.readouterr().out
    assert "V" not in first
    maze.display(debug=False)
    second = capsys.readouterr().out
    assert first == second
    assert first.endswith("\n\n")


def test_logger_records_generation():
    logger = Logger()
    maze = Maze(4, 4, seed=8, logger=logger)
    assert len(logger.metrics["depth"]) == 16
    assert logger.metrics["passages"] == [15]
    assert maze.visits == 16


def test_repr():
    assert repr(Maze(2, 3, seed=0)) == "Maze(width=2, height=3)"


def test_numpy_integer_openings():
    maze = Maze(3, 2, seed=0, entrance=(np.int64(0), np.int64(3)))
    assert maze.entrance == (0, 3)
