"""Exceptions raised by mazegen."""


class MazeError(Exception):
    """Base class for maze construction errors."""


class InvalidDimension(MazeError, ValueError):
    """Width or height is not a positive integer."""

    def __init__(self, name, value):
        self.name = name
        self.value = value
        super().__init__(f"Maze {name} must be a positive integer, got {value!r}")


class InvalidOpening(MazeError, ValueError):
    """An entrance or exit position cannot be carved on the canvas border."""
