"""Core maze components: grid model, builders, renderer and the Maze object.

Use :func:`builder_from_str` to resolve a builder class by its short name.
"""

import importlib
from typing import Type

from .errors import MazeError, InvalidDimension, InvalidOpening
from .grid import Cell, Grid, WALL, OPEN, VISITED
from .builder import BaseBuilder, RecursiveBuilder, IterativeBuilder
from .renderer import Renderer
from .maze import Maze

__all__ = [
    "builder_from_str",
    "MazeError",
    "InvalidDimension",
    "InvalidOpening",
    "Cell",
    "Grid",
    "WALL",
    "OPEN",
    "VISITED",
    "BaseBuilder",
    "RecursiveBuilder",
    "IterativeBuilder",
    "Renderer",
    "Maze",
]

_builder_map = {
    "recursive": (".builder", "RecursiveBuilder"),
    "iterative": (".builder", "IterativeBuilder"),
}


def builder_from_str(builder_str: str) -> Type[BaseBuilder]:
    """Dynamically import and return the builder class based on the string key."""
    if builder_str not in _builder_map:
        raise ImportError(
            f"Unknown builder: {builder_str}. Available: {list(_builder_map.keys())}"
        )
    module_name, class_name = _builder_map[builder_str]
    module = importlib.import_module(module_name, __package__)
    return getattr(module, class_name)
