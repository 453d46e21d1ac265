"""
mazegen: perfect maze generation by randomized depth-first search

Builds a grid of cells, carves a spanning tree through it with the recursive
backtracker and renders the result as a character grid.
"""

__version__ = "0.1.0"

# Core components
from mazegen.core import Maze, Grid, Renderer, builder_from_str
from mazegen.core.errors import MazeError, InvalidDimension, InvalidOpening

# Configuration
from mazegen.config import MazeConfig

# Utilities
from mazegen.utils import Logger, setup_maze

__all__ = [
    # Core
    "Maze",
    "Grid",
    "Renderer",
    "builder_from_str",
    # Errors
    "MazeError",
    "InvalidDimension",
    "InvalidOpening",
    # Config
    "MazeConfig",
    # Utilities
    "Logger",
    "setup_maze",
]
