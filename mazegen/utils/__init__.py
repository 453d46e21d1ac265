"""Utilities for mazegen.

Expose the metrics logger and the structural checks. Plotting helpers live in
:mod:`mazegen.utils.visualize` and are not imported here so that importing the
package does not require matplotlib.
"""

from .logger import Logger
from .validation import carved_passages, is_spanning_tree, check_canvas_shape

__all__ = ["Logger", "carved_passages", "is_spanning_tree", "check_canvas_shape", "setup_maze"]


def setup_maze(*args, **kwargs):
    """Lazy import wrapper for setup_maze from mazegen.utils.maze_helpers."""
    from .maze_helpers import setup_maze as _setup

    return _setup(*args, **kwargs)
