"""
Structural checks on a carved maze canvas.
"""

from collections import deque
from typing import Dict, List, Sequence, Set, Tuple

import numpy as np

from mazegen.core.grid import OPEN

Edge = Tuple[Tuple[int, int], Tuple[int, int]]


def check_canvas_shape(canvas: np.ndarray, width: int, height: int) -> bool:
    return tuple(canvas.shape) == (4 * width + 1, 2 * height + 1)


def carved_passages(canvas: np.ndarray, width: int, height: int) -> List[Edge]:
    """
    List the open connections between adjacent node-cells.

    A horizontal connection between ``(x, y)`` and ``(x + 1, y)`` is open when
    the wall column ``4x + 4`` on row ``2y + 1`` is open; a vertical one between
    ``(x, y)`` and ``(x, y + 1)`` when row ``2y + 2`` is open at column
    ``4x + 2``. Border openings are not passages.
    """
    edges = []
    for y in range(height):
        for x in range(width):
            if x + 1 < width and canvas[4 * x + 4, 2 * y + 1] == OPEN:
                edges.append(((x, y), (x + 1, y)))
            if y + 1 < height and canvas[4 * x + 2, 2 * y + 2] == OPEN:
                edges.append(((x, y), (x, y + 1)))
    return edges


def is_spanning_tree(edges: Sequence[Edge], width: int, height: int) -> bool:
    """True when ``edges`` connect all ``width * height`` cells without a cycle."""
    n_cells = width * height
    if len(edges) != n_cells - 1:
        return False

    neighbors: Dict[Tuple[int, int], List[Tuple[int, int]]] = {}
    for a, b in edges:
        for x, y in (a, b):
            if not (0 <= x < width and 0 <= y < height):
                return False
        neighbors.setdefault(a, []).append(b)
        neighbors.setdefault(b, []).append(a)

    # n - 1 edges and connected implies acyclic
    seen: Set[Tuple[int, int]] = {(0, 0)}
    queue = deque([(0, 0)])
    while queue:
        node = queue.popleft()
        for nxt in neighbors.get(node, []):
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return len(seen) == n_cells
