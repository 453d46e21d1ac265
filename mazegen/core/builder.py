"""Randomized depth-first search (recursive backtracker) over a grid."""

import random
from typing import Callable, Optional, Set

from mazegen.core.grid import Cell, Grid, Key
from mazegen.utils.logger import Logger


class BaseBuilder:
    """Base class for maze builders.

    A builder consumes the adjacency lists of ``grid`` and opens the canvas
    wall between every pair of cells it walks through. Picking a neighbor
    severs all of the current cell's remaining edges from the far side, so a
    cell that has become current can never be reached again from a neighbor.

    Args:
        grid: freshly built grid; its adjacency lists are consumed.
        rng: source of randomness, anything with ``randrange``.
        on_visit: called once per visited cell, in visitation order.
        should_stop: polled before every neighbor pick; generation halts and
            leaves a partial maze as soon as it returns True.
        logger: optional metrics logger, receives ``depth`` and ``cell``.
    """

    def __init__(
        self,
        grid: Grid,
        rng: Optional[random.Random] = None,
        on_visit: Optional[Callable[[Cell], None]] = None,
        should_stop: Optional[Callable[[], bool]] = None,
        logger: Optional[Logger] = None,
    ):
        self.grid = grid
        self.rng = rng if rng is not None else random.Random()
        self.on_visit = on_visit
        self.should_stop = should_stop
        self.logger = logger
        self.visits = 0

    def build(self, start: Optional[Key] = None, visited: Optional[Set[Key]] = None) -> Set[Key]:
        """Carve passages starting at ``start`` and return the visited set."""
        raise NotImplementedError

    def _stopped(self) -> bool:
        return self.should_stop is not None and bool(self.should_stop())

    def _enter(self, key: Key, depth: int):
        self.visits += 1
        if self.logger is not None:
            self.logger.log("depth", depth)
            self.logger.log("cell", list(key))
        if self.on_visit is not None:
            self.on_visit(self.grid[key])

    def _pick(self, key: Key) -> Key:
        """Choose the next neighbor of ``key`` and sever the traversed edges."""
        cell = self.grid[key]
        nxt = cell.adjacents[self.rng.randrange(len(cell.adjacents))]
        for other in cell.adjacents:
            far = self.grid[other].adjacents
            if key in far:
                far.remove(key)
        cell.adjacents.remove(nxt)
        return nxt


class RecursiveBuilder(BaseBuilder):
    """Recursive backtracker. Recursion depth grows up to width * height."""

    def build(self, start=None, visited=None):
        start = self.grid.start.key if start is None else start
        visited = set() if visited is None else visited
        visited.add(start)
        self._visit(start, visited, 1)
        return visited

    def _visit(self, key: Key, visited: Set[Key], depth: int):
        self._enter(key, depth)
        cell = self.grid[key]
        while cell.adjacents and not self._stopped():
            nxt = self._pick(key)
            if nxt not in visited:
                self.grid.carve_between(key, nxt)
                self._visit(nxt, visited, depth + 1)
            visited.add(nxt)


class IterativeBuilder(BaseBuilder):
    """Stack-based backtracker.

    Produces the same visit order, random draws and carved canvas as
    :class:`RecursiveBuilder` without touching the interpreter's recursion
    limit.
    """

    def build(self, start=None, visited=None):
        start = self.grid.start.key if start is None else start
        visited = set() if visited is None else visited
        visited.add(start)
        self._enter(start, 1)
        stack = [start]
        while stack and not self._stopped():
            key = stack[-1]
            if not self.grid[key].adjacents:
                # backtrack; the parent records the finished child as visited
                visited.add(stack.pop())
                continue
            nxt = self._pick(key)
            if nxt not in visited:
                self.grid.carve_between(key, nxt)
                stack.append(nxt)
                self._enter(nxt, len(stack))
        visited.update(stack)
        return visited
