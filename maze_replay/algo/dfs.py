from typing import Iterator, List, Tuple
from maze_replay.core.grid import OutOfBounds, Position
from maze_replay.algo.base import Generator


class RecursiveBacktracker(Generator):
    """
    Randomized depth-first carving from the origin. The recursion is
    unrolled into an explicit stack of (cell, remaining directions) so
    large grids do not hit the interpreter's recursion limit; the
    highlight list mirrors the stack (the current path).
    """

    def generate(self):
        start = (0, 0)
        self.highlights.append(start)

        stack: List[Tuple[Position, Iterator[int]]] = [(start, iter(self.shuffled_directions()))]

        while stack:
            (cx, cy), directions = stack[-1]
            direction = next(directions, None)

            if direction is None:
                # Backtrack
                stack.pop()
                self.highlights.pop()
                continue

            try:
                nx, ny = self.grid.next_position(cx, cy, direction)
            except OutOfBounds:
                continue

            self.snapshot()

            if self.grid.is_visited(nx, ny):
                continue

            self.grid.carve_passage(cx, cy, direction)
            self.highlights.append((nx, ny))
            stack.append(((nx, ny), iter(self.shuffled_directions())))

        self.snapshot()
