from typing import List, Optional, Set
from maze_replay.core.grid import Grid, Position
from maze_replay.algo.base import Generator


def direction_between(x: int, y: int, nx: int, ny: int) -> Optional[int]:
    """Compass direction leading from (x, y) to the adjacent (nx, ny)."""
    if x < nx:
        return Grid.EAST
    if x > nx:
        return Grid.WEST
    if y < ny:
        return Grid.SOUTH
    if y > ny:
        return Grid.NORTH
    return None


class PrimsAlgorithm(Generator):
    def __init__(self, width: int, height: int, seed: Optional[int] = None):
        super().__init__(width, height, seed=seed)
        # List for uniform random removal, set for O(1) dedup
        self.frontiers: List[Position] = []
        self.frontier_set: Set[Position] = set()

    def mark(self, x: int, y: int):
        self.grid.mark_cell(x, y)
        for nx, ny, _ in self.grid.get_neighbors(x, y):
            self.add_frontier(nx, ny)

    def add_frontier(self, x: int, y: int):
        if self.grid.is_marked(x, y) or (x, y) in self.frontier_set:
            return
        self.frontier_set.add((x, y))
        self.frontiers.append((x, y))

    def marked_neighbors(self, x: int, y: int) -> List[Position]:
        return [(nx, ny) for nx, ny, _ in self.grid.get_neighbors(x, y) if self.grid.is_marked(nx, ny)]

    def generate(self):
        self.mark(*self.random_position())
        self.snapshot(self.frontiers)

        while self.frontiers:
            x, y = self.frontiers.pop(self.rng.randrange(len(self.frontiers)))
            self.frontier_set.discard((x, y))

            neighbors = self.marked_neighbors(x, y)
            nx, ny = self.rng.choice(neighbors)

            direction = direction_between(x, y, nx, ny)
            if direction is not None:
                self.grid.carve_passage(x, y, direction)
                self.mark(x, y)

            self.snapshot(self.frontiers)
