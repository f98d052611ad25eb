from typing import Optional
from maze_replay.core.grid import Grid, OutOfBounds, Position
from maze_replay.algo.base import Generator

# Walk shuffles this order; the hunt probes neighbours in it as-is
HUNT_ORDER = (Grid.NORTH, Grid.EAST, Grid.WEST, Grid.SOUTH)


class HuntAndKill(Generator):
    def __init__(self, width: int, height: int, seed: Optional[int] = None):
        super().__init__(width, height, seed=seed)
        # Rows above this index are known to be fully visited
        self.hunt_start_index = 0

    def walk(self, x: int, y: int) -> Optional[Position]:
        for direction in self.shuffled_directions(HUNT_ORDER):
            try:
                nx, ny = self.grid.next_position(x, y, direction)
            except OutOfBounds:
                continue
            if not self.grid.is_visited(nx, ny):
                return self.grid.carve_passage(x, y, direction)
        return None

    def hunt(self) -> Optional[Position]:
        for y in range(self.hunt_start_index, self.grid.height):
            row = [(x, y) for x in range(self.grid.width)]
            self.snapshot(self.highlights + row)

            unvisited = 0
            for x in range(self.grid.width):
                if self.grid.is_visited(x, y):
                    continue
                unvisited += 1

                for direction in HUNT_ORDER:
                    try:
                        nx, ny = self.grid.next_position(x, y, direction)
                    except OutOfBounds:
                        continue
                    if self.grid.is_visited(nx, ny):
                        self.grid.carve_passage(x, y, direction)
                        return (x, y)

            if unvisited == 0:
                self.hunt_start_index = y + 1
        return None

    def generate(self):
        x, y = self.random_position()

        while True:
            self.snapshot()

            found = self.walk(x, y)
            if found:
                x, y = found
                self.highlights.append(found)
                continue

            found = self.hunt()
            self.highlights.clear()
            if found is None:
                break
            x, y = found

        self.snapshot()
