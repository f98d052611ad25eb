from maze_replay.core.grid import OutOfBounds
from maze_replay.algo.base import Generator


class AldousBroder(Generator):
    """
    Random walk that carves only on first entry into a cell; yields a
    uniformly random spanning tree.
    """

    def generate(self):
        x, y = self.random_position()

        # Cells yet to be entered for the first time
        remaining = self.grid.width * self.grid.height - 1

        while remaining > 0:
            self.snapshot([(x, y)])

            for direction in self.shuffled_directions():
                try:
                    nx, ny = self.grid.next_position(x, y, direction)
                except OutOfBounds:
                    continue

                if not self.grid.is_visited(nx, ny):
                    self.grid.carve_passage(x, y, direction)
                    remaining -= 1
                x, y = nx, ny
                break

        self.snapshot([])
