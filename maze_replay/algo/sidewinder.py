from maze_replay.core.grid import Grid
from maze_replay.algo.base import Generator


class Sidewinder(Generator):
    def generate(self):
        width = self.grid.width

        for y in range(self.grid.height):
            run_start = 0

            for x in range(width):
                run = [(i, y) for i in range(run_start, x + 1)]
                at_east_edge = x + 1 == width

                if y == 0:
                    # Top row is one long corridor
                    if not at_east_edge:
                        self.grid.carve_passage(x, y, Grid.EAST)
                elif not at_east_edge and self.rng.random() < 0.5:
                    self.grid.carve_passage(x, y, Grid.EAST)
                else:
                    rand_x = self.rng.randint(run_start, x)
                    self.grid.carve_passage(rand_x, y, Grid.NORTH)
                    run_start = x + 1

                self.snapshot(run)

        self.snapshot([])
