from typing import Dict, List, Optional
from maze_replay.core.grid import Grid
from maze_replay.algo.base import Generator


class EllersAlgorithm(Generator):
    """
    Row-by-row generation. Only the set membership of the current row
    (column -> set id) is kept; ids come from a monotonically increasing
    counter so a fresh cell never collides with an inherited set.
    """

    def __init__(self, width: int, height: int, seed: Optional[int] = None):
        super().__init__(width, height, seed=seed)
        self.next_set_id = 0

    def populate(self, row: Dict[int, int]) -> Dict[int, int]:
        """Seeds every column without an inherited set as a new singleton."""
        for x in range(self.grid.width):
            if x not in row:
                self.next_set_id += 1
                row[x] = self.next_set_id
        return row

    def connect_disjoint_sets(self, row: Dict[int, int], y: int, is_last_row: bool):
        for x in range(self.grid.width - 1):
            sink, target = row[x], row[x + 1]
            if sink == target:
                continue
            # Last row must join everything that is still apart
            if not is_last_row and self.rng.random() < 0.5:
                continue

            for col, set_id in row.items():
                if set_id == target:
                    row[col] = sink

            self.grid.carve_passage(x, y, Grid.EAST)
            self.highlights.append((x, y))
            self.snapshot()

    def add_vertical_connections(self, row: Dict[int, int], y: int) -> Dict[int, int]:
        members: Dict[int, List[int]] = {}
        for x in range(self.grid.width):
            members.setdefault(row[x], []).append(x)

        next_row: Dict[int, int] = {}
        for set_id, columns in members.items():
            count = self.rng.randint(1, len(columns))
            for x in self.rng.sample(columns, count):
                self.grid.carve_passage(x, y, Grid.SOUTH)
                next_row[x] = set_id

                self.highlights.append((x, y))
                self.highlights.append((x, y + 1))
                self.snapshot()

        return self.populate(next_row)

    def generate(self):
        row = self.populate({})

        for y in range(self.grid.height):
            is_last_row = y == self.grid.height - 1
            self.connect_disjoint_sets(row, y, is_last_row)
            if not is_last_row:
                row = self.add_vertical_connections(row, y)

            self.highlights.clear()
            self.snapshot()
