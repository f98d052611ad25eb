from typing import List, Tuple
from maze_replay.core.grid import Grid, OutOfBounds
from maze_replay.core.disjoint_set import DisjointSet
from maze_replay.algo.base import Generator

# (x, y, direction) - every grid edge once, seen from its South/East cell
Edge = Tuple[int, int, int]


class KruskalsAlgorithm(Generator):
    def populate_edges(self) -> List[Edge]:
        edges: List[Edge] = []
        for y in range(self.grid.height):
            for x in range(self.grid.width):
                if y > 0:
                    edges.append((x, y, Grid.NORTH))
                if x > 0:
                    edges.append((x, y, Grid.WEST))
        return edges

    def generate(self):
        width = self.grid.width
        arena = DisjointSet(width * self.grid.height)

        edges = self.populate_edges()
        self.rng.shuffle(edges)

        while edges:
            x, y, direction = edges.pop()

            try:
                nx, ny = self.grid.next_position(x, y, direction)
            except OutOfBounds:
                continue

            node1 = y * width + x
            node2 = ny * width + nx
            if arena.connected(node1, node2):
                continue

            self.snapshot([(x, y), (nx, ny)])
            arena.connect(node1, node2)
            self.grid.carve_passage(x, y, direction)

        self.snapshot([])
