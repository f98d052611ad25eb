from collections import deque
from typing import Dict, List, Tuple
from maze_replay.core.grid import Grid, Position
from maze_replay.core.disjoint_set import DisjointSet


class MazeAnalyzer:
    """Structural checks and statistics over a carved grid."""

    @staticmethod
    def popcount_walls(val: int) -> int:
        c = 0
        if val & Grid.NORTH: c += 1
        if val & Grid.EAST: c += 1
        if val & Grid.SOUTH: c += 1
        if val & Grid.WEST: c += 1
        return c

    @staticmethod
    def passages(grid: Grid) -> List[Tuple[Position, Position]]:
        """Every carved edge exactly once, as ((x, y), (nx, ny)) with the neighbour South or East."""
        edges = []
        for x, y in grid.positions():
            if y < grid.height - 1 and grid.is_carved(x, y, Grid.SOUTH):
                edges.append(((x, y), (x, y + 1)))
            if x < grid.width - 1 and grid.is_carved(x, y, Grid.EAST):
                edges.append(((x, y), (x + 1, y)))
        return edges

    @staticmethod
    def reachable_count(grid: Grid, start: Position = (0, 0)) -> int:
        # Flood fill through carved passages
        seen = {start}
        queue = deque([start])
        while queue:
            x, y = queue.popleft()
            for nxt in grid.get_open_neighbors(x, y):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        return len(seen)

    @staticmethod
    def is_connected(grid: Grid) -> bool:
        return MazeAnalyzer.reachable_count(grid) == grid.width * grid.height

    @staticmethod
    def has_cycle(grid: Grid) -> bool:
        arena = DisjointSet(grid.width * grid.height)
        for (x1, y1), (x2, y2) in MazeAnalyzer.passages(grid):
            if not arena.connect(y1 * grid.width + x1, y2 * grid.width + x2):
                return True
        return False

    @staticmethod
    def walls_paired(grid: Grid) -> bool:
        """True if every cleared wall bit is matched by the opposite bit on the neighbour."""
        for x, y in grid.positions():
            for direction in Grid.DIRECTIONS:
                if grid.has_wall(x, y, direction):
                    continue
                # A cleared border wall has no partner
                nx = x + Grid.DX[direction]
                ny = y + Grid.DY[direction]
                if not (0 <= nx < grid.width and 0 <= ny < grid.height):
                    return False
                if grid.has_wall(nx, ny, Grid.OPPOSITE[direction]):
                    return False
        return True

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """Spanning tree: width*height - 1 passages, connected, acyclic, paired walls."""
        return (
            grid.passage_count() == grid.width * grid.height - 1
            and MazeAnalyzer.walls_paired(grid)
            and MazeAnalyzer.is_connected(grid)
            and not MazeAnalyzer.has_cycle(grid)
        )

    @staticmethod
    def calculate_stats(grid: Grid) -> Dict[str, float]:
        dead_ends = 0
        intersections = 0 # 0, 1 walls
        corridors = 0 # 2 walls

        for i in range(grid.width * grid.height):
            walls = MazeAnalyzer.popcount_walls(grid.cells[i])
            if walls == 3: dead_ends += 1
            elif walls == 2: corridors += 1
            elif walls <= 1: intersections += 1

        total = grid.width * grid.height
        return {
            "passages": grid.passage_count(),
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
