import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_replay.core.grid import Grid
from maze_replay.core.analysis import MazeAnalyzer
from maze_replay.algo.registry import Algorithm, generate
from maze_replay.algo.dfs import RecursiveBacktracker
from maze_replay.algo.hunt_and_kill import HuntAndKill
from maze_replay.algo.prim import PrimsAlgorithm, direction_between
from maze_replay.algo.kruskal import KruskalsAlgorithm
from maze_replay.algo.aldous_broder import AldousBroder
from maze_replay.algo.eller import EllersAlgorithm
from maze_replay.algo.sidewinder import Sidewinder

SIZES = [(1, 1), (1, 6), (6, 1), (2, 2), (7, 4), (4, 9), (12, 12)]
SEEDS = [1, 7, 42]


def find_cycle(grid: Grid) -> bool:
    """Iterative DFS over carved passages that reports any back edge."""
    seen = set()
    for start in grid.positions():
        if start in seen:
            continue
        seen.add(start)
        stack = [(start, None)]
        while stack:
            (x, y), parent = stack.pop()
            for nxt in grid.get_open_neighbors(x, y):
                if nxt == parent:
                    continue
                if nxt in seen:
                    return True
                seen.add(nxt)
                stack.append((nxt, (x, y)))
    return False


class TestSpanningTree(unittest.TestCase):
    def test_every_algorithm_builds_a_perfect_maze(self):
        for algo in Algorithm:
            for w, h in SIZES:
                for seed in SEEDS:
                    with self.subTest(algo=algo.key, size=(w, h), seed=seed):
                        snapshots = generate(algo, w, h, seed=seed)
                        self.assertTrue(snapshots)
                        final = snapshots[-1].grid

                        self.assertEqual(final.passage_count(), w * h - 1)
                        self.assertTrue(MazeAnalyzer.is_connected(final))
                        self.assertFalse(find_cycle(final))
                        self.assertFalse(MazeAnalyzer.has_cycle(final))
                        self.assertTrue(MazeAnalyzer.is_perfect(final))

    def test_walls_paired_in_every_snapshot(self):
        for algo in Algorithm:
            with self.subTest(algo=algo.key):
                for snapshot in generate(algo, 6, 5, seed=3):
                    self.assertTrue(MazeAnalyzer.walls_paired(snapshot.grid))

    def test_passages_never_decrease(self):
        for algo in Algorithm:
            with self.subTest(algo=algo.key):
                counts = [s.grid.passage_count() for s in generate(algo, 8, 8, seed=5)]
                self.assertEqual(counts, sorted(counts))

    def test_final_highlights_cleared(self):
        for algo in Algorithm:
            with self.subTest(algo=algo.key):
                snapshots = generate(algo, 5, 5, seed=11)
                self.assertEqual(snapshots[-1].highlights, frozenset())

    def test_highlights_inside_grid(self):
        for algo in Algorithm:
            with self.subTest(algo=algo.key):
                for snapshot in generate(algo, 4, 6, seed=2):
                    for x, y in snapshot.highlights:
                        self.assertTrue(0 <= x < 4 and 0 <= y < 6)

    def test_determinism(self):
        for algo in Algorithm:
            with self.subTest(algo=algo.key):
                a = generate(algo, 10, 10, seed=12345)
                b = generate(algo, 10, 10, seed=12345)
                self.assertEqual(len(a), len(b))
                self.assertEqual(a[-1].grid.cells.tobytes(), b[-1].grid.cells.tobytes())
                self.assertEqual([s.highlights for s in a], [s.highlights for s in b])

    def test_snapshot_immutability(self):
        for algo in Algorithm:
            with self.subTest(algo=algo.key):
                generator = algo.create(4, 4, seed=9)
                snapshots = generator.run()
                recorded = [s.grid.cells.tobytes() for s in snapshots]

                # Scribble over the live grid
                for x, y in generator.grid.positions():
                    generator.grid.cells[generator.grid.get_index(x, y)] = 0

                self.assertEqual([s.grid.cells.tobytes() for s in snapshots], recorded)

    def test_single_use(self):
        for algo in Algorithm:
            with self.subTest(algo=algo.key):
                generator = algo.create(3, 3, seed=1)
                generator.run()
                with self.assertRaises(RuntimeError):
                    generator.run()


class TestRecursiveBacktracker(unittest.TestCase):
    def test_three_by_three(self):
        snapshots = RecursiveBacktracker.init(3, 3, seed=4).run()
        final = snapshots[-1]
        self.assertEqual(final.grid.passage_count(), 8)
        self.assertEqual(MazeAnalyzer.reachable_count(final.grid, (0, 0)), 9)
        self.assertEqual(final.highlights, frozenset())

    def test_snapshot_per_in_bounds_probe(self):
        # Every cell probes each in-bounds direction once: 2 * 12 edges + final
        snapshots = RecursiveBacktracker.init(3, 3, seed=8).run()
        self.assertEqual(len(snapshots), 25)

    def test_path_starts_at_origin(self):
        snapshots = RecursiveBacktracker.init(4, 4, seed=1).run()
        self.assertIn((0, 0), snapshots[0].highlights)

    def test_single_cell(self):
        snapshots = RecursiveBacktracker.init(1, 1).run()
        self.assertEqual(len(snapshots), 1)
        self.assertEqual(snapshots[0].grid.passage_count(), 0)

    def test_large_grid_no_recursion_limit(self):
        snapshots = RecursiveBacktracker(60, 60, seed=0).run()
        self.assertTrue(MazeAnalyzer.is_perfect(snapshots[-1].grid))


class TestHuntAndKill(unittest.TestCase):
    def test_hunt_start_reaches_bottom(self):
        generator = HuntAndKill(8, 6, seed=21)
        snapshots = generator.run()
        self.assertEqual(generator.hunt_start_index, 6)
        self.assertTrue(MazeAnalyzer.is_perfect(snapshots[-1].grid))

    def test_row_scan_highlights(self):
        snapshots = HuntAndKill(5, 5, seed=2).run()
        rows = [frozenset((x, y) for x in range(5)) for y in range(5)]
        self.assertTrue(any(any(row <= s.highlights for row in rows) for s in snapshots))

    def test_single_cell(self):
        snapshots = HuntAndKill(1, 1, seed=0).run()
        self.assertEqual(snapshots[-1].grid.passage_count(), 0)


class TestPrims(unittest.TestCase):
    def test_coverage(self):
        w, h = 20, 20
        generator = PrimsAlgorithm(w, h, seed=42)
        generator.run()
        for x, y in generator.grid.positions():
            self.assertTrue(generator.grid.is_marked(x, y))
            self.assertTrue(generator.grid.is_visited(x, y))
        self.assertEqual(generator.frontiers, [])

    def test_frontier_highlights_are_unmarked(self):
        for snapshot in PrimsAlgorithm(6, 6, seed=3).run():
            for x, y in snapshot.highlights:
                self.assertFalse(snapshot.grid.is_marked(x, y))

    def test_one_snapshot_per_frontier_step(self):
        # Initial snapshot, then one per processed frontier cell (every cell but the start)
        snapshots = PrimsAlgorithm(5, 4, seed=6).run()
        self.assertEqual(len(snapshots), 20)

    def test_direction_between(self):
        self.assertEqual(direction_between(1, 1, 2, 1), Grid.EAST)
        self.assertEqual(direction_between(1, 1, 0, 1), Grid.WEST)
        self.assertEqual(direction_between(1, 1, 1, 2), Grid.SOUTH)
        self.assertEqual(direction_between(1, 1, 1, 0), Grid.NORTH)
        self.assertIsNone(direction_between(1, 1, 1, 1))


class TestKruskal(unittest.TestCase):
    def test_single_row(self):
        for seed in SEEDS:
            snapshots = KruskalsAlgorithm(5, 1, seed=seed).run()
            final = snapshots[-1].grid
            for x in range(4):
                self.assertTrue(final.is_carved(x, 0, Grid.EAST))
            self.assertEqual(final.passage_count(), 4)
            # One snapshot per carve plus the final one
            self.assertEqual(len(snapshots), 5)

    def test_carve_snapshots_highlight_adjacent_pair(self):
        snapshots = KruskalsAlgorithm(6, 6, seed=4).run()
        self.assertEqual(len(snapshots), 36)
        for snapshot in snapshots[:-1]:
            (x1, y1), (x2, y2) = sorted(snapshot.highlights)
            self.assertEqual(abs(x1 - x2) + abs(y1 - y2), 1)

    def test_edges_cover_grid_once(self):
        edges = KruskalsAlgorithm(4, 3).populate_edges()
        # 3 * (4 - 1) horizontal + 4 * (3 - 1) vertical
        self.assertEqual(len(edges), 17)
        self.assertEqual(len(set(edges)), 17)


class TestAldousBroder(unittest.TestCase):
    def test_walk_highlights_single_cell(self):
        snapshots = AldousBroder(5, 5, seed=13).run()
        for snapshot in snapshots[:-1]:
            self.assertEqual(len(snapshot.highlights), 1)

    def test_walk_moves_to_neighbour(self):
        snapshots = AldousBroder(4, 4, seed=17).run()
        positions = [next(iter(s.highlights)) for s in snapshots[:-1]]
        for (x1, y1), (x2, y2) in zip(positions, positions[1:]):
            self.assertEqual(abs(x1 - x2) + abs(y1 - y2), 1)

    def test_single_cell(self):
        snapshots = AldousBroder(1, 1).run()
        self.assertEqual(len(snapshots), 1)


class TestEller(unittest.TestCase):
    def test_single_row_is_a_corridor(self):
        final = EllersAlgorithm(7, 1, seed=5).run()[-1].grid
        for x in range(6):
            self.assertTrue(final.is_carved(x, 0, Grid.EAST))

    def test_every_row_has_a_way_down(self):
        final = EllersAlgorithm(9, 7, seed=8).run()[-1].grid
        for y in range(6):
            self.assertTrue(any(final.is_carved(x, y, Grid.SOUTH) for x in range(9)))

    def test_set_ids_are_fresh(self):
        generator = EllersAlgorithm(4, 3, seed=1)
        first = generator.populate({})
        self.assertEqual(sorted(first.values()), [1, 2, 3, 4])
        second = generator.populate({0: 2})
        self.assertEqual(second[0], 2)
        self.assertEqual(sorted(second.values())[1:], [5, 6, 7])

    def test_end_of_row_snapshot(self):
        snapshots = EllersAlgorithm(1, 1).run()
        self.assertEqual(len(snapshots), 1)


class TestSidewinder(unittest.TestCase):
    def test_single_cell(self):
        snapshots = Sidewinder(1, 1).run()
        self.assertEqual(len(snapshots), 2)
        self.assertEqual(snapshots[-1].grid.passage_count(), 0)

    def test_top_row_corridor(self):
        final = Sidewinder(8, 5, seed=3).run()[-1].grid
        for x in range(7):
            self.assertTrue(final.is_carved(x, 0, Grid.EAST))
        self.assertTrue(final.has_wall(7, 0, Grid.EAST))

    def test_snapshot_per_cell(self):
        snapshots = Sidewinder(6, 4, seed=2).run()
        self.assertEqual(len(snapshots), 6 * 4 + 1)

    def test_lower_rows_never_carve_south_from_top(self):
        final = Sidewinder(6, 6, seed=10).run()[-1].grid
        for y in range(1, 6):
            run_links = sum(1 for x in range(6) if final.is_carved(x, y, Grid.NORTH))
            self.assertGreaterEqual(run_links, 1)


class TestRegistry(unittest.TestCase):
    def test_keys_and_lookup(self):
        self.assertEqual(len(list(Algorithm)), 7)
        self.assertIs(Algorithm.from_key("kruskal"), Algorithm.KRUSKAL)
        self.assertEqual(Algorithm.SIDEWINDER.title, "Sidewinder")
        with self.assertRaises(ValueError):
            Algorithm.from_key("wilson")

    def test_create(self):
        generator = Algorithm.ELLER.create(3, 2, seed=1)
        self.assertIsInstance(generator, EllersAlgorithm)
        self.assertEqual((generator.grid.width, generator.grid.height), (3, 2))

if __name__ == '__main__':
    unittest.main()
