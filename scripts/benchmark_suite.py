import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_replay.algo.registry import Algorithm
from maze_replay.core.analysis import MazeAnalyzer


def benchmark_size(width: int, height: int, seed: int = 42):
    print(f"\n--- Benchmarking {width}x{height} ({width*height:,} cells) ---")
    print(f"{'ALGORITHM':<22} | {'TIME (s)':<10} | {'SNAPSHOTS':<10} | {'SNAP/CELL':<10} | {'DEAD END %':<10}")
    print("-" * 74)

    for algo in Algorithm:
        start = time.time()
        snapshots = algo.create(width, height, seed=seed).run()
        duration = time.time() - start

        final = snapshots[-1].grid
        if not MazeAnalyzer.is_perfect(final):
            print(f"{algo.title}: produced an imperfect maze!")

        stats = MazeAnalyzer.calculate_stats(final)
        per_cell = len(snapshots) / (width * height)
        print(f"{algo.title:<22} | {duration:<10.4f} | {len(snapshots):<10} | {per_cell:<10.2f} | {stats['dead_end_percent']:<10.1f}")


def run_suite():
    # Every snapshot copies the grid, so keep sizes terminal-scale
    sizes = [
        (10, 10),
        (25, 25),
        (45, 45),
        (80, 20),
    ]

    for w, h in sizes:
        benchmark_size(w, h)


if __name__ == "__main__":
    run_suite()
