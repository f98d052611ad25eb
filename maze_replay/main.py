import argparse
import sys
import os
import time
import logging

# Ensure project root is in path so we can import 'maze_replay' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_replay.algo.registry import Algorithm

MIN_SIZE = 1
MAX_SIZE = 45
MAX_VISUAL_SIZE = 60

logger = logging.getLogger("maze_replay")


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def validate_size(width: int, height: int, visual: bool = False):
    upper = MAX_VISUAL_SIZE if visual else MAX_SIZE
    for name, value in (("width", width), ("height", height)):
        if not MIN_SIZE <= value <= upper:
            raise ValueError(f"{name} must be between {MIN_SIZE} and {upper}, got {value}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Replay: step-by-step maze generation")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a maze and show or replay its construction")
    gen_parser.add_argument("--width", type=int, default=20, help="Maze Width")
    gen_parser.add_argument("--height", type=int, default=20, help="Maze Height")
    gen_parser.add_argument("--algo", type=str, default="dfs", choices=Algorithm.keys(), help="Generation Algorithm")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--visual", action="store_true", help="Replay the construction in a window")
    gen_parser.add_argument("--record", action="store_true", help="Record the replay to an mp4 video")
    gen_parser.add_argument("--fps", type=int, default=60, help="Replay frames per second")
    gen_parser.add_argument("--ticks-per-frame", type=int, default=1, help="Snapshots advanced per frame")
    gen_parser.add_argument("--unicode", action="store_true", help="Use box-drawing characters for text output")
    gen_parser.add_argument("--stats", action="store_true", help="Print maze statistics")

    # List Command
    subparsers.add_parser("list", help="List available algorithms")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time every algorithm")
    bench_parser.add_argument("--size", type=int, default=30, help="Benchmark size")
    bench_parser.add_argument("--seed", type=int, default=None, help="Random Seed")

    return parser


def run_generate(args, parser):
    try:
        validate_size(args.width, args.height, visual=args.visual or args.record)
    except ValueError as e:
        parser.error(str(e))

    algorithm = Algorithm.from_key(args.algo)
    logger.info(f"Generating {args.width}x{args.height} maze with {algorithm.title}...")

    t0 = time.time()
    snapshots = algorithm.create(args.width, args.height, seed=args.seed).run()
    logger.info(f"Recorded {len(snapshots)} snapshots in {time.time() - t0:.4f}s")

    final = snapshots[-1]

    if args.visual or args.record:
        from maze_replay.viz.playback import SnapshotPlayer
        from maze_replay.viz.renderer import Renderer

        player = SnapshotPlayer(snapshots, title=algorithm.title)
        renderer = Renderer(player, fps=args.fps, ticks_per_frame=args.ticks_per_frame, record=args.record)

        if args.record:
            import datetime
            if not os.path.exists("recordings"):
                os.makedirs("recordings")

            ts = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
            fname = f"gen_{args.algo}_{args.width}x{args.height}_{ts}.mp4"

            renderer.recorder.output_file = os.path.join("recordings", fname)
            logger.info(f"Recording video to {renderer.recorder.output_file}")

        renderer.init_window()
        renderer.run_loop()
    else:
        from maze_replay.viz.text import TextRenderer
        print(TextRenderer(unicode=args.unicode).render_snapshot(final))

    if args.stats:
        from maze_replay.core.analysis import MazeAnalyzer
        stats = MazeAnalyzer.calculate_stats(final.grid)
        logger.info(f"Stats: {stats}")
        print(f"Perfect maze: {MazeAnalyzer.is_perfect(final.grid)}")
        for key, value in stats.items():
            print(f"{key:<18} {value}")


def run_list():
    print(f"{'KEY':<12} | TITLE")
    print("-" * 36)
    for algo in Algorithm:
        print(f"{algo.key:<12} | {algo.title}")


def run_benchmark(args, parser):
    try:
        validate_size(args.size, args.size)
    except ValueError as e:
        parser.error(str(e))

    from maze_replay.core.analysis import MazeAnalyzer

    logger.info(f"Running Generator Benchmark (Size: {args.size}x{args.size})...")

    print(f"\n{'ALGORITHM':<22} | {'TIME (s)':<10} | {'SNAPSHOTS':<10} | {'DEAD ENDS':<10}")
    print("-" * 62)

    for algo in Algorithm:
        t_start = time.time()
        snapshots = algo.create(args.size, args.size, seed=args.seed).run()
        duration = time.time() - t_start

        stats = MazeAnalyzer.calculate_stats(snapshots[-1].grid)
        print(f"{algo.title:<22} | {duration:<10.4f} | {len(snapshots):<10} | {stats['dead_ends']:<10}")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return

    logger.debug(f"Running command: {args.command}")

    if args.command == "generate":
        run_generate(args, parser)
    elif args.command == "list":
        run_list()
    elif args.command == "benchmark":
        run_benchmark(args, parser)


if __name__ == "__main__":
    main()
