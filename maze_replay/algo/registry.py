from enum import Enum
from typing import List, Optional, Type
from maze_replay.algo.base import Generator
from maze_replay.algo.dfs import RecursiveBacktracker
from maze_replay.algo.prim import PrimsAlgorithm
from maze_replay.algo.hunt_and_kill import HuntAndKill
from maze_replay.algo.kruskal import KruskalsAlgorithm
from maze_replay.algo.aldous_broder import AldousBroder
from maze_replay.algo.eller import EllersAlgorithm
from maze_replay.algo.sidewinder import Sidewinder
from maze_replay.core.snapshot import Snapshot


class Algorithm(Enum):
    # member = (cli key, display title, generator class)
    RECURSIVE_BACKTRACKING = ("dfs", "Recursive Backtracker", RecursiveBacktracker)
    PRIMS = ("prim", "Prim's", PrimsAlgorithm)
    HUNT_AND_KILL = ("hunt", "Hunt & Kill", HuntAndKill)
    KRUSKAL = ("kruskal", "Kruskal's", KruskalsAlgorithm)
    ALDOUS_BRODER = ("aldous", "Aldous-Broder", AldousBroder)
    ELLER = ("eller", "Eller's", EllersAlgorithm)
    SIDEWINDER = ("sidewinder", "Sidewinder", Sidewinder)

    def __init__(self, key: str, title: str, generator_cls: Type[Generator]):
        self.key = key
        self.title = title
        self.generator_cls = generator_cls

    @classmethod
    def from_key(cls, key: str) -> "Algorithm":
        for algo in cls:
            if algo.key == key:
                return algo
        raise ValueError(f"Unknown algorithm '{key}'. Choose from: {', '.join(cls.keys())}")

    @classmethod
    def keys(cls) -> List[str]:
        return [algo.key for algo in cls]

    def create(self, width: int, height: int, seed: Optional[int] = None) -> Generator:
        return self.generator_cls.init(width, height, seed=seed)


def generate(algorithm: Algorithm, width: int, height: int, seed: Optional[int] = None) -> List[Snapshot]:
    """Builds a fresh generator and runs it to completion."""
    return algorithm.create(width, height, seed=seed).run()
