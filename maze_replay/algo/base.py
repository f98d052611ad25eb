import logging
import random
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from maze_replay.core.grid import Grid, Position
from maze_replay.core.snapshot import Snapshot, SnapshotRecorder

logger = logging.getLogger(__name__)


class Generator(ABC):
    """
    Single-use maze generator. Owns a fresh Grid, a seeded rng and a
    SnapshotRecorder; run() carves the whole maze and returns every
    recorded snapshot in order.
    """

    def __init__(self, width: int, height: int, seed: Optional[int] = None):
        self.grid = Grid(width, height)
        self.seed = seed
        self.rng = random.Random(seed)
        self.recorder = SnapshotRecorder()
        self.highlights: List[Position] = []
        self._used = False

    @classmethod
    def init(cls, width: int, height: int, seed: Optional[int] = None) -> "Generator":
        return cls(width, height, seed=seed)

    def run(self) -> List[Snapshot]:
        if self._used:
            raise RuntimeError("generator instances are single-use; create a new one")
        self._used = True

        logger.debug(f"{type(self).__name__}: generating {self.grid.width}x{self.grid.height} (seed={self.seed})")
        self.generate()
        snapshots = self.recorder.collect()
        logger.debug(f"{type(self).__name__}: recorded {len(snapshots)} snapshots")
        return snapshots

    @abstractmethod
    def generate(self):
        """Carves self.grid in place, recording snapshots along the way."""
        pass

    def snapshot(self, highlights: Optional[Iterable[Position]] = None):
        self.recorder.record(self.grid, self.highlights if highlights is None else highlights)

    def shuffled_directions(self, order=Grid.DIRECTIONS) -> List[int]:
        directions = list(order)
        self.rng.shuffle(directions)
        return directions

    def random_position(self) -> Position:
        return (self.rng.randrange(self.grid.width), self.rng.randrange(self.grid.height))
