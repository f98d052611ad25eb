from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Iterator, List
from maze_replay.core.grid import Grid, Position


@dataclass(frozen=True, eq=False)
class Snapshot:
    """
    One recorded instant of a generator run: a private copy of the grid
    plus the positions highlighted at that instant (walk path, frontier...).
    """
    grid: Grid
    highlights: FrozenSet[Position] = field(default_factory=frozenset)

    def is_highlighted(self, x: int, y: int) -> bool:
        return (x, y) in self.highlights


class SnapshotRecorder:
    """Append-only sequence of snapshots. Copies the grid on every record."""

    def __init__(self):
        self._snapshots: List[Snapshot] = []

    def record(self, grid: Grid, highlights: Iterable[Position] = ()) -> Snapshot:
        snapshot = Snapshot(grid.copy(), frozenset(highlights))
        self._snapshots.append(snapshot)
        return snapshot

    def collect(self) -> List[Snapshot]:
        return list(self._snapshots)

    def __len__(self) -> int:
        return len(self._snapshots)

    def __iter__(self) -> Iterator[Snapshot]:
        return iter(self._snapshots)
