from typing import List, Optional, Sequence
from maze_replay.core.snapshot import Snapshot


class SnapshotPlayer:
    """
    Tick-driven cursor over a finished snapshot sequence.
    The renderer advances it once per tick and draws `current`.
    """

    def __init__(self, snapshots: Sequence[Snapshot], title: Optional[str] = None):
        if not snapshots:
            raise ValueError("Cannot play back an empty snapshot sequence")
        self.snapshots: List[Snapshot] = list(snapshots)
        self.title = title
        self.index = 0

    @property
    def current(self) -> Snapshot:
        return self.snapshots[self.index]

    @property
    def finished(self) -> bool:
        return self.index >= len(self.snapshots) - 1

    @property
    def progress(self) -> float:
        if len(self.snapshots) == 1:
            return 1.0
        return self.index / (len(self.snapshots) - 1)

    def tick(self, steps: int = 1) -> bool:
        """Advances up to 'steps' snapshots. Returns False once nothing is left."""
        if self.finished:
            return False
        self.index = min(self.index + steps, len(self.snapshots) - 1)
        return True

    def reset(self):
        self.index = 0

    def __len__(self) -> int:
        return len(self.snapshots)
