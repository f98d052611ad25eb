from array import array
from dataclasses import dataclass
from typing import Iterator, Tuple

Position = Tuple[int, int]


class OutOfBounds(IndexError):
    """Raised when a coordinate or a directional step leaves the grid."""

    def __init__(self, position: Position, reason: str, direction: int = 0):
        self.position = position
        self.direction = direction
        self.reason = reason
        x, y = position
        super().__init__(f"Cannot move to a cell. Reason: {reason}. Pos: x = {x}, y = {y}")


@dataclass(frozen=True)
class Cell:
    """Read-only view of one cell's walls and flags."""
    walls: int
    visited: bool
    marked: bool

    def has_wall(self, direction: int) -> bool:
        return (self.walls & direction) != 0

    def is_carved(self, direction: int) -> bool:
        return not self.has_wall(direction)


class Grid:
    # Bitmask Constants
    NORTH = 0b00000001
    EAST  = 0b00000010
    SOUTH = 0b00000100
    WEST  = 0b00001000

    # Flags
    VISITED = 0b00010000
    MARKED  = 0b00100000 # Prim's "in maze" flag, independent of VISITED

    # All walls present by default (N|E|S|W) = 15
    ALL_WALLS = NORTH | EAST | SOUTH | WEST

    DIRECTIONS = (NORTH, EAST, SOUTH, WEST)

    # Direction Helpers
    DX = {NORTH: 0, SOUTH: 0, EAST: 1, WEST: -1}
    DY = {NORTH: -1, SOUTH: 1, EAST: 0, WEST: 0}
    OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        # One byte per cell: low nibble walls, high bits flags
        self.cells = array('B', [self.ALL_WALLS] * (width * height))

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise OutOfBounds((x, y), "Coordinate outside of the grid")

    def next_position(self, x: int, y: int, direction: int) -> Position:
        """
        Returns the neighbour of (x, y) in 'direction'.
        Raises OutOfBounds when the step would leave the grid.
        """
        self.get_index(x, y)

        if direction == self.NORTH:
            if y < 1:
                raise OutOfBounds((x, y), "First row in the grid cannot go North", direction)
        elif direction == self.SOUTH:
            if y + 1 == self.height:
                raise OutOfBounds((x, y), "Last row in the grid cannot go South", direction)
        elif direction == self.WEST:
            if x < 1:
                raise OutOfBounds((x, y), "First cell in a row cannot go West", direction)
        elif direction == self.EAST:
            if x + 1 == self.width:
                raise OutOfBounds((x, y), "Last column in the grid cannot go East", direction)
        else:
            raise ValueError(f"Unknown direction bit: {direction}")

        return (x + self.DX[direction], y + self.DY[direction])

    def carve_passage(self, x: int, y: int, direction: int) -> Position:
        """
        Removes the wall between (x, y) and the neighbour in 'direction'.
        Also removes the OPPOSITE wall from the neighbour and marks both visited.
        """
        nx, ny = self.next_position(x, y, direction)

        idx1 = y * self.width + x
        idx2 = ny * self.width + nx

        self.cells[idx1] &= ~direction
        self.cells[idx2] &= ~self.OPPOSITE[direction]

        self.cells[idx1] |= self.VISITED
        self.cells[idx2] |= self.VISITED

        return (nx, ny)

    def has_wall(self, x: int, y: int, direction: int) -> bool:
        return (self.cells[self.get_index(x, y)] & direction) != 0

    def is_carved(self, x: int, y: int, direction: int) -> bool:
        return not self.has_wall(x, y, direction)

    def set_visited(self, x: int, y: int, visited: bool = True):
        idx = self.get_index(x, y)
        if visited:
            self.cells[idx] |= self.VISITED
        else:
            self.cells[idx] &= ~self.VISITED

    def is_visited(self, x: int, y: int) -> bool:
        return (self.cells[self.get_index(x, y)] & self.VISITED) != 0

    def mark_cell(self, x: int, y: int):
        self.cells[self.get_index(x, y)] |= self.MARKED

    def is_marked(self, x: int, y: int) -> bool:
        return (self.cells[self.get_index(x, y)] & self.MARKED) != 0

    def get_cell(self, x: int, y: int) -> Cell:
        val = self.cells[self.get_index(x, y)]
        return Cell(
            walls=val & self.ALL_WALLS,
            visited=bool(val & self.VISITED),
            marked=bool(val & self.MARKED),
        )

    def get_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, direction_to_neighbor) for all valid grid neighbors.
        Does NOT check walls.
        """
        # North
        if y > 0:
            yield (x, y - 1, self.NORTH)
        # South
        if y < self.height - 1:
            yield (x, y + 1, self.SOUTH)
        # East
        if x < self.width - 1:
            yield (x + 1, y, self.EAST)
        # West
        if x > 0:
            yield (x - 1, y, self.WEST)

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Position]:
        """
        Yields (nx, ny) for neighbors that are NOT blocked by a wall.
        """
        for nx, ny, direction in self.get_neighbors(x, y):
            if not self.has_wall(x, y, direction):
                yield (nx, ny)

    def passage_count(self) -> int:
        # Count each edge once via its South/East side
        count = 0
        for y in range(self.height):
            for x in range(self.width):
                val = self.cells[y * self.width + x]
                if y < self.height - 1 and not (val & self.SOUTH):
                    count += 1
                if x < self.width - 1 and not (val & self.EAST):
                    count += 1
        return count

    def positions(self) -> Iterator[Position]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def copy(self) -> "Grid":
        clone = Grid.__new__(Grid)
        clone.width = self.width
        clone.height = self.height
        clone.cells = array('B', self.cells)
        return clone

    def __copy__(self) -> "Grid":
        return self.copy()

    def __deepcopy__(self, memo) -> "Grid":
        return self.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and self.cells == other.cells

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"
