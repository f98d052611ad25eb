from typing import AbstractSet, List, Optional
from maze_replay.core.grid import Grid, Position

# (up, down, left, right) wall arms meeting at a lattice point
BOX_CORNERS = {
    (True, True, True, True): "┼",
    (True, True, True, False): "┤",
    (True, True, False, True): "├",
    (True, False, True, True): "┴",
    (False, True, True, True): "┬",
    (True, True, False, False): "│",
    (False, False, True, True): "─",
    (False, True, False, True): "┌",
    (False, True, True, False): "┐",
    (True, False, False, True): "└",
    (True, False, True, False): "┘",
    (True, False, False, False): "╵",
    (False, True, False, False): "╷",
    (False, False, True, False): "╴",
    (False, False, False, True): "╶",
    (False, False, False, False): " ",
}


class TextRenderer:
    """
    Draws a grid as text, two characters per cell plus a shared wall
    column, e.g. for a 2x1 maze with one passage:

        +--+--+        ┌─────┐
        |     |        │     │
        +--+--+        └─────┘

    ASCII mode always uses '+' corners; unicode mode picks the box-drawing
    junction that matches the walls meeting at each corner.
    """

    def __init__(self, unicode: bool = False):
        self.unicode = unicode
        if unicode:
            self.h_wall, self.v_wall = "──", "│"
            self.open, self.lit = "  ", "██"
        else:
            self.h_wall, self.v_wall = "--", "|"
            self.open, self.lit = "  ", "##"

    def has_vertical_wall(self, grid: Grid, i: int, y: int) -> bool:
        """Wall segment on lattice column i (0..width) alongside row y."""
        if i == 0 or i == grid.width:
            return True
        return grid.has_wall(i - 1, y, Grid.EAST)

    def has_horizontal_wall(self, grid: Grid, x: int, j: int) -> bool:
        """Wall segment on lattice row j (0..height) alongside column x."""
        if j == 0 or j == grid.height:
            return True
        return grid.has_wall(x, j - 1, Grid.SOUTH)

    def corner(self, grid: Grid, i: int, j: int) -> str:
        if not self.unicode:
            return "+"
        arms = (
            j > 0 and self.has_vertical_wall(grid, i, j - 1),
            j < grid.height and self.has_vertical_wall(grid, i, j),
            i > 0 and self.has_horizontal_wall(grid, i - 1, j),
            i < grid.width and self.has_horizontal_wall(grid, i, j),
        )
        return BOX_CORNERS[arms]

    def lattice_row(self, grid: Grid, j: int) -> str:
        parts = [self.corner(grid, 0, j)]
        for x in range(grid.width):
            if self.has_horizontal_wall(grid, x, j):
                parts.append(self.h_wall)
            else:
                parts.append(" " * len(self.h_wall))
            parts.append(self.corner(grid, x + 1, j))
        return "".join(parts)

    def render(self, grid: Grid, highlights: Optional[AbstractSet[Position]] = None) -> str:
        highlights = highlights or frozenset()
        lines: List[str] = [self.lattice_row(grid, 0)]

        for y in range(grid.height):
            body = [self.v_wall]
            for x in range(grid.width):
                body.append(self.lit if (x, y) in highlights else self.open)
                body.append(self.v_wall if self.has_vertical_wall(grid, x + 1, y) else " ")
            lines.append("".join(body))
            lines.append(self.lattice_row(grid, y + 1))

        return "\n".join(lines)

    def render_snapshot(self, snapshot) -> str:
        return self.render(snapshot.grid, snapshot.highlights)
