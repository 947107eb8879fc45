import logging

import numpy as np

from utils import MAX_MAP_CELLS, RED, BLUE, YELLOW, RESET, strip_ansi

logger = logging.getLogger(__name__)


class Grid:
    def __init__(self, width, height):
        self.width = width
        self.height = height

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height)

    def __repr__(self):
        return f"Grid(width={self.width}, height={self.height})"

    @property
    def shape(self):
        # (rows, cols) for the inclusive coordinate range, empty for degenerate grids
        return max(self.height + 1, 0), max(self.width + 1, 0)

    def contains(self, pos):
        x, y = pos
        return 0 <= x <= self.width and 0 <= y <= self.height

    def visit_counts(self, rovers):
        """Count how many times each cell was occupied, indexed [y, x]"""
        counts = np.zeros(self.shape, dtype=int)
        cells = [pos for rover in rovers for pos in rover.path if self.contains(pos)]
        if cells:
            xs, ys = zip(*cells)
            np.add.at(counts, (np.array(ys), np.array(xs)), 1)
        return counts

    def render(self, rovers, color=True):
        """Return a text map of the grid with visited cells and final rover positions"""
        rows, cols = self.shape
        if rows * cols == 0:
            return "Grid is empty."
        if rows * cols > MAX_MAP_CELLS:
            logger.warning(f"Grid {self.width}x{self.height} is too large to render ({rows * cols} cells)")
            return f"Grid too large to render ({rows * cols} cells, limit {MAX_MAP_CELLS})."

        if not color:
            red = blue = yellow = reset = ""
        else:
            red, blue, yellow, reset = RED, BLUE, YELLOW, RESET

        counts = self.visit_counts(rovers)
        display_grid = [["." for _ in range(cols)] for _ in range(rows)]
        for y, x in zip(*np.nonzero(counts)):
            display_grid[y][x] = f'{yellow}{min(int(counts[y, x]), 9)}{reset}'

        # Group rovers by final position to show overlapping
        position_map = {}
        for rover in rovers:
            if self.contains(rover.position):
                position_map.setdefault(rover.position, []).append(rover)

        for (x, y), rovers_at_pos in position_map.items():
            if len(rovers_at_pos) == 1:
                rover = rovers_at_pos[0]
                marker = "X" if rover.is_lost else "R"
                cell_color = red if rover.is_lost else blue
                display_grid[y][x] = f'{cell_color}{marker}{rover.orientation.symbol}{reset}'
            else:
                display_grid[y][x] = f'{blue}Rx{len(rovers_at_pos)}{reset}'

        lines = ["Legend: R=rover, X=lost rover, ↑=N, →=E, ↓=S, ←=W, digits=visits"]
        lines.append('    ' + ''.join(f'{x:^5}' for x in range(cols)))
        # Row 0 is at the bottom so north points up
        for y in reversed(range(rows)):
            row_str = []
            for cell in display_grid[y]:
                visible_len = len(strip_ansi(cell))
                padding = ' ' * ((4 - visible_len) // 2)
                row_str.append(padding + cell + padding + (' ' if (4 - visible_len) % 2 != 0 else ''))
            lines.append(f'{y:2d}: {" ".join(row_str)}')
        return "\n".join(lines)
