"""Board helpers: grid storage, collide, line sweep"""
from typing import Iterable, List, Tuple

from tetris_config import HEIGHT, WIDTH
from tetris_errors import ResourceFault

EMPTY = 0

Cell = Tuple[int, int]  # (x, y), x = column, y = row


class Grid:
    """HEIGHT x WIDTH playfield stored as one row-major buffer.

    Each cell holds a color tag; 0 means empty.
    """

    def __init__(self):
        try:
            self.cells: List[int] = [EMPTY] * (HEIGHT * WIDTH)
        except MemoryError as exc:
            raise ResourceFault("cannot allocate grid") from exc

    @staticmethod
    def inside(x: int, y: int) -> bool:
        return 0 <= x < WIDTH and 0 <= y < HEIGHT

    def _index(self, x: int, y: int) -> int:
        if not self.inside(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {WIDTH}x{HEIGHT} grid")
        return y * WIDTH + x

    def get(self, x: int, y: int) -> int:
        return self.cells[self._index(x, y)]

    def set(self, x: int, y: int, color: int) -> None:
        self.cells[self._index(x, y)] = color

    def filled(self, x: int, y: int) -> bool:
        return self.get(x, y) != EMPTY

    def row(self, y: int) -> List[int]:
        start = self._index(0, y)
        return self.cells[start:start + WIDTH]

    def row_full(self, y: int) -> bool:
        return all(v != EMPTY for v in self.row(y))

    def clear_row(self, y: int) -> None:
        start = self._index(0, y)
        self.cells[start:start + WIDTH] = [EMPTY] * WIDTH

    def remove_row(self, y: int) -> None:
        """Drop row y, move every row above it one down, empty the top row."""
        end = self._index(0, y)
        self.cells[WIDTH:end + WIDTH] = self.cells[0:end]
        self.clear_row(0)

    def sweep(self) -> int:
        """Clear full lines top to bottom and return the number of cleared rows."""
        cleared = 0
        for y in range(HEIGHT):
            if self.row_full(y):
                self.remove_row(y)
                cleared += 1
        return cleared

    def occupied(self) -> int:
        return sum(1 for v in self.cells if v != EMPTY)

    def rows(self) -> Tuple[Tuple[int, ...], ...]:
        return tuple(tuple(self.row(y)) for y in range(HEIGHT))


def collide(grid: Grid, cells: Iterable[Cell]) -> bool:
    """Return True if any cell is off the grid or already filled."""
    for x, y in cells:
        if not grid.inside(x, y) or grid.filled(x, y):
            return True
    return False


def merge(grid: Grid, cells: Iterable[Cell], color: int) -> None:
    """Write cells into the grid (no collision check)."""
    for x, y in cells:
        grid.set(x, y, color)
