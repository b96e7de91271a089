"""Piece model, shapes, geometric rotation"""
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Tuple

from tetris_config import TETROMINO_HEIGHT, TETROMINO_WIDTH, WIDTH

Cell = Tuple[int, int]
Layout = Tuple[Cell, ...]


class Kind(IntEnum):
    I = 0
    J = 1
    L = 2
    O = 3
    S = 4
    T = 5
    Z = 6


# Canonical layouts as (x, y) inside the 2x4 spawn box
SHAPES: Dict[Kind, Layout] = {
    Kind.I: ((0, 0), (1, 0), (2, 0), (3, 0)),
    Kind.J: ((0, 0), (0, 1), (1, 1), (2, 1)),
    Kind.L: ((2, 0), (0, 1), (1, 1), (2, 1)),
    Kind.O: ((1, 0), (2, 0), (1, 1), (2, 1)),
    Kind.S: ((1, 0), (2, 0), (0, 1), (1, 1)),
    Kind.T: ((1, 0), (0, 1), (1, 1), (2, 1)),
    Kind.Z: ((0, 0), (1, 0), (1, 1), (2, 1)),
}

# Color tag written into the grid; 0 is reserved for empty
COLORS: Dict[Kind, int] = {k: int(k) + 1 for k in Kind}

SPAWN_X = (WIDTH - TETROMINO_WIDTH) // 2


def normalize(cells) -> Layout:
    """Shift cells so the bounding box starts at (0, 0); order is row-major."""
    min_x = min(x for x, _ in cells)
    min_y = min(y for _, y in cells)
    return tuple(sorted(((x - min_x, y - min_y) for x, y in cells), key=lambda c: (c[1], c[0])))


def bounds(cells) -> Tuple[int, int, int, int]:
    """Return (min_x, min_y, width, height) of the cells' bounding box."""
    xs = [x for x, _ in cells]
    ys = [y for _, y in cells]
    return min(xs), min(ys), max(xs) - min(xs) + 1, max(ys) - min(ys) + 1


def rotate_cw(layout) -> Layout:
    """Rotate a layout 90 degrees clockwise about its bounding box center.

    The result is normalized, so the rotation never depends on how many
    times the shape was rotated before.
    """
    min_x, min_y, _, h = bounds(layout)
    # (x, y) -> (h-1-y, x) turns the box clockwise, y grows downward
    return normalize([(h - 1 - (y - min_y), x - min_x) for x, y in layout])


def _half(n: int) -> int:
    # truncate toward zero so opposite rotations cancel out
    return int(n / 2)


def rotated_cells(cells) -> List[Cell]:
    """Absolute cells of a piece after one clockwise turn, recentered on the old box."""
    min_x, min_y, w, h = bounds(cells)
    layout = rotate_cw(cells)
    new_w, new_h = h, w
    ox = min_x + _half(w - new_w)
    oy = min_y + _half(h - new_h)
    return [(ox + x, oy + y) for x, y in layout]


def spawn_cells(kind: Kind) -> List[Cell]:
    """Cells of a freshly spawned piece, box centered on the top row."""
    return [(SPAWN_X + x, y) for x, y in SHAPES[kind]]


def preview(kind: Kind) -> Tuple[Tuple[int, ...], ...]:
    """TETROMINO_HEIGHT x TETROMINO_WIDTH matrix of color tags for the next box."""
    m = [[0] * TETROMINO_WIDTH for _ in range(TETROMINO_HEIGHT)]
    for x, y in SHAPES[kind]:
        m[y][x] = COLORS[kind]
    return tuple(tuple(r) for r in m)


@dataclass
class Tetromino:
    kind: Kind
    cells: List[Cell]

    @staticmethod
    def spawn(kind: Kind) -> "Tetromino":
        return Tetromino(kind, spawn_cells(kind))

    @property
    def color(self) -> int:
        return COLORS[self.kind]

    def moved(self, dx: int, dy: int) -> List[Cell]:
        return [(x + dx, y + dy) for x, y in self.cells]

    def rotated(self) -> List[Cell]:
        return rotated_cells(self.cells)
