"""Piece movement, landing and line clearing against a session.

Every operation takes the session and returns True when it changed
something. A rejected move leaves the session untouched.
"""
import logging

from tetris_board import collide, merge
from tetris_piece import Tetromino, spawn_cells
from tetris_session import Session

log = logging.getLogger(__name__)


def can_spawn(s: Session) -> bool:
    """True if the next kind fits at the spawn position."""
    return not collide(s.grid, spawn_cells(s.next_kind))


def spawn(s: Session) -> bool:
    """Bring in the next kind at top center and pick a new next kind.

    Returns False without touching the session when the spawn cells are taken.
    """
    if not can_spawn(s):
        return False
    s.tetromino = Tetromino.spawn(s.next_kind)
    s.next_kind = s.rng.next_piece()
    return True


def _try(s: Session, cells) -> bool:
    if collide(s.grid, cells):
        return False
    s.tetromino.cells = list(cells)
    return True


def move_left(s: Session) -> bool:
    return _try(s, s.tetromino.moved(-1, 0))


def move_right(s: Session) -> bool:
    return _try(s, s.tetromino.moved(1, 0))


def move_down(s: Session) -> bool:
    return _try(s, s.tetromino.moved(0, 1))


# Gravity step; same rule as a player move down
shift = move_down


def rotate(s: Session) -> bool:
    return _try(s, s.tetromino.rotated())


def is_attach(s: Session) -> bool:
    """True if one more row down would collide."""
    return collide(s.grid, s.tetromino.moved(0, 1))


def hard_drop(s: Session) -> int:
    """Move down until landed; return the number of rows dropped."""
    rows = 0
    while move_down(s):
        rows += 1
    return rows


def attach(s: Session) -> None:
    """Copy the active piece into the grid and retire it."""
    t = s.tetromino
    merge(s.grid, t.cells, t.color)
    s.tetromino = None


def clear_lines(s: Session) -> int:
    cleared = s.grid.sweep()
    if cleared:
        log.debug("cleared %d line(s)", cleared)
    return cleared
