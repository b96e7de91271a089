"""Game session: grid, active piece, progress counters, snapshot"""
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

from tetris_board import Grid
from tetris_config import CONFIG
from tetris_piece import Kind, Tetromino, preview
from tetris_rng import PieceRandom


class State(IntEnum):
    START = 0
    GAMEOVER = 1
    SPAWN = 2
    MOVING = 3
    SHIFTING = 4
    ATTACHING = 5


def level_for(score: int) -> int:
    return min(CONFIG["MAX_LEVEL"], 1 + score // CONFIG["LEVEL_SCORE_STEP"])


def speed_for(level: int) -> int:
    return max(1, min(CONFIG["MAX_SPEED"], level))


def points_for(lines: int) -> int:
    return CONFIG["SCORE_TABLE"].get(lines, 0)


@dataclass(frozen=True)
class GameInfo:
    """Read-only view handed to the front-end after every transition."""
    field: Optional[Tuple[Tuple[int, ...], ...]]
    piece: Tuple[Tuple[int, int], ...]
    kind: Optional[Kind]
    next_kind: Optional[Kind]
    next: Optional[Tuple[Tuple[int, ...], ...]]
    score: int
    high_score: int
    level: int
    speed: int
    pause: bool
    state: State


@dataclass
class Session:
    grid: Optional[Grid]
    rng: Optional[PieceRandom]
    next_kind: Optional[Kind]
    tetromino: Optional[Tetromino] = None
    score: int = 0
    high_score: int = 0
    level: int = 1
    speed: int = 1
    pause: bool = False
    state: State = State.START

    @staticmethod
    def create(high_score: int = 0, seed: Optional[int] = None) -> "Session":
        """Allocate a fresh session; raises ResourceFault if that fails."""
        grid = Grid()
        rng = PieceRandom(seed)
        return Session(grid=grid, rng=rng, next_kind=rng.next_piece(),
                       high_score=max(0, high_score))

    @property
    def released(self) -> bool:
        return self.grid is None

    def add_lines(self, lines: int) -> int:
        """Score cleared lines, advance level and speed; return points awarded."""
        points = points_for(lines)
        self.score += points
        self.level = max(self.level, level_for(self.score))
        self.speed = max(self.speed, speed_for(self.level))
        return points

    def release(self) -> None:
        self.grid = None
        self.tetromino = None
        self.rng = None

    def snapshot(self) -> GameInfo:
        t = self.tetromino
        return GameInfo(
            field=self.grid.rows() if self.grid is not None else None,
            piece=tuple(t.cells) if t else (),
            kind=t.kind if t else None,
            next_kind=self.next_kind,
            next=preview(self.next_kind) if self.next_kind is not None else None,
            score=self.score,
            high_score=self.high_score,
            level=self.level,
            speed=self.speed,
            pause=self.pause,
            state=self.state,
        )
