"""High score persistence"""
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from tetris_config import CONFIG
from tetris_errors import PersistenceFault

log = logging.getLogger(__name__)


class HighScoreStore(ABC):
    """Port for load/save of a single integer high score.

    Implementations raise PersistenceFault on failure; the controller recovers.
    """

    @abstractmethod
    def load_high_score(self) -> int:
        ...

    @abstractmethod
    def save_high_score(self, score: int) -> None:
        ...


class FileHighScoreStore(HighScoreStore):
    """Keeps the high score as a number in a one-line text file."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path if path is not None else CONFIG["HIGH_SCORE_FILE"])

    def load_high_score(self) -> int:
        if not self.path.exists():
            return 0
        try:
            value = int(self.path.read_text().strip())
        except (OSError, ValueError) as exc:
            raise PersistenceFault(f"cannot read {self.path}: {exc}") from exc
        return max(0, value)

    def save_high_score(self, score: int) -> None:
        try:
            self.path.write_text(f"{score}\n")
        except OSError as exc:
            raise PersistenceFault(f"cannot write {self.path}: {exc}") from exc
        log.debug("high score %d written to %s", score, self.path)


class MemoryHighScoreStore(HighScoreStore):
    def __init__(self, score: int = 0):
        self.score = score

    def load_high_score(self) -> int:
        return self.score

    def save_high_score(self, score: int) -> None:
        self.score = score
