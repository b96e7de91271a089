"""Seedable piece picker"""
import time
from typing import Optional

from tetris_piece import Kind


class PieceRandom:
    """32-bit LCG mapped uniformly onto the seven kinds."""

    PIECES = list(Kind)

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = time.monotonic_ns() & 0xFFFFFFFF
        self.state = seed & 0xFFFFFFFF

    def _lcg_next(self):
        self.state = (self.state * 0x41C64E6D + 0x3039) & 0xFFFFFFFF
        return self.state

    def _rand(self):
        return (self._lcg_next() >> 16) & 0x7FFF

    def next_piece(self) -> Kind:
        return self.PIECES[self._rand() % len(self.PIECES)]
