from __future__ import annotations

import random
from typing import Optional, Protocol, Tuple

Position = Tuple[int, int]  # (x, y), 1-indexed

# Board sizes must satisfy MIN_SIZE < size <= MAX_SIZE.
MIN_SIZE = 10
MAX_SIZE = 20


class PositionGenerator(Protocol):
    def random_position(self, size: int) -> Position: ...

    def randint(self, lo: int, hi: int) -> int: ...


class RandomPositionGenerator:
    """Uniform positions drawn from a seeded random.Random."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def randint(self, lo: int, hi: int) -> int:
        return self._rng.randint(lo, hi)

    def random_position(self, size: int) -> Position:
        """Returns (x, y) with each axis independently uniform in [1, size]."""
        return self._rng.randint(1, size), self._rng.randint(1, size)


def random_board_size(gen: PositionGenerator) -> int:
    """Picks a board size from the valid range (MIN_SIZE, MAX_SIZE]."""
    return gen.randint(MIN_SIZE + 1, MAX_SIZE)


def offset(p: Position, dx: int, dy: int) -> Position:
    x, y = p
    return x + dx, y + dy
