from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Iterator, Optional, Tuple

from .position import Position


class SnakeEmptyError(IndexError):
    """Raised when the head or tail of a snake with no segments is requested."""


class Snake:
    """
    The player's body: an ordered run of occupied cells.

    Segments are kept head first. New heads are pushed on the left and the
    tail is popped from the right, so both ends are O(1).
    """

    def __init__(self, positions: Optional[Iterable[Position]] = None) -> None:
        self._positions: Deque[Position] = deque(positions or ())

    def __len__(self) -> int:
        return len(self._positions)

    def __iter__(self) -> Iterator[Position]:
        return iter(self._positions)

    def __repr__(self) -> str:
        return f"Snake({list(self._positions)!r})"

    def add_head(self, p: Position) -> None:
        """Adds a new segment at the head."""
        self._positions.appendleft(p)

    def remove_tail(self) -> Position:
        """Removes the oldest segment and returns it."""
        if not self._positions:
            raise SnakeEmptyError('Cannot remove the tail of an empty snake')
        return self._positions.pop()

    def head(self) -> Position:
        if not self._positions:
            raise SnakeEmptyError('Snake has no head')
        return self._positions[0]

    def occupies(self, p: Position) -> bool:
        """Checks whether any segment sits on the given cell."""
        for seg in self._positions:
            if seg == p:
                return True
        return False

    def segments(self) -> Tuple[Position, ...]:
        return tuple(self._positions)
