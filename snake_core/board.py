from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, Protocol, TextIO

from .ansi import CLEAR_BELOW, GREEN, YELLOW, ansi, colored, cursor_to
from .position import MAX_SIZE, MIN_SIZE, Position

BLANK = "·"
SNAKE = "X"
FRUIT = "O"
SCORE_LABEL = "Score: "


class BoardSizeError(ValueError):
    """Raised when a board size falls outside (MIN_SIZE, MAX_SIZE]."""

    def __init__(self, message: str, reason: str) -> None:
        super().__init__(message)
        self.reason = reason  # 'too small' or 'too large'


def validate_size(size: int) -> int:
    """Checks a board size and returns it as an int."""
    size = int(size)
    if size <= MIN_SIZE:
        raise BoardSizeError(f'Size cannot be less than {MIN_SIZE}.', 'too small')
    if size > MAX_SIZE:
        raise BoardSizeError(f'Size cannot be greater than {MAX_SIZE}.', 'too large')
    return size


class Renderer(Protocol):
    """What the engine needs from a display."""

    @property
    def size(self) -> int: ...

    def setup(self) -> None: ...

    def clear_screen(self) -> None: ...

    def draw_cell(self, p: Position, glyph: str, color: Optional[str] = None) -> None: ...

    def draw_snake_segment(self, p: Position) -> None: ...

    def draw_fruit(self, p: Position) -> None: ...

    def clear_cell(self, p: Position) -> None: ...

    def draw_score(self, score: int) -> None: ...


@dataclass(frozen=True)
class Board:
    """A square board of `size` cells per side, drawn with ANSI escape sequences.

    Board coordinates are 1-indexed. The border takes screen row 1 and
    column 1, so a cell (x, y) lands on screen row y + 1, column x + 1.
    """
    size: int
    out: Optional[TextIO] = None  # defaults to sys.stdout at write time

    def __post_init__(self) -> None:
        object.__setattr__(self, 'size', validate_size(self.size))

    @property
    def score_row(self) -> int:
        return self.size + 2

    @property
    def status_row(self) -> int:
        return self.size + 3

    def setup(self) -> None:
        """Clears the screen and draws the empty bordered grid."""
        self.clear_screen()
        self._draw_grid()
        self._reset_cursor()
        self._flush()

    def clear_screen(self) -> None:
        self._move_cursor((0, 0))
        self._write(ansi(CLEAR_BELOW))

    def draw_cell(self, p: Position, glyph: str, color: Optional[str] = None) -> None:
        """Writes a glyph at a board position, optionally wrapped in a color."""
        self._move_cursor(p)
        self._write(colored(glyph, color) if color else glyph)
        self._reset_cursor()
        self._flush()

    def draw_snake_segment(self, p: Position) -> None:
        self.draw_cell(p, SNAKE, YELLOW)

    def draw_fruit(self, p: Position) -> None:
        self.draw_cell(p, FRUIT, GREEN)

    def clear_cell(self, p: Position) -> None:
        self.draw_cell(p, BLANK)

    def draw_score(self, score: int) -> None:
        """Draws the score line: label left-aligned, value right-aligned."""
        self._move_cursor((0, self.score_row))
        self._write(self.format_score(score))
        self._reset_cursor()
        self._flush()

    def format_score(self, score: int) -> str:
        pad = self.size + 2 - len(SCORE_LABEL)
        return f"{SCORE_LABEL}{int(score):>{pad}d}"

    def _draw_grid(self) -> None:
        edge = '-' * (self.size + 2)
        lines = [edge]
        lines.extend('|' + BLANK * self.size + '|' for _ in range(self.size))
        lines.append(edge)
        self._write('\n'.join(lines) + '\n')

    def _move_cursor(self, p: Position) -> None:
        x, y = p
        self._write(cursor_to(int(y) + 1, int(x) + 1))

    def _reset_cursor(self) -> None:
        # Park the cursor on the line below the score.
        self._move_cursor((0, self.status_row))

    def _stream(self) -> TextIO:
        return self.out if self.out is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._stream().write(text)

    def _flush(self) -> None:
        self._stream().flush()
