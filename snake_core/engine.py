from __future__ import annotations

import functools
import logging
import sys
from enum import Enum
from typing import Callable, ContextManager, Optional, TextIO

from .board import Board, Renderer
from .keys import QUIT, Command, Direction, parse_token
from .position import (
    Position,
    PositionGenerator,
    RandomPositionGenerator,
    offset,
    random_board_size,
)
from .snake import Snake
from .terminal import TerminalMode, read_token as _read_tty_token

logger = logging.getLogger(__name__)

GAME_OVER = 'GAME OVER'


class GameStatus(Enum):
    SETUP = 'setup'
    RUNNING = 'running'
    OVER = 'over'


class MoveOutcome(Enum):
    BLOCKED = 'blocked'    # off the board, nothing changed
    MOVED = 'moved'
    GREW = 'grew'          # ate the fruit
    COLLIDED = 'collided'  # ran into itself, game over


class GameEngine:
    """
    Drives one game: owns the snake, the fruit and the score, and pushes
    every change to the renderer.

    The engine goes SETUP -> RUNNING -> OVER exactly once. OVER is reached
    by self-collision or by a quit command; running into an edge only drops
    the move.
    """

    def __init__(
        self,
        size: Optional[int] = None,
        *,
        generator: Optional[PositionGenerator] = None,
        renderer: Optional[Renderer] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        self._gen: PositionGenerator = generator or RandomPositionGenerator()
        self._output = output
        if renderer is None:
            if size is None:
                size = random_board_size(self._gen)
            renderer = Board(size, out=output)
        elif size is not None and size != renderer.size:
            raise ValueError(f'size {size} does not match renderer size {renderer.size}')
        self._renderer: Renderer = renderer
        self._size = renderer.size
        self._snake = Snake()
        self._fruit: Optional[Position] = None
        self._score = 0
        self._status = GameStatus.SETUP

    @property
    def size(self) -> int:
        return self._size

    @property
    def renderer(self) -> Renderer:
        return self._renderer

    @property
    def snake(self) -> Snake:
        return self._snake

    @property
    def fruit(self) -> Optional[Position]:
        return self._fruit

    @property
    def score(self) -> int:
        return self._score

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def running(self) -> bool:
        return self._status is GameStatus.RUNNING

    def start(self, head: Optional[Position] = None) -> None:
        """Places the snake and the first fruit, draws the board and starts the game."""
        if self._status is not GameStatus.SETUP:
            raise RuntimeError(f'Cannot start a game that is {self._status.value}')
        if head is None:
            head = self._gen.random_position(self._size)
        elif not self.in_bounds(head):
            raise ValueError(f'Start position {head} is outside the board')
        logger.debug('starting game: size=%d head=%s', self._size, head)
        self._snake.add_head(head)
        self._renderer.setup()
        self._renderer.draw_snake_segment(head)
        self._renderer.draw_score(self._score)
        self.place_fruit()
        self._status = GameStatus.RUNNING

    def place_fruit(self) -> Position:
        """Picks a free cell for the fruit by rejection sampling and draws it."""
        while True:
            candidate = self._gen.random_position(self._size)
            if not self._snake.occupies(candidate):
                break
        self._fruit = candidate
        self._renderer.draw_fruit(candidate)
        logger.debug('fruit placed at %s', candidate)
        return candidate

    def in_bounds(self, p: Position) -> bool:
        x, y = p
        return 1 <= x <= self._size and 1 <= y <= self._size

    def move(self, dx: int, dy: int) -> MoveOutcome:
        """Attempts to move the head by (dx, dy)."""
        head = self._snake.head()
        new_head = offset(head, dx, dy)

        if not self.in_bounds(new_head):
            logger.debug('move to %s blocked by edge', new_head)
            return MoveOutcome.BLOCKED

        # Collision check happens before anything is mutated or drawn.
        if self._snake.occupies(new_head):
            self._write_line(GAME_OVER)
            self._status = GameStatus.OVER
            logger.info('game over at %s with score %d', new_head, self._score)
            return MoveOutcome.COLLIDED

        if new_head == self._fruit:
            self._score += 1
            self._renderer.draw_score(self._score)
            self._snake.add_head(new_head)
            self._renderer.draw_snake_segment(new_head)
            self.place_fruit()
            logger.debug('ate fruit at %s; score=%d length=%d', new_head, self._score, len(self._snake))
            return MoveOutcome.GREW

        tail = self._snake.remove_tail()
        self._snake.add_head(new_head)
        self._renderer.draw_snake_segment(new_head)
        self._renderer.clear_cell(tail)
        return MoveOutcome.MOVED

    def handle(self, command: Optional[Command]) -> bool:
        """Applies one command and returns whether the game is still running."""
        if not self.running:
            return False
        if command is None:
            return True
        if command is QUIT:
            self._status = GameStatus.OVER
            logger.info('player quit with score %d', self._score)
            return False
        if isinstance(command, Direction):
            self.move(*command.delta)
        return self.running

    def handle_token(self, token: bytes) -> bool:
        return self.handle(parse_token(token))

    def run(self, read_token: Callable[[], bytes]) -> None:
        """Consumes input tokens until the game is over. End of input counts as quitting."""
        while self.running:
            token = read_token()
            if not token:
                logger.info('input closed; ending game')
                self.handle(QUIT)
                break
            self.handle_token(token)

    def play(
        self,
        read_token: Optional[Callable[[], bytes]] = None,
        terminal: Optional[ContextManager] = None,
    ) -> int:
        """Sets up the board and runs the input loop with the terminal in raw mode.

        Returns the final score.
        """
        self.start()
        if terminal is None:
            terminal = TerminalMode()
        if read_token is None:
            read_token = functools.partial(_read_tty_token, getattr(terminal, 'fd', None))

        with terminal:
            self.run(read_token)
        return self._score

    def _write_line(self, text: str) -> None:
        out = self._output if self._output is not None else sys.stdout
        out.write(text + '\n')
        out.flush()
