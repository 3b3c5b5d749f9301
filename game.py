from __future__ import annotations

# Facade module that re-exports the snake core.
# Single-responsibility modules live under snake_core/*.

import sys

from snake_core.ansi import CSI, ansi  # noqa: F401
from snake_core.board import (  # noqa: F401
    BLANK,
    FRUIT,
    SNAKE,
    Board,
    BoardSizeError,
    Renderer,
    validate_size,
)
from snake_core.engine import GAME_OVER, GameEngine, GameStatus, MoveOutcome  # noqa: F401
from snake_core.keys import QUIT, Command, Direction, parse_token  # noqa: F401
from snake_core.position import (  # noqa: F401
    MAX_SIZE,
    MIN_SIZE,
    Position,
    PositionGenerator,
    RandomPositionGenerator,
    random_board_size,
)
from snake_core.snake import Snake, SnakeEmptyError  # noqa: F401
from snake_core.terminal import TerminalMode, read_token  # noqa: F401


def main() -> None:
    # CLI driver delegated to snake_core.cli
    from snake_core.cli import main as _main
    sys.exit(_main())


if __name__ == '__main__':
    main()
