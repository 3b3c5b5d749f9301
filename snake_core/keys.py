from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple, Union

from .ansi import KEY_DOWN, KEY_ESC, KEY_LEFT, KEY_QUIT, KEY_RIGHT, KEY_UP


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value


class Quit(Enum):
    QUIT = 'quit'


QUIT = Quit.QUIT

Command = Union[Direction, Quit]

KEY_COMMANDS: Dict[bytes, Command] = {
    KEY_UP: Direction.UP,
    KEY_DOWN: Direction.DOWN,
    KEY_LEFT: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
    KEY_ESC: QUIT,
    KEY_QUIT: QUIT,
}


def parse_token(token: bytes) -> Optional[Command]:
    """Maps one raw input token (1-3 bytes) to a command; None means ignore it."""
    if isinstance(token, str):
        token = token.encode()
    return KEY_COMMANDS.get(token)
