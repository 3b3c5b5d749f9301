from __future__ import annotations

ESC = "\x1b"
CSI = ESC + "["  # control-sequence introducer

# Foreground colors (SGR parameters)
YELLOW = "33m"
GREEN = "32m"
RESET = "0m"

CLEAR_BELOW = "J"

# Raw byte sequences sent by the arrow keys
KEY_UP = b"\x1b[A"
KEY_DOWN = b"\x1b[B"
KEY_RIGHT = b"\x1b[C"
KEY_LEFT = b"\x1b[D"
KEY_ESC = b"\x1b"
KEY_QUIT = b"q"


def ansi(command: str) -> str:
    """Formats a command as an ANSI escape sequence."""
    return f"{CSI}{command}"


def cursor_to(row: int, col: int) -> str:
    return ansi(f"{row};{col}H")


def colored(text: str, color: str) -> str:
    return ansi(color) + text + ansi(RESET)
