from __future__ import annotations

import logging
import os
import signal
import sys
import termios
import threading
import tty
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

TOKEN_SIZE = 3  # longest key sequence we care about (arrow keys)

# Signals that should unwind the game loop so the terminal gets restored.
# SIGINT already raises KeyboardInterrupt.
_UNWIND_SIGNALS = [s for s in ('SIGTERM', 'SIGHUP') if hasattr(signal, s)]


def _raise_exit(signum: int, frame: Any) -> None:
    raise SystemExit(128 + signum)


class TerminalMode:
    """
    Puts a TTY into cbreak mode (no line buffering, no echo) for the duration
    of a `with` block and restores the captured settings on the way out.

    Restoration runs on every exit: normal return, exceptions,
    KeyboardInterrupt, and SIGTERM/SIGHUP, which are turned into SystemExit
    while the block is active. A non-TTY descriptor is left untouched.
    """

    def __init__(self, fd: Optional[int] = None) -> None:
        self.fd = sys.stdin.fileno() if fd is None else fd
        self._saved: Optional[List[Any]] = None
        self._old_handlers: Dict[int, Any] = {}

    @property
    def active(self) -> bool:
        return self._saved is not None

    def __enter__(self) -> 'TerminalMode':
        if not os.isatty(self.fd):
            logger.debug('fd %s is not a tty; leaving terminal mode unchanged', self.fd)
            return self
        self._saved = termios.tcgetattr(self.fd)
        self._install_handlers()
        tty.setcbreak(self.fd)
        logger.debug('terminal fd %s switched to cbreak mode', self.fd)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if self._saved is not None:
                termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved)
                logger.debug('terminal fd %s restored', self.fd)
        finally:
            self._saved = None
            self._restore_handlers()

    def _install_handlers(self) -> None:
        if threading.current_thread() is not threading.main_thread():
            return
        for name in _UNWIND_SIGNALS:
            signum = getattr(signal, name)
            self._old_handlers[signum] = signal.signal(signum, _raise_exit)

    def _restore_handlers(self) -> None:
        for signum, handler in self._old_handlers.items():
            signal.signal(signum, handler)
        self._old_handlers.clear()


def read_token(fd: Optional[int] = None) -> bytes:
    """Blocks for the next key press and returns its raw bytes (b'' at EOF)."""
    if fd is None:
        fd = sys.stdin.fileno()
    return os.read(fd, TOKEN_SIZE)
