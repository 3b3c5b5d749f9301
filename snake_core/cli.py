from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from .board import BoardSizeError
from .engine import GameEngine
from .position import RandomPositionGenerator

logger = logging.getLogger(__name__)


def _env_flag(name: str) -> bool:
    return os.getenv(name, '0').lower() in ('1', 'true', 'yes', 'on')


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return None
    try:
        return int(raw)
    except ValueError:
        raise SystemExit(f'error: {name} must be an integer, got {raw!r}') from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Terminal snake: arrow keys to move, q or Esc to quit')
    parser.add_argument('--seed', type=int, default=_env_int('SNAKE_SEED'),
                        help='RNG seed for board size and positions (env SNAKE_SEED)')
    parser.add_argument('--log-file', default=os.getenv('SNAKE_LOG_FILE') or None,
                        help='Write logs to this file (env SNAKE_LOG_FILE)')
    parser.add_argument('--debug', action='store_true', default=_env_flag('SNAKE_DEBUG'),
                        help='Log at DEBUG level (env SNAKE_DEBUG)')
    return parser


def configure_logging(log_file: Optional[str], debug: bool) -> None:
    # The terminal is the game screen, so logs only ever go to a file.
    if not log_file:
        logging.getLogger('snake_core').addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.debug)

    gen = RandomPositionGenerator(seed=args.seed)
    try:
        engine = GameEngine(generator=gen)
    except BoardSizeError as e:
        print(f'error: {e}', file=sys.stderr)
        return 2

    logger.info('new game: size=%d seed=%s', engine.size, args.seed)
    score = engine.play()
    logger.info('final score %d', score)
    return 0


if __name__ == '__main__':
    sys.exit(main())
