from __future__ import annotations

import argparse
import os
import sys
from typing import Callable, List, Optional

from .board import Board, new_from_config, new_random
from .consts import CARD_TOTAL
from .errors import InvalidConfigError, NonConvergenceError
from .rounds import play_rounds

INSTRUCTIONS = 'Please enter a space-separated list of positive integers followed by newline:'
INVALID_CONFIG_MESSAGE = (
    'ERROR: Each pile must have at least one card '
    f'and the total number of cards must be {CARD_TOTAL}'
)
CONTINUE_PROMPT = '<Type return to continue>'

ReadLine = Callable[[str], str]
Write = Callable[[str], None]


def _env_flag(name: str) -> bool:
    return os.getenv(name, '0').lower() in ('1', 'true', 'yes', 'on')


def read_user_board(read_line: ReadLine = input, write: Write = print) -> Optional[Board]:
    """Prompts until a valid configuration is entered. Returns None on end of input."""
    write(f'Number of total cards is {CARD_TOTAL}')
    write('You will be entering the initial configuration of the cards (i.e., how many in each pile).')
    write(INSTRUCTIONS)
    while True:
        try:
            text = read_line('')
        except EOFError:
            return None
        try:
            return new_from_config(text)
        except InvalidConfigError:
            write(INVALID_CONFIG_MESSAGE)
            write(INSTRUCTIONS)


def play(
    board: Board,
    single_step: bool = False,
    read_line: ReadLine = input,
    write: Write = print,
    max_rounds: Optional[int] = None,
    debug: bool = False,
) -> int:
    """Plays the board to the end, printing every configuration. Returns the number of rounds."""
    write(f'Initial configuration: {board.render()}')
    rounds = 0
    for rec in play_rounds(board, max_rounds):
        rounds = rec.step
        write(f'[{rec.step}] Current configuration: {rec.config}')
        if debug:
            write(f'[debug] piles={len(rec.piles)} key={rec.key}')
        if single_step and not board.is_terminal():
            try:
                read_line(CONTINUE_PROMPT)
            except EOFError:
                # Nothing left to wait on; run the rest without pausing.
                single_step = False
    write('Done!')
    return rounds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Bulgarian Solitaire simulator')
    parser.add_argument('-u', '--user-config', action='store_true',
                        help='Prompt for the initial configuration instead of dealing at random')
    parser.add_argument('-s', '--single-step', action='store_true',
                        help='Wait for return after every round')
    parser.add_argument('--seed', type=int, default=os.getenv('SOLITAIRE_SEED'),
                        help='RNG seed for the random deal (env SOLITAIRE_SEED)')
    parser.add_argument('--max-rounds', type=int, default=os.getenv('SOLITAIRE_MAX_ROUNDS'),
                        help='Give up after this many rounds (env SOLITAIRE_MAX_ROUNDS)')
    return parser


def main(argv: Optional[List[str]] = None, read_line: ReadLine = input, write: Write = print) -> int:
    args = build_parser().parse_args(argv)
    debug = _env_flag('SOLITAIRE_DEBUG')

    if args.user_config:
        board = read_user_board(read_line, write)
        if board is None:
            write('error: no valid configuration entered')
            return 1
    else:
        board = new_random(seed=args.seed)
        if debug:
            write(f'[debug] random deal seed={args.seed}')

    try:
        play(board, args.single_step, read_line, write, args.max_rounds, debug)
    except NonConvergenceError as e:
        write(f'error: {e}')
        return 2
    return 0


if __name__ == '__main__':
    sys.exit(main())
