from __future__ import annotations

# Facade module that re-exports the Bulgarian Solitaire core.
# Single-responsibility modules live under solitaire_core/*.

import sys

from solitaire_core.consts import CARD_TOTAL, FINAL_PILE_COUNT, MAX_ROUNDS
from solitaire_core.errors import (
    ErrorKind,
    SolitaireError,
    InvalidConfigError,
    BoardInvariantError,
    NonConvergenceError,
)
from solitaire_core.parse import (
    tokenize_config,
    check_piles,
    parse_config,
    is_valid_config_text,
)
from solitaire_core.deal import deal_random_piles
from solitaire_core.board import Board, Pile, new_from_config, new_random
from solitaire_core.normalize import canonical_piles, partition_key, terminal_key
from solitaire_core.rounds import (
    RoundRecord,
    snapshot,
    play_rounds,
    run_to_terminal,
    rounds_to_terminal,
)


def advance(board: Board) -> None:
    board.advance()


def is_terminal(board: Board) -> bool:
    return board.is_terminal()


def render(board: Board) -> str:
    return board.render()


def main() -> None:
    # CLI driver delegated to solitaire_core.cli
    from solitaire_core.cli import main as _main
    sys.exit(_main())


if __name__ == '__main__':
    main()
