"""
Bulgarian Solitaire core Python package.

This package contains the board model and pure-logic helpers used by the
command-line driver in cli.py and the root game.py facade.
Modules:
- consts.py: FINAL_PILE_COUNT, CARD_TOTAL, MAX_ROUNDS
- errors.py: ErrorKind and the exception hierarchy
- parse.py: configuration text validation and parsing
- deal.py: random initial piles
- board.py: Board
- normalize.py: order-independent partition keys
- rounds.py: RoundRecord and advance-until-terminal helpers
"""
