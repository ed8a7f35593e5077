from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional

from .consts import CARD_TOTAL, CONFIG_SEPARATOR, FINAL_PILE_COUNT
from .deal import deal_random_piles
from .errors import BoardInvariantError
from .parse import check_piles, parse_config

Pile = int  # number of cards in one non-empty pile


@dataclass
class Board:
    """A Bulgarian Solitaire board: the ordered card counts of the current piles.

    Piles are kept oldest first with the most recently created pile last.
    The board is mutated in place by advance(); every other method is read only.
    """
    piles: List[Pile]

    def __post_init__(self) -> None:
        self.piles = check_piles(self.piles)

    @classmethod
    def from_config(cls, text: str) -> 'Board':
        """Builds a board from configuration text. Raises InvalidConfigError."""
        return cls(parse_config(text))

    @classmethod
    def random(cls, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> 'Board':
        """Builds a board from a random deal (see deal_random_piles)."""
        return cls(deal_random_piles(seed=seed, rng=rng))

    @property
    def pile_count(self) -> int:
        return len(self.piles)

    def copy(self) -> 'Board':
        return Board(list(self.piles))

    def advance(self) -> None:
        """Plays one round.

        One card is taken from every pile and the cards taken form a new pile
        at the end. Piles left empty are dropped; the others keep their
        relative order.
        """
        new_pile = len(self.piles)
        self.piles[:] = [size - 1 for size in self.piles if size > 1]
        self.piles.append(new_pile)
        self._check_invariants()

    def is_terminal(self) -> bool:
        """True iff there are FINAL_PILE_COUNT piles of sizes 1..FINAL_PILE_COUNT in any order."""
        if self.pile_count != FINAL_PILE_COUNT:
            return False
        seen = [False] * FINAL_PILE_COUNT
        for size in self.piles:
            if size > FINAL_PILE_COUNT:
                return False
            if seen[size - 1]:
                return False
            seen[size - 1] = True
        return all(seen)

    def render(self) -> str:
        """Pile sizes separated by single spaces, e.g. '44 1'."""
        return CONFIG_SEPARATOR.join(str(size) for size in self.piles)

    def __str__(self) -> str:
        return self.render()

    def _check_invariants(self) -> None:
        count = len(self.piles)
        if not 0 < count <= CARD_TOTAL:
            raise BoardInvariantError(f'pile count {count} out of range (1..{CARD_TOTAL})')
        if any(size <= 0 for size in self.piles):
            raise BoardInvariantError(f'empty pile left on board: {self.render()}')
        total = sum(self.piles)
        if total != CARD_TOTAL:
            raise BoardInvariantError(f'board holds {total} cards; expected {CARD_TOTAL}')


def new_from_config(text: str) -> Board:
    return Board.from_config(text)


def new_random(seed: Optional[int] = None, rng: Optional[random.Random] = None) -> Board:
    return Board.random(seed=seed, rng=rng)
