from __future__ import annotations

import random
from typing import List, Optional

from .consts import CARD_TOTAL


def deal_random_piles(seed: Optional[int] = None, rng: Optional[random.Random] = None) -> List[int]:
    """Deals CARD_TOTAL cards into random piles.

    Each pile size is drawn uniformly from [1, remaining] and subtracted
    from the remaining cards until none are left. The result is skewed
    towards few large piles; that shape is part of the game's behaviour.
    """
    if rng is None:
        rng = random.Random(seed)
    piles: List[int] = []
    remaining = CARD_TOTAL
    while remaining > 0:
        size = rng.randint(1, remaining)
        piles.append(size)
        remaining -= size
    return piles
