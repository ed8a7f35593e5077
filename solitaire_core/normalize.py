from __future__ import annotations

from typing import Iterable, Tuple

from .consts import CONFIG_SEPARATOR, FINAL_PILE_COUNT


def canonical_piles(piles: Iterable[int]) -> Tuple[int, ...]:
    """Pile sizes sorted largest first; equal for any reordering of the same piles."""
    return tuple(sorted(piles, reverse=True))


def partition_key(piles: Iterable[int]) -> str:
    """Compact order-independent key for a configuration, e.g. '44 1'.
    Two configurations with the same key evolve identically up to pile order."""
    return CONFIG_SEPARATOR.join(str(size) for size in canonical_piles(piles))


def terminal_key() -> str:
    return partition_key(range(1, FINAL_PILE_COUNT + 1))
