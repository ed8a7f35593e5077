from __future__ import annotations

import re
from typing import Iterable, List

from .consts import CARD_TOTAL
from .errors import InvalidConfigError

_TOKEN_RE = re.compile(r'[0-9]+', re.ASCII)
_WHITESPACE = ' \t\r\n\f\v'
_SPLIT_RE = re.compile(r'[ \t\r\n\f\v]+')
# A pile never holds more cards than CARD_TOTAL, so never more digits than it.
_MAX_DIGITS = len(str(CARD_TOTAL))


def tokenize_config(text: str) -> List[str]:
    """Splits configuration text on runs of ASCII whitespace."""
    stripped = text.strip(_WHITESPACE)
    if not stripped:
        return []
    return _SPLIT_RE.split(stripped)


def check_piles(piles: Iterable[int]) -> List[int]:
    """Validates numeric pile sizes and returns them as a new list.

    Every pile must hold at least one card and the piles must add up to
    CARD_TOTAL. Raises InvalidConfigError naming the first rule broken.
    """
    out = list(piles)
    if not out:
        raise InvalidConfigError('configuration has no piles')
    for i, size in enumerate(out):
        if isinstance(size, bool) or not isinstance(size, int):
            raise InvalidConfigError(f'pile {i} is not an integer: {size!r}')
        if size <= 0:
            raise InvalidConfigError(f'pile {i} has {size} cards; each pile needs at least one')
    total = sum(out)
    if total != CARD_TOTAL:
        raise InvalidConfigError(f'piles hold {total} cards; expected {CARD_TOTAL}')
    return out


def parse_config(text: str) -> List[int]:
    """Parses a space-separated configuration string into pile sizes.

    Only base-10 literals made of ASCII digits are accepted: no signs, no
    decimal points, nothing trailing. Raises InvalidConfigError.
    """
    if not isinstance(text, str):
        raise InvalidConfigError(f'configuration must be text, got {type(text).__name__}')
    values: List[int] = []
    for tok in tokenize_config(text):
        if not _TOKEN_RE.fullmatch(tok):
            raise InvalidConfigError(f'not a non-negative integer: {tok!r}')
        digits = tok.lstrip('0') or '0'
        if len(digits) > _MAX_DIGITS:
            raise InvalidConfigError(f'pile of {len(digits)} digits holds more than {CARD_TOTAL} cards')
        values.append(int(digits))
    return check_piles(values)


def is_valid_config_text(text: str) -> bool:
    """True iff text parses into positive piles summing to CARD_TOTAL."""
    try:
        parse_config(text)
    except InvalidConfigError:
        return False
    return True
