from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INVALID_CONFIG = 'invalid_config'
    INVARIANT_BROKEN = 'invariant_broken'
    NON_CONVERGENT = 'non_convergent'


class SolitaireError(Exception):
    """Base class for every error raised by solitaire_core."""
    kind: ErrorKind

    def __init__(self, message: str, kind: ErrorKind) -> None:
        super().__init__(message)
        self.kind = kind


class InvalidConfigError(SolitaireError, ValueError):
    """Configuration text or pile list that is not a valid board."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorKind.INVALID_CONFIG)


class BoardInvariantError(SolitaireError, RuntimeError):
    """A board broke its own invariants. Always a defect, never user error."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorKind.INVARIANT_BROKEN)


class NonConvergenceError(SolitaireError, RuntimeError):
    def __init__(self, message: str, rounds: int) -> None:
        super().__init__(message, ErrorKind.NON_CONVERGENT)
        self.rounds = rounds
