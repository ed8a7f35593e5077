from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Set, Tuple, Union

from .board import Board
from .consts import CONFIG_SEPARATOR, MAX_ROUNDS
from .errors import NonConvergenceError
from .normalize import partition_key


@dataclass(frozen=True)
class RoundRecord:
    """Snapshot of a board after `step` rounds (step 0 is the initial configuration)."""
    step: int
    piles: Tuple[int, ...]

    @property
    def config(self) -> str:
        return CONFIG_SEPARATOR.join(str(size) for size in self.piles)

    @property
    def key(self) -> str:
        return partition_key(self.piles)


def snapshot(board: Board, step: int) -> RoundRecord:
    return RoundRecord(step=step, piles=tuple(board.piles))


def play_rounds(board: Board, max_rounds: Optional[int] = None) -> Iterator[RoundRecord]:
    """
    Advances the board until it is terminal, yielding a record after every round.
    The initial configuration is not yielded.

    Raises NonConvergenceError when more than max_rounds rounds would be needed
    (default MAX_ROUNDS) or when a partition repeats before the terminal one.
    """
    limit = MAX_ROUNDS if max_rounds is None else max_rounds
    seen: Set[str] = {partition_key(board.piles)}
    step = 0
    while not board.is_terminal():
        if step >= limit:
            raise NonConvergenceError(
                f'no terminal configuration after {step} rounds: {board.render()}', step)
        board.advance()
        step += 1
        key = partition_key(board.piles)
        if key in seen and not board.is_terminal():
            raise NonConvergenceError(f'configuration repeats after {step} rounds: {board.render()}', step)
        seen.add(key)
        yield snapshot(board, step)


def run_to_terminal(board: Board, max_rounds: Optional[int] = None) -> List[RoundRecord]:
    """Plays the board to the end and returns every configuration, starting with step 0."""
    history = [snapshot(board, 0)]
    history.extend(play_rounds(board, max_rounds))
    return history


def rounds_to_terminal(start: Union[Board, Iterable[int]], max_rounds: Optional[int] = None) -> int:
    """Counts the rounds needed to finish, leaving `start` untouched."""
    board = start.copy() if isinstance(start, Board) else Board(list(start))
    rounds = 0
    for _ in play_rounds(board, max_rounds):
        rounds += 1
    return rounds
