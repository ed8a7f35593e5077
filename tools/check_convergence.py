"""Exhaustively checks that every partition of CARD_TOTAL reaches the terminal
configuration within MAX_ROUNDS rounds.

Pile order never changes which partition comes next, so one start per
partition covers every configuration. Prints the slowest starts.
"""
import argparse
import sys
import time
from typing import Iterator, List, Tuple
sys.path.append('.')
import game  # type: ignore


def iter_partitions(total: int, largest: int) -> Iterator[List[int]]:
    """Yields partitions of total into parts <= largest, parts in non-increasing order."""
    if total == 0:
        yield []
        return
    for first in range(min(total, largest), 0, -1):
        for rest in iter_partitions(total - first, first):
            yield [first] + rest


def main():
    parser = argparse.ArgumentParser(description='Check convergence for every starting partition')
    parser.add_argument('--top', type=int, default=5, help='How many of the slowest starts to show')
    args = parser.parse_args()

    t0 = time.time()
    worst: List[Tuple[int, str]] = []
    histogram = {}
    checked = 0
    for piles in iter_partitions(game.CARD_TOTAL, game.CARD_TOTAL):
        rounds = game.rounds_to_terminal(piles)
        histogram[rounds] = histogram.get(rounds, 0) + 1
        worst.append((rounds, game.partition_key(piles)))
        worst.sort(reverse=True)
        del worst[args.top:]
        checked += 1
    took = time.time() - t0
    print(f"Checked {checked} partitions of {game.CARD_TOTAL} in {took:.1f}s")
    for rounds in sorted(histogram):
        print(f"{rounds:3d} rounds: {histogram[rounds]}")
    print('Slowest starts:')
    for rounds, key in worst:
        print(f"  {rounds:3d}  {key}")
    if worst and worst[0][0] > game.MAX_ROUNDS:
        print(f"error: exceeded bound {game.MAX_ROUNDS}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
