"""Reports how random deals spread over pile counts and round counts."""
import argparse
import random
import sys
from collections import Counter
sys.path.append('.')
import game  # type: ignore


def main():
    parser = argparse.ArgumentParser(description='Sample random deals')
    parser.add_argument('--samples', type=int, default=10000)
    parser.add_argument('--seed', type=int, default=0)
    args = parser.parse_args()

    rng = random.Random(args.seed)
    pile_counts = Counter()
    round_counts = Counter()
    partitions = Counter()
    for _ in range(args.samples):
        board = game.new_random(rng=rng)
        pile_counts[board.pile_count] += 1
        partitions[game.partition_key(board.piles)] += 1
        round_counts[game.rounds_to_terminal(board)] += 1

    print(f"samples={args.samples} distinct partitions={len(partitions)}")
    print('piles  deals')
    for count in sorted(pile_counts):
        print(f"{count:5d}  {pile_counts[count]}")
    print('rounds deals')
    for rounds in sorted(round_counts):
        print(f"{rounds:6d} {round_counts[rounds]}")
    print('most common partitions:')
    for key, n in partitions.most_common(5):
        print(f"  {n:6d}  {key}")


if __name__ == '__main__':
    main()
