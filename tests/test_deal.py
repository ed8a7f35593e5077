import random
import unittest
from collections import Counter

from game import Board, CARD_TOTAL, deal_random_piles, new_random


class TestRandomDeal(unittest.TestCase):
    def test_given_many_random_boards_when_checking_invariants_then_all_valid(self):
        rng = random.Random(12345)
        for _ in range(1000):
            board = new_random(rng=rng)
            self.assertGreater(board.pile_count, 0)
            self.assertLessEqual(board.pile_count, CARD_TOTAL)
            self.assertTrue(all(size > 0 for size in board.piles))
            self.assertEqual(sum(board.piles), CARD_TOTAL)

    def test_given_same_seed_when_dealing_then_same_piles(self):
        self.assertEqual(deal_random_piles(seed=7), deal_random_piles(seed=7))
        self.assertEqual(Board.random(seed=7), new_random(seed=7))

    def test_given_rng_when_dealing_then_draws_from_remaining_cards(self):
        rng = random.Random(99)
        piles = deal_random_piles(rng=rng)
        # Replay the same draws: each size comes from [1, remaining].
        replay = random.Random(99)
        remaining = CARD_TOTAL
        for size in piles:
            self.assertEqual(size, replay.randint(1, remaining))
            remaining -= size
        self.assertEqual(remaining, 0)

    def test_given_many_deals_when_counting_piles_then_few_piles_dominate(self):
        rng = random.Random(0)
        counts = Counter(len(deal_random_piles(rng=rng)) for _ in range(2000))
        # Draw-from-remaining favours few large piles over many small ones.
        few = sum(n for k, n in counts.items() if k <= 6)
        many = sum(n for k, n in counts.items() if k >= 12)
        self.assertGreater(few, many)
        self.assertNotIn(CARD_TOTAL + 1, counts)


if __name__ == '__main__':
    unittest.main(verbosity=2)
