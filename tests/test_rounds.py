import random
import unittest
from unittest.mock import patch

from game import (
    Board,
    ErrorKind,
    MAX_ROUNDS,
    NonConvergenceError,
    RoundRecord,
    canonical_piles,
    new_from_config,
    new_random,
    partition_key,
    play_rounds,
    rounds_to_terminal,
    run_to_terminal,
    terminal_key,
)


class TestPartitionKeys(unittest.TestCase):
    def test_given_reordered_piles_when_keying_then_same_key(self):
        self.assertEqual(partition_key([1, 44]), partition_key([44, 1]))
        self.assertEqual(partition_key([1, 44]), '44 1')
        self.assertEqual(canonical_piles([3, 9, 1]), (9, 3, 1))
        self.assertEqual(terminal_key(), '9 8 7 6 5 4 3 2 1')

    def test_given_record_when_reading_then_config_and_key_rendered(self):
        rec = RoundRecord(step=2, piles=(1, 44))
        self.assertEqual(rec.config, '1 44')
        self.assertEqual(rec.key, '44 1')


class TestPlayRounds(unittest.TestCase):
    def test_given_single_pile_when_playing_then_steps_and_terminal_end(self):
        board = new_from_config('45')
        records = list(play_rounds(board))
        self.assertEqual(records[0], RoundRecord(step=1, piles=(44, 1)))
        self.assertEqual([r.step for r in records], list(range(1, len(records) + 1)))
        self.assertTrue(board.is_terminal())
        self.assertEqual(records[-1].key, terminal_key())
        self.assertEqual(records[-1].piles, tuple(board.piles))

    def test_given_terminal_board_when_playing_then_no_rounds(self):
        board = new_from_config('3 1 2 9 8 7 6 5 4')
        self.assertEqual(list(play_rounds(board)), [])
        self.assertEqual(rounds_to_terminal(board), 0)

    def test_given_board_when_run_to_terminal_then_history_starts_at_zero(self):
        board = new_from_config('40 5')
        history = run_to_terminal(board)
        self.assertEqual(history[0], RoundRecord(step=0, piles=(40, 5)))
        self.assertEqual(history[1].piles, (39, 4, 2))
        self.assertEqual(len(history) - 1, rounds_to_terminal(new_from_config('40 5')))

    def test_given_board_when_counting_rounds_then_caller_board_untouched(self):
        board = new_from_config('45')
        n = rounds_to_terminal(board)
        self.assertGreater(n, 0)
        self.assertEqual(board.piles, [45])
        self.assertEqual(rounds_to_terminal([45]), n)

    def test_given_random_starts_when_playing_then_terminal_within_bound(self):
        rng = random.Random(2024)
        for _ in range(500):
            board = new_random(rng=rng)
            n = rounds_to_terminal(board)
            self.assertLessEqual(n, MAX_ROUNDS)

    def test_given_extreme_starts_when_playing_then_terminal_within_bound(self):
        for piles in ([45], [1] * 45, [5] * 9, [15, 15, 15], [2] * 22 + [1]):
            board = Board(list(piles))
            list(play_rounds(board))
            self.assertTrue(board.is_terminal(), piles)

    def test_given_small_bound_when_playing_then_non_convergence_error(self):
        with self.assertRaises(NonConvergenceError) as ctx:
            rounds_to_terminal([45], max_rounds=1)
        self.assertEqual(ctx.exception.kind, ErrorKind.NON_CONVERGENT)
        self.assertEqual(ctx.exception.rounds, 1)

    def test_given_stuck_board_when_playing_then_cycle_detected(self):
        board = new_from_config('45')
        with patch.object(Board, 'advance', lambda self: None):
            with self.assertRaises(NonConvergenceError) as ctx:
                list(play_rounds(board))
        self.assertEqual(ctx.exception.rounds, 1)
        self.assertIn('repeats', str(ctx.exception))


if __name__ == '__main__':
    unittest.main(verbosity=2)
