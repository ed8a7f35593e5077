from __future__ import annotations

# Number of piles in the terminal configuration.
FINAL_PILE_COUNT = 9

# Bulgarian solitaire only terminates when the card total is triangular:
# 1 + 2 + ... + FINAL_PILE_COUNT.
CARD_TOTAL = FINAL_PILE_COUNT * (FINAL_PILE_COUNT + 1) // 2

# Worst case number of rounds to reach the terminal configuration for a
# triangular total (k * (k - 1) for k final piles).
MAX_ROUNDS = FINAL_PILE_COUNT * (FINAL_PILE_COUNT - 1)

CONFIG_SEPARATOR = ' '
