"""
Day 2: Rock Paper Scissors.

Each line is "<challenger> <code>" with challenger in A/B/C.
- Part 1: code X/Y/Z is the player's throw
- Part 2: code X/Y/Z is the required outcome (lose/draw/win)

Throws are indexed 0=Rock, 1=Paper, 2=Scissors, so (player - challenger) % 3
is 0 for a draw, 1 for a player win and 2 for a loss.
"""

from typing import List, Tuple

import numpy as np

CHALLENGER_CODES = {"A": 0, "B": 1, "C": 2}
PLAYER_CODES = {"X": 0, "Y": 1, "Z": 2}

# Indexed by (player - challenger) % 3
OUTCOME_SCORES = np.array([3, 6, 0], dtype=np.int64)

# Indexed by throw
THROW_SCORES = np.array([1, 2, 3], dtype=np.int64)


def parse_input(text: str) -> Tuple[np.ndarray, np.ndarray]:
    """
    Parse rounds into (challenger, code) index arrays.

    Lines that do not hold two known codes are skipped.
    """
    challengers: List[int] = []
    codes: List[int] = []

    for line in text.splitlines():
        fields = line.split()
        if len(fields) != 2:
            continue
        c, p = fields
        if c not in CHALLENGER_CODES or p not in PLAYER_CODES:
            continue
        challengers.append(CHALLENGER_CODES[c])
        codes.append(PLAYER_CODES[p])

    return np.array(challengers, dtype=np.int64), np.array(codes, dtype=np.int64)


def score_rounds(challenger: np.ndarray, player: np.ndarray) -> int:
    """Total score for rounds given both throws."""
    outcome = (player - challenger) % 3
    return int((OUTCOME_SCORES[outcome] + THROW_SCORES[player]).sum())


# PART 1


def solve_1(text: str) -> str:
    challenger, player = parse_input(text)
    return str(score_rounds(challenger, player))


# PART 2


def solve_2(text: str) -> str:
    challenger, outcome_code = parse_input(text)
    # X (lose) -> challenger + 2, Y (draw) -> challenger, Z (win) -> challenger + 1
    player = (challenger + outcome_code + 2) % 3
    return str(score_rounds(challenger, player))
