"""
Day 4: Camp Cleanup.

Each line is a pair of section ranges "a-b,c-d".
- Part 1: pairs where one range fully contains the other
- Part 2: pairs whose ranges overlap at all
"""

import re

import numpy as np

PAIR_RE = re.compile(r"^\s*(\d+)-(\d+),(\d+)-(\d+)\s*$")


def parse_input(text: str) -> np.ndarray:
    """
    Parse assignment pairs into an N×4 array of [lo1, hi1, lo2, hi2].

    Malformed lines are skipped.
    """
    rows = [
        [int(g) for g in m.groups()]
        for m in (PAIR_RE.match(line) for line in text.splitlines())
        if m is not None
    ]
    return np.array(rows, dtype=np.int64).reshape(-1, 4)


def containing_pairs(pairs: np.ndarray) -> np.ndarray:
    lo1, hi1, lo2, hi2 = pairs.T
    first_holds_second = (lo1 <= lo2) & (hi1 >= hi2)
    second_holds_first = (lo2 <= lo1) & (hi2 >= hi1)
    return first_holds_second | second_holds_first


def overlapping_pairs(pairs: np.ndarray) -> np.ndarray:
    lo1, hi1, lo2, hi2 = pairs.T
    return (lo1 <= hi2) & (lo2 <= hi1)


# PART 1


def solve_1(text: str) -> str:
    return str(int(containing_pairs(parse_input(text)).sum()))


# PART 2


def solve_2(text: str) -> str:
    return str(int(overlapping_pairs(parse_input(text)).sum()))
