"""
Day 1: Calorie Counting.

Input is blocks of integers separated by blank lines, one block per elf.
- Part 1: largest block total
- Part 2: sum of the three largest block totals
"""

from itertools import groupby
from typing import List

import numpy as np


def _line_value(line: str) -> int:
    # Unparseable lines count as zero
    try:
        return int(line)
    except ValueError:
        return 0


def sorted_sums(text: str) -> np.ndarray:
    """Block totals in ascending order."""
    sums: List[int] = []
    for non_empty, group in groupby(text.splitlines(), key=bool):
        if non_empty:
            sums.append(sum(_line_value(l.strip()) for l in group))

    return np.sort(np.array(sums, dtype=np.int64))


# PART 1


def solve_1(text: str) -> str:
    sums = sorted_sums(text)
    if sums.size == 0:
        return "0"
    return str(int(sums[-1]))


# PART 2


def solve_2(text: str) -> str:
    sums = sorted_sums(text)
    return str(int(sums[-3:].sum()))
