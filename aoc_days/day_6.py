"""
Day 6: Tuning Trouble.

Find the number of characters read when the last `marker_len` characters
are all distinct.
- Part 1: start-of-packet marker (4)
- Part 2: start-of-message marker (14)

No marker yields an empty string.
"""

from typing import Optional


def find_marker_index(data: str, marker_len: int) -> Optional[int]:
    for end in range(marker_len, len(data) + 1):
        if len(set(data[end - marker_len:end])) == marker_len:
            return end
    return None


def _solve(text: str, marker_len: int) -> str:
    index = find_marker_index(text.strip(), marker_len)
    return "" if index is None else str(index)


# PART 1


def solve_1(text: str) -> str:
    return _solve(text, 4)


# PART 2


def solve_2(text: str) -> str:
    return _solve(text, 14)
