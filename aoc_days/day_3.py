"""
Day 3: Rucksack Reorganization.

Each non-empty line is a rucksack; its two halves are the compartments.
- Part 1: sum of priorities of the item found in both compartments
- Part 2: sum of priorities of the badge shared by each group of three

Priority: a-z -> 1-26, A-Z -> 27-52.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence


@dataclass(frozen=True)
class Sack:
    contents: str

    @property
    def compartments(self) -> tuple[str, str]:
        half = len(self.contents) // 2
        return self.contents[:half], self.contents[half:]


def parse_input(text: str) -> List[Sack]:
    return [Sack(line.strip()) for line in text.splitlines() if line.strip()]


def first_common_char(strings: Sequence[str]) -> Optional[str]:
    """
    First character (in reading order) present in every string.

    Returns None for no strings or no shared character.
    """
    if not strings:
        return None

    counts: dict[str, int] = {}
    for s in strings:
        for c in dict.fromkeys(s):
            counts[c] = counts.get(c, 0) + 1
            if counts[c] == len(strings):
                return c

    return None


def priority(item: str) -> int:
    if item.islower():
        return ord(item) - ord("a") + 1
    return ord(item) - ord("A") + 27


def _priority_sum(items: Iterable[Optional[str]]) -> int:
    return sum(priority(c) for c in items if c is not None)


# PART 1


def solve_1(text: str) -> str:
    sacks = parse_input(text)
    return str(_priority_sum(first_common_char(s.compartments) for s in sacks))


# PART 2


def solve_2(text: str) -> str:
    sacks = parse_input(text)
    groups = [sacks[i:i + 3] for i in range(0, len(sacks), 3)]
    return str(_priority_sum(first_common_char([s.contents for s in g]) for g in groups))
