"""
Catalog entry: one puzzle day with two solution caches.

Everything beyond the two Problems is read-only display data.
"""

from typing import Callable, Dict, Tuple

from .problem import Problem
from .types import Correctness

# No fallback entry: a new Correctness member must be added here explicitly
STARS: Dict[Correctness, str] = {
    Correctness.NONE: "",
    Correctness.PART_ONE: "*",
    Correctness.BOTH: "**",
}


class Day:
    """
    One puzzle day.

    Args:
        advent_day: Day number (>= 1)
        title: Puzzle title
        url_for: Maps a day number to its puzzle page
        part_1: Solution cache for part 1
        part_2: Solution cache for part 2
        correct: Which answers have been accepted
    """

    def __init__(
        self,
        advent_day: int,
        title: str,
        url_for: Callable[[int], str],
        part_1: Problem,
        part_2: Problem,
        correct: Correctness = Correctness.NONE,
    ) -> None:
        if advent_day < 1:
            raise ValueError(f"advent_day must be positive, got {advent_day}")
        self._advent_day = advent_day
        self._title = title
        self._url_for = url_for
        self.part_1 = part_1
        self.part_2 = part_2
        self.correct = correct

    @property
    def advent_day(self) -> int:
        return self._advent_day

    @property
    def title(self) -> str:
        return self._title

    def label(self) -> str:
        return f"Day {self._advent_day} - {self._title}"

    def url(self) -> str:
        return self._url_for(self._advent_day)

    def stars(self) -> str:
        return STARS[self.correct]

    def parts(self) -> Tuple[Problem, Problem]:
        return (self.part_1, self.part_2)

    def __repr__(self) -> str:
        return f"Day({self._advent_day}, {self._title!r})"
