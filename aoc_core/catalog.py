"""
The catalog: an immutable, ordered sequence of puzzle days.

Provides:
- DaySpec: static description of a day (id, title, solvers, correctness)
- Catalog: tuple-backed sequence of Day, fixed after construction
- build_catalog(config, specs, source): Catalog rooted at config.inputs_dir

The catalog is built once at startup and handed to the controller; there
is no module-level instance.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple, overload

from .config import AppConfig
from .day import Day
from .problem import InputSource, Problem, input_path
from .types import Correctness, SolverFn

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DaySpec:
    """What a day is, before any solution cache exists."""
    advent_day: int
    title: str
    solve_1: Optional[SolverFn]
    solve_2: Optional[SolverFn]
    correct: Correctness = Correctness.NONE


class Catalog:
    """Ordered days; supports len(), iteration and indexing only."""

    def __init__(self, days: Iterable[Day]) -> None:
        self._days: Tuple[Day, ...] = tuple(days)

    def __len__(self) -> int:
        return len(self._days)

    def __iter__(self) -> Iterator[Day]:
        return iter(self._days)

    @overload
    def __getitem__(self, index: int) -> Day: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Day, ...]: ...

    def __getitem__(self, index):
        return self._days[index]

    def __repr__(self) -> str:
        return f"Catalog({len(self._days)} days)"


def build_catalog(
    config: AppConfig,
    specs: Iterable[DaySpec],
    source: Optional[InputSource] = None,
) -> Catalog:
    """
    Build every Day described by `specs`, in order.

    Args:
        config: Supplies inputs_dir and the puzzle URL scheme
        specs: Day descriptions in display order
        source: Input source shared by all Problems (filesystem if None)

    Returns:
        Catalog with one Day per spec

    Raises:
        ValueError: If two specs share a day number
    """
    days = []
    seen: set[int] = set()

    for spec in specs:
        if spec.advent_day in seen:
            raise ValueError(f"Duplicate day {spec.advent_day} in catalog")
        seen.add(spec.advent_day)

        part_1 = Problem(input_path(config.inputs_dir, spec.advent_day, 1), spec.solve_1, source)
        part_2 = Problem(input_path(config.inputs_dir, spec.advent_day, 2), spec.solve_2, source)

        days.append(
            Day(
                spec.advent_day,
                spec.title,
                config.day_url,
                part_1,
                part_2,
                spec.correct,
            )
        )

    logger.debug(f"Built catalog with {len(days)} days from {config.inputs_dir}")
    return Catalog(days)
