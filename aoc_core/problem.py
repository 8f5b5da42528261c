"""
Lazily-evaluated, single-assignment solution cache.

Provides:
- input_path(inputs_dir, advent_day, part): <inputs_dir>/day_<N>/input_<P>.txt
- InputSource: read(path) -> text or None
- FileInputSource: InputSource backed by the local filesystem
- Problem: one part of one day (solver + input path + result slot)

A Problem reads its input and runs its solver at most once. A missing
input is not an error: solve() returns None and the cache stays UNSOLVED,
so a later solve() retries after the file appears.
"""

import logging
from pathlib import Path
from typing import Optional, Protocol

from .types import SolutionState, SolverFn

logger = logging.getLogger(__name__)


def input_path(inputs_dir: Path, advent_day: int, part: int) -> Path:
    """
    Path of the puzzle input for one part of one day.

    Examples:
        >>> input_path(Path("inputs"), 3, 2).as_posix()
        'inputs/day_3/input_2.txt'
    """
    return Path(inputs_dir) / f"day_{advent_day}" / f"input_{part}.txt"


class InputSource(Protocol):
    """Yields raw input text for a path, or None when it is absent."""

    def read(self, path: Path) -> Optional[str]:
        ...


class FileInputSource:
    """Reads puzzle inputs from disk."""

    def read(self, path: Path) -> Optional[str]:
        try:
            return Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            # Missing, unreadable or a directory: all mean "no input yet"
            logger.debug(f"No input at {path}: {exc}")
            return None


class Problem:
    """
    Solution cache for one part of one day.

    Args:
        path: Input file read on the first successful solve
        solver: Compute function, or None when the part is not implemented
        source: Input source (defaults to the filesystem)

    Acceptance:
        - Once SOLVED, solve() returns the same value with no read or compute
        - NO_COMPUTE is permanent and never touches the input source
        - A failed read leaves the cache UNSOLVED
    """

    def __init__(
        self,
        path: Path,
        solver: Optional[SolverFn],
        source: Optional[InputSource] = None,
    ) -> None:
        self.path = Path(path)
        self._solver = solver
        self._source: InputSource = source if source is not None else FileInputSource()
        self._value: Optional[str] = None
        self._state = (
            SolutionState.UNSOLVED if solver is not None else SolutionState.NO_COMPUTE
        )

    @property
    def state(self) -> SolutionState:
        return self._state

    @property
    def is_solved(self) -> bool:
        return self._state is SolutionState.SOLVED

    def solution(self) -> Optional[str]:
        """Cached value without triggering a solve (used by rendering)."""
        return self._value

    def solve(self) -> Optional[str]:
        """
        Return the solution, computing it on first successful read.

        Returns:
            The solver's output, or None when there is no solver or no input.
        """
        if self._state is SolutionState.SOLVED:
            return self._value

        if self._state is SolutionState.NO_COMPUTE:
            return None

        text = self._source.read(self.path)
        if text is None:
            logger.info(f"Input missing for {self.path}, leaving unsolved")
            return None

        value = self._solver(text)
        self._assign(value)
        logger.info(f"Solved {self.path}: {value}")
        return value

    def _assign(self, value: str) -> None:
        # Single writer: a second assignment is a defect, not a user error
        assert self._state is not SolutionState.SOLVED, \
            f"Solution for {self.path} already assigned"
        self._value = value
        self._state = SolutionState.SOLVED

    def __repr__(self) -> str:
        return f"Problem(path={self.path.as_posix()!r}, state={self._state.value})"
