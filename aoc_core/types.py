"""
Core type definitions for the Advent catalog.

Provides:
- SolverFn: compute function signature (raw input text -> display string)
- SolutionState: tri-state tag of a solution cache
- Correctness: how many parts of a day have been accepted as correct
"""

from enum import Enum
from typing import Callable

# Compute function for one part of one day
SolverFn = Callable[[str], str]


class SolutionState(Enum):
    """
    Lifecycle of a single solution slot.

    Transitions happen at most once and never revert:
    - UNSOLVED -> SOLVED after a successful read + compute
    - NO_COMPUTE is fixed at construction when no solver is configured
    """
    UNSOLVED = "unsolved"
    SOLVED = "solved"
    NO_COMPUTE = "no_compute"


class Correctness(Enum):
    """Accepted answers for a day (display only)."""
    NONE = 0
    PART_ONE = 1
    BOTH = 2
