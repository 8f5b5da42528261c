"""
aoc_core: Catalog model for the Advent puzzle browser.

Provides:
- types: SolverFn, SolutionState, Correctness
- problem: Problem (single-assignment solution cache), input sources
- day: Day (catalog entry)
- catalog: DaySpec, Catalog, build_catalog
- cursor: StatefulTable (circular selection)
- config: AppConfig and defaults
"""

from .catalog import Catalog, DaySpec, build_catalog
from .config import AppConfig
from .cursor import StatefulTable
from .day import Day
from .problem import FileInputSource, InputSource, Problem, input_path
from .types import Correctness, SolutionState, SolverFn

__all__ = [
    "AppConfig",
    "Catalog",
    "Correctness",
    "Day",
    "DaySpec",
    "FileInputSource",
    "InputSource",
    "Problem",
    "SolutionState",
    "SolverFn",
    "StatefulTable",
    "build_catalog",
    "input_path",
]
