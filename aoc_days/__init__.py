"""
aoc_days: Compute functions for each puzzle day.

Every day module exposes solve_1(text) and solve_2(text), both mapping
raw input text to the answer string shown in the table.

DAY_SPECS lists the days in display order.
"""

from aoc_core.catalog import DaySpec
from aoc_core.types import Correctness

from . import day_1, day_2, day_3, day_4, day_5, day_6

DAY_SPECS = (
    DaySpec(1, "Calorie Counting", day_1.solve_1, day_1.solve_2, Correctness.BOTH),
    DaySpec(2, "Rock Paper Scissors", day_2.solve_1, day_2.solve_2, Correctness.BOTH),
    DaySpec(3, "Rucksack Reorganization", day_3.solve_1, day_3.solve_2, Correctness.PART_ONE),
    DaySpec(4, "Camp Cleanup", day_4.solve_1, day_4.solve_2, Correctness.NONE),
    DaySpec(5, "Supply Stacks", day_5.solve_1, day_5.solve_2, Correctness.NONE),
    DaySpec(6, "Tuning Trouble", day_6.solve_1, day_6.solve_2, Correctness.NONE),
)

__all__ = ["DAY_SPECS"]
