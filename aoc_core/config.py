"""
Configuration for the catalog browser.

Module constants hold the defaults; AppConfig is the immutable object
built once at startup (from CLI flags) and passed to build_catalog() and
the controller.
"""

from dataclasses import dataclass
from pathlib import Path

APP_TITLE = "Advent of Code 2022"
PUZZLE_YEAR = 2022
BASE_URL = "https://adventofcode.com"
DEFAULT_INPUTS_DIR = Path("./inputs")
DEFAULT_TICK_RATE = 0.25  # seconds


@dataclass(frozen=True)
class AppConfig:
    """Startup settings; never mutated after construction."""
    title: str = APP_TITLE
    year: int = PUZZLE_YEAR
    base_url: str = BASE_URL
    inputs_dir: Path = DEFAULT_INPUTS_DIR
    tick_rate: float = DEFAULT_TICK_RATE
    enhanced_graphics: bool = False

    def __post_init__(self):
        if self.tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {self.tick_rate}")
        object.__setattr__(self, "inputs_dir", Path(self.inputs_dir))

    def day_url(self, advent_day: int) -> str:
        return f"{self.base_url.rstrip('/')}/{self.year}/day/{advent_day}"
