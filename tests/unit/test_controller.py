"""
Unit tests for aoc_app/controller.py.

Acceptance criteria:
- Arrow handlers move the cursor; unknown keys do nothing
- q sets should_quit and it never resets
- s solves the current day only; S solves every day in catalog order
- o hands the current day's URL to the opener; opener failures propagate
"""

from pathlib import Path

import pytest

from aoc_app.controller import App
from aoc_app.opener import UrlOpenError
from aoc_core.catalog import DaySpec, build_catalog
from aoc_core.config import AppConfig
from aoc_core.types import SolutionState
from tests.helpers import CountingSolver, RecordingSource


def make_app(source, opener, n_days=3, with_inputs=True):
    specs = [
        DaySpec(i, f"Puzzle {i}", CountingSolver(f"{i}a"), CountingSolver(f"{i}b"))
        for i in range(1, n_days + 1)
    ]
    config = AppConfig(inputs_dir=Path("in"))
    if with_inputs:
        for i in range(1, n_days + 1):
            for part in (1, 2):
                source.files[Path(f"in/day_{i}/input_{part}.txt")] = f"input {i}.{part}"
    catalog = build_catalog(config, specs, source)
    return App("Test", catalog, opener=opener)


class TestNavigation:
    def test_down_then_up(self, source, opener):
        app = make_app(source, opener)
        app.on_down()
        app.on_down()
        assert app.day_table.selected == 1
        app.on_up()
        assert app.day_table.selected == 0

    def test_up_from_none_selects_first(self, source, opener):
        app = make_app(source, opener)
        app.on_up()
        assert app.day_table.selected == 0

    def test_unknown_key_no_effect(self, source, opener):
        app = make_app(source, opener)
        app.on_down()
        for key in ["x", "Q", " ", "1", "\n"]:
            app.on_key(key)
        assert app.day_table.selected == 0
        assert app.should_quit is False
        assert source.reads == []
        assert opener.urls == []

    def test_tick_no_effect(self, source, opener):
        app = make_app(source, opener)
        app.on_tick()
        assert app.day_table.selected is None
        assert app.should_quit is False


class TestQuit:
    def test_quit_sets_flag(self, source, opener):
        app = make_app(source, opener)
        assert app.should_quit is False
        app.on_key("q")
        assert app.should_quit is True

    def test_quit_is_sticky(self, source, opener):
        app = make_app(source, opener)
        app.on_key("q")
        app.on_key("s")
        app.on_down()
        app.on_key("q")
        assert app.should_quit is True


class TestSolve:
    def test_solve_current_defaults_to_first(self, source, opener):
        app = make_app(source, opener)
        app.on_key("s")
        days = list(app.day_table.items)
        assert days[0].part_1.solution() == "1a"
        assert days[0].part_2.solution() == "1b"
        assert days[1].part_1.state is SolutionState.UNSOLVED

    def test_solve_current_follows_selection(self, source, opener):
        app = make_app(source, opener)
        app.on_up()
        app.on_up()
        app.on_key("s")
        days = list(app.day_table.items)
        assert days[2].part_1.is_solved and days[2].part_2.is_solved
        assert not days[0].part_1.is_solved

    def test_solve_all_in_catalog_order(self, source, opener):
        app = make_app(source, opener)
        app.on_key("S")
        assert source.reads == [
            Path(f"in/day_{i}/input_{p}.txt") for i in (1, 2, 3) for p in (1, 2)
        ]
        assert all(p.is_solved for d in app.day_table.items for p in d.parts())

    def test_solve_all_continues_past_missing_input(self, source, opener):
        app = make_app(source, opener)
        del source.files[Path("in/day_1/input_1.txt")]
        app.on_key("S")
        days = list(app.day_table.items)
        assert days[0].part_1.state is SolutionState.UNSOLVED
        assert days[0].part_2.is_solved
        assert days[2].part_2.is_solved

    def test_solve_on_empty_catalog(self, source, opener):
        app = make_app(source, opener, n_days=0)
        app.on_key("s")
        app.on_key("S")
        app.on_key("o")
        assert source.reads == []
        assert opener.urls == []


class TestOpen:
    def test_opens_current_url(self, source, opener):
        app = make_app(source, opener)
        app.on_down()
        app.on_down()
        app.on_key("o")
        assert opener.urls == ["https://adventofcode.com/2022/day/2"]

    def test_open_failure_propagates(self, source):
        class BrokenOpener:
            def open(self, url):
                raise UrlOpenError("no opener")

        app = make_app(source, BrokenOpener())
        with pytest.raises(UrlOpenError):
            app.on_key("o")

    def test_passes_through_enhanced_graphics(self, source, opener):
        catalog = build_catalog(AppConfig(), [])
        assert App("t", catalog, enhanced_graphics=True, opener=opener).enhanced_graphics is True
