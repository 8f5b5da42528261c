"""
Unit tests for aoc_core/problem.py.

Acceptance criteria:
- solve() reads and computes exactly once, then returns the cached value
- No solver -> always None, input source never touched
- Missing input -> None, cache stays UNSOLVED, a later read can still solve
- A second assignment trips the single-writer assertion
"""

from pathlib import Path

import pytest

from aoc_core.problem import FileInputSource, Problem, input_path
from aoc_core.types import SolutionState
from tests.helpers import CountingSolver, RecordingSource

PATH = Path("inputs/day_1/input_1.txt")


class TestInputPath:
    def test_shape(self):
        assert input_path(Path("inputs"), 3, 2) == Path("inputs/day_3/input_2.txt")

    def test_accepts_str_dir(self):
        assert input_path("base", 12, 1) == Path("base/day_12/input_1.txt")


class TestFileInputSource:
    def test_reads_existing_file(self, tmp_path):
        f = tmp_path / "input_1.txt"
        f.write_text("hello\n", encoding="utf-8")
        assert FileInputSource().read(f) == "hello\n"

    def test_missing_file_is_none(self, tmp_path):
        assert FileInputSource().read(tmp_path / "nope.txt") is None

    def test_directory_is_none(self, tmp_path):
        assert FileInputSource().read(tmp_path) is None


class TestSolveOnce:
    def test_first_solve_computes(self):
        source = RecordingSource({PATH: "data"})
        solver = CountingSolver("answer")
        problem = Problem(PATH, solver, source)

        assert problem.state is SolutionState.UNSOLVED
        assert problem.solve() == "answer"
        assert problem.state is SolutionState.SOLVED
        assert problem.is_solved
        assert solver.calls == ["data"]

    def test_idempotent(self):
        """Second solve returns the same value with no read and no compute."""
        source = RecordingSource({PATH: "data"})
        solver = CountingSolver("answer")
        problem = Problem(PATH, solver, source)

        first = problem.solve()
        second = problem.solve()
        third = problem.solve()

        assert first == second == third == "answer"
        assert len(source.reads) == 1
        assert len(solver.calls) == 1

    def test_value_survives_input_change(self):
        source = RecordingSource({PATH: "data"})
        problem = Problem(PATH, lambda text: text.upper(), source)

        assert problem.solve() == "DATA"
        source.files[PATH] = "other"
        assert problem.solve() == "DATA"

    def test_solution_does_not_trigger_solve(self):
        source = RecordingSource({PATH: "data"})
        solver = CountingSolver()
        problem = Problem(PATH, solver, source)

        assert problem.solution() is None
        assert source.reads == []
        assert solver.calls == []

        problem.solve()
        assert problem.solution() == "42"


class TestNoCompute:
    def test_always_none(self):
        source = RecordingSource({PATH: "data"})
        problem = Problem(PATH, None, source)

        assert problem.state is SolutionState.NO_COMPUTE
        assert problem.solve() is None
        assert problem.solve() is None
        assert problem.state is SolutionState.NO_COMPUTE

    def test_never_reads(self):
        source = RecordingSource({PATH: "data"})
        Problem(PATH, None, source).solve()
        assert source.reads == []


class TestMissingInput:
    def test_missing_returns_none_and_stays_unsolved(self):
        source = RecordingSource()
        solver = CountingSolver()
        problem = Problem(PATH, solver, source)

        assert problem.solve() is None
        assert problem.state is SolutionState.UNSOLVED
        assert solver.calls == []

    def test_retry_after_file_appears(self):
        source = RecordingSource()
        solver = CountingSolver("late")
        problem = Problem(PATH, solver, source)

        assert problem.solve() is None
        source.files[PATH] = "now here"
        assert problem.solve() == "late"
        assert solver.calls == ["now here"]
        assert len(source.reads) == 2

    def test_default_source_is_filesystem(self, tmp_path):
        path = input_path(tmp_path, 1, 1)
        problem = Problem(path, lambda text: text.strip())

        assert problem.solve() is None

        path.parent.mkdir(parents=True)
        path.write_text(" 7 \n", encoding="utf-8")
        assert problem.solve() == "7"


class TestSolverErrors:
    def test_solver_exception_propagates_and_leaves_unsolved(self):
        def broken(text):
            raise ValueError("Invalid input")

        problem = Problem(PATH, broken, RecordingSource({PATH: "x"}))

        with pytest.raises(ValueError, match="Invalid input"):
            problem.solve()
        assert problem.state is SolutionState.UNSOLVED


class TestSingleWriter:
    def test_double_assignment_asserts(self):
        problem = Problem(PATH, CountingSolver(), RecordingSource({PATH: "x"}))
        problem.solve()

        with pytest.raises(AssertionError, match="already assigned"):
            problem._assign("overwrite")
        assert problem.solution() == "42"
