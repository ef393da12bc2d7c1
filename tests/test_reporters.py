"""Tests for solution reporters."""

from __future__ import annotations

import io
import json

import pytest

from jugsolver import solve
from jugsolver.reporting import (
    ConsoleReporter,
    JSONReporter,
    MarkdownReporter,
    Reporter,
    TableReporter,
    get_reporter,
)


@pytest.fixture
def solved():
    return solve(2, 10, 4)


@pytest.fixture
def unsolvable():
    return solve(2, 6, 5)


class TestProtocol:
    @pytest.mark.parametrize(
        "reporter",
        [ConsoleReporter(color=False), JSONReporter(), MarkdownReporter(), TableReporter(color=False)],
    )
    def test_implements_reporter(self, reporter):
        assert isinstance(reporter, Reporter)


class TestConsoleReporter:
    def test_solved(self, solved):
        output = ConsoleReporter(color=False).report(solved)
        assert "SOLVED" in output
        assert "X=2L, Y=10L, target=4L" in output
        assert "4 operations" in output
        assert "Transfer from jug X to jug Y" in output
        assert "[X=0/2, Y=4/10]" in output
        assert "\033[" not in output

    def test_not_possible(self, unsolvable):
        output = ConsoleReporter(color=False).report(unsolvable)
        assert "NOT POSSIBLE" in output
        assert unsolvable.message in output

    def test_color(self, solved):
        output = ConsoleReporter(color=True).report(solved)
        assert ConsoleReporter.GREEN in output

    def test_print_report(self, solved):
        buffer = io.StringIO()
        ConsoleReporter(file=buffer, color=False).print_report(solved)
        assert "SOLVED" in buffer.getvalue()


class TestJSONReporter:
    def test_solved(self, solved):
        data = json.loads(JSONReporter().report(solved))
        assert data["possible"] is True
        assert data["steps"][0] == {
            "jugX": 0,
            "jugY": 0,
            "action": "Initial state - both jugs empty",
            "stepNumber": 0,
        }
        assert data["steps"][-1]["jugY"] == 4
        assert "message" not in data

    def test_not_possible(self, unsolvable):
        data = json.loads(JSONReporter().report(unsolvable))
        assert data["possible"] is False
        assert data["message"].startswith("No solution possible")
        assert data["outcome"] == "not_multiple_of_gcd"

    def test_compact(self, solved):
        assert "\n" not in JSONReporter(indent=None).report(solved)


class TestMarkdownReporter:
    def test_solved(self, solved):
        output = MarkdownReporter().report(solved)
        assert output.startswith("# Water Jug Solution")
        assert "| Jug X capacity | 2L |" in output
        assert "| 1 | Fill jug X (2L capacity) | 2 | 0 |" in output
        assert "| 4 | Transfer from jug X to jug Y | 0 | 4 |" in output

    def test_not_possible(self, unsolvable):
        output = MarkdownReporter().report(unsolvable)
        assert "NOT POSSIBLE" in output
        assert "## Steps" not in output


class TestTableReporter:
    def test_solved(self, solved):
        output = TableReporter(color=False).report(solved)
        assert "Fill jug X (2L capacity)" in output
        assert "4 operations" in output

    def test_build_table_rows(self, solved):
        table = TableReporter().build_table(solved)
        assert table.row_count == len(solved.steps)

    def test_not_possible(self, unsolvable):
        output = TableReporter(color=False).report(unsolvable)
        assert "Not possible" in output


class TestGetReporter:
    @pytest.mark.parametrize(
        "name, cls",
        [
            ("console", ConsoleReporter),
            ("json", JSONReporter),
            ("markdown", MarkdownReporter),
            ("table", TableReporter),
        ],
    )
    def test_known(self, name, cls):
        assert isinstance(get_reporter(name), cls)

    def test_color_passed_through(self):
        assert get_reporter("console", color=False).color is False

    def test_unknown(self):
        with pytest.raises(ValueError):
            get_reporter("xml")
