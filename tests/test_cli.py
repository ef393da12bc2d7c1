"""Tests for the jugsolver command line."""

from __future__ import annotations

import json

from click.testing import CliRunner

from jugsolver.cli import cli


def run(*args: str):
    return CliRunner().invoke(cli, list(args))


class TestSolveCommand:
    def test_solvable_exits_zero(self):
        result = run("solve", "2", "10", "4", "--no-color")
        assert result.exit_code == 0
        assert "SOLVED" in result.output
        assert "Transfer from jug X to jug Y" in result.output

    def test_unsolvable_exits_one(self):
        result = run("solve", "2", "6", "5", "--no-color")
        assert result.exit_code == 1
        assert "No solution possible" in result.output

    def test_invalid_input_exits_two(self):
        result = run("solve", "0", "5", "3")
        assert result.exit_code == 2
        assert "[E201]" in result.output

    def test_json_format(self):
        result = run("solve", "4", "8", "4", "--format", "json")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [s["action"] for s in data["steps"]] == [
            "Initial state - both jugs empty",
            "Fill jug X (4L capacity)",
        ]

    def test_markdown_to_file(self, tmp_path):
        path = tmp_path / "report.md"
        result = run("solve", "3", "5", "4", "-f", "markdown", "-o", str(path))
        assert result.exit_code == 0
        assert "## Steps" in path.read_text()
        assert f"Report written to {path}" in result.output

    def test_unwritable_output_exits_two(self, tmp_path):
        path = tmp_path / "missing" / "report.md"
        result = run("solve", "3", "5", "4", "-o", str(path))
        assert result.exit_code == 2
        assert "Cannot write report" in result.output

    def test_negative_target_after_separator(self):
        result = run("solve", "--", "3", "5", "-1")
        assert result.exit_code == 2
        assert "[E201]" in result.output

    def test_table_format(self):
        result = run("solve", "3", "5", "4", "-f", "table", "--no-color")
        assert result.exit_code == 0
        assert "6 operations" in result.output

    def test_max_states_exceeded(self):
        result = run("solve", "3", "5", "4", "--max-states", "2")
        assert result.exit_code == 2
        assert "[E501]" in result.output

    def test_verbose_error_shows_suggestions(self):
        result = run("--verbose", "solve", "3", "5", "4", "--max-states", "2")
        assert result.exit_code == 2
        assert "Suggestions:" in result.output

    def test_format_from_config_file(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("output_format: json\n")
        result = run("--config", str(path), "solve", "3", "5", "4")
        assert result.exit_code == 0
        assert json.loads(result.output)["possible"] is True

    def test_invalid_config_file(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("max_states: 0\n")
        result = run("--config", str(path), "solve", "3", "5", "4")
        assert result.exit_code == 2
        assert "[E202]" in result.output


class TestCheckCommand:
    def test_feasible(self):
        result = run("check", "3", "5", "4")
        assert result.exit_code == 0
        assert "gcd(3, 5) = 1" in result.output
        assert "4L can be measured" in result.output

    def test_infeasible(self):
        result = run("check", "2", "6", "5")
        assert result.exit_code == 1
        assert "not a multiple of gcd(2, 6) = 2" in result.output

    def test_exceeds_capacity(self):
        result = run("check", "3", "5", "9")
        assert result.exit_code == 1
        assert "exceeds both jug capacities" in result.output

    def test_invalid_input(self):
        result = run("check", "3", "0", "1")
        assert result.exit_code == 2
