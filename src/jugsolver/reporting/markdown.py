"""Markdown reporter for documentation output."""

from __future__ import annotations

from io import StringIO

from jugsolver.core.result import Solution


class MarkdownReporter:
    """Formats a Solution as Markdown."""

    def report(self, solution: Solution) -> str:
        out = StringIO()

        out.write("# Water Jug Solution\n\n")

        out.write("## Summary\n\n")
        out.write("| Metric | Value |\n")
        out.write("|--------|-------|\n")
        if solution.capacities is not None:
            out.write(f"| Jug X capacity | {solution.capacities.x}L |\n")
            out.write(f"| Jug Y capacity | {solution.capacities.y}L |\n")
        if solution.target is not None:
            out.write(f"| Target | {solution.target}L |\n")
        out.write(f"| Status | {'SOLVED' if solution.possible else 'NOT POSSIBLE'} |\n")
        if solution.possible:
            out.write(f"| Operations | {solution.operation_count} |\n")
        out.write(f"| States explored | {solution.states_explored} |\n")
        out.write("\n")

        if not solution.possible:
            out.write(f"> {solution.message}\n")
            return out.getvalue()

        out.write("## Steps\n\n")
        out.write("| # | Action | Jug X | Jug Y |\n")
        out.write("|---|--------|-------|-------|\n")
        for step in solution.steps:
            out.write(f"| {step.step_number} | {step.action} | {step.x} | {step.y} |\n")

        return out.getvalue()
