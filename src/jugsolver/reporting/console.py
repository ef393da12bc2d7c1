"""Console reporter for terminal output."""

from __future__ import annotations

import io
import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from jugsolver.core.result import Solution, Step


class ConsoleReporter:
    """Formats a Solution for terminal output.

    Example::

        reporter = ConsoleReporter()
        output = reporter.report(solution)

        # Or print directly
        reporter.print_report(solution)

        # Disable colors for file output
        reporter = ConsoleReporter(color=False)
    """

    # ANSI color codes
    RED = "\033[91m"
    YELLOW = "\033[93m"
    GREEN = "\033[92m"
    CYAN = "\033[96m"
    DIM = "\033[2m"
    BOLD = "\033[1m"
    RESET = "\033[0m"

    def __init__(self, file: TextIO | None = None, color: bool = True) -> None:
        """Initialize the console reporter.

        Args:
            file: Output file (default: stdout). Only used by print_report().
            color: Whether to use ANSI colors (default: True).
        """
        self.file = file or sys.stdout
        self.color = color

    def _c(self, text: str, code: str) -> str:
        """Apply color if enabled."""
        if self.color:
            return f"{code}{text}{self.RESET}"
        return text

    def report(self, solution: Solution) -> str:
        """Format the solution as a string."""
        buffer = io.StringIO()
        self._write_report(solution, buffer)
        return buffer.getvalue()

    def print_report(self, solution: Solution) -> None:
        self.file.write(self.report(solution))

    def _levels(self, step: Step, solution: Solution) -> str:
        if solution.capacities is None:
            return f"[X={step.x}, Y={step.y}]"
        caps = solution.capacities
        return f"[X={step.x}/{caps.x}, Y={step.y}/{caps.y}]"

    def _write_report(self, solution: Solution, buffer: io.StringIO) -> None:
        def line(text: str = "") -> None:
            buffer.write(text + "\n")

        line()
        title = "Water Jug Solution"
        if solution.capacities is not None and solution.target is not None:
            caps = solution.capacities
            title += f" (X={caps.x}L, Y={caps.y}L, target={solution.target}L)"

        if solution.possible:
            icon = self._c("✓", self.GREEN)
            status = self._c("SOLVED", self.GREEN + self.BOLD)
        else:
            icon = self._c("✗", self.RED)
            status = self._c("NOT POSSIBLE", self.RED + self.BOLD)
        line(f"  {icon} {title}: {status}")
        line(self._c("  " + "─" * 60, self.DIM))
        line()

        if not solution.possible:
            line(f"  {solution.message}")
            line()
            return

        summary_parts = [
            f"{solution.operation_count} operations",
            f"{solution.states_explored} states explored",
            f"{solution.duration_ms:.1f}ms",
        ]
        line(f"  {self._c('Summary:', self.BOLD)} {' | '.join(summary_parts)}")
        line()

        width = len(str(len(solution.steps) - 1))
        for step in solution.steps:
            number = self._c(f"{step.step_number:>{width}}.", self.CYAN)
            levels = self._c(self._levels(step, solution), self.DIM)
            line(f"  {number} {step.action:<34} {levels}")
        line()


__all__ = ["ConsoleReporter"]
