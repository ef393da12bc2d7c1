"""Reporter protocol - Interface for formatting solutions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from jugsolver.core.result import Solution


@runtime_checkable
class Reporter(Protocol):
    """Protocol for formatting solver output.

    All reporters implement this protocol, allowing them to be used
    interchangeably. The report method returns a string that can be
    printed or saved to a file.

    Example::

        class StepCountReporter:
            def report(self, solution: Solution) -> str:
                return f"{solution.operation_count} operations"

    Built-in reporters:
    - ConsoleReporter: Terminal output with ANSI colors
    - JSONReporter: Machine-readable JSON
    - MarkdownReporter: Human-readable markdown
    - TableReporter: Rich table
    """

    def report(self, solution: Solution) -> str:
        """Format the solution as a string."""
        ...


__all__ = ["Reporter"]
