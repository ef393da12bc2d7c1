"""JSON reporter for machine-readable output."""

from __future__ import annotations

import json

from jugsolver.core.result import Solution


class JSONReporter:
    """Formats a Solution as JSON."""

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def report(self, solution: Solution) -> str:
        return json.dumps(solution.to_dict(), indent=self.indent, default=str)
