"""Rich table reporter."""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.table import Table

from jugsolver.core.result import Solution


class TableReporter:
    """Renders a Solution as a rich table.

    The table is rendered into a string so it can be written anywhere a
    plain report can.
    """

    def __init__(self, color: bool = True, width: int = 80) -> None:
        self.color = color
        self.width = width

    def build_table(self, solution: Solution) -> Table:
        title = "Water Jug Solution"
        if solution.capacities is not None and solution.target is not None:
            caps = solution.capacities
            title += f" (X={caps.x}L, Y={caps.y}L, target={solution.target}L)"

        table = Table(title=title)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Action")
        table.add_column("Jug X", justify="right")
        table.add_column("Jug Y", justify="right")

        for step in solution.steps:
            table.add_row(str(step.step_number), step.action, str(step.x), str(step.y))
        return table

    def report(self, solution: Solution) -> str:
        buffer = StringIO()
        console = Console(
            file=buffer,
            width=self.width,
            force_terminal=self.color,
            no_color=not self.color,
        )
        if solution.possible:
            console.print(self.build_table(solution))
            console.print(f"{solution.operation_count} operations, {solution.states_explored} states explored")
        else:
            console.print(f"[bold red]Not possible:[/bold red] {solution.message}")
        return buffer.getvalue()
