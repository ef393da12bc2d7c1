"""Replay a solution and report everything wrong with it."""

from __future__ import annotations

from jugsolver.core.operation import INITIAL_ACTION, OPERATION_ORDER, Operation
from jugsolver.core.result import Solution, Step
from jugsolver.core.state import Capacities, JugState


def _operation_for(step: Step, capacities: Capacities) -> Operation | None:
    if step.operation is not None:
        return step.operation
    for op in OPERATION_ORDER:
        if op.describe(capacities) == step.action:
            return op
    return None


def verify_solution(x: int, y: int, z: int, solution: Solution) -> list[str]:
    """Check a possible solution step by step.

    Returns a list of problems; an empty list means the solution starts
    from two empty jugs, only uses the six operations, stays within the
    capacities and ends holding ``z``.
    """
    if not solution.possible:
        return ["solution is not marked possible"]
    if not solution.steps:
        return ["solution has no steps"]

    capacities = Capacities(x, y)
    problems: list[str] = []

    first = solution.steps[0]
    if first.state != JugState.initial():
        problems.append(f"step 0: expected (0, 0), got {first.state}")
    if first.action != INITIAL_ACTION:
        problems.append(f"step 0: expected initial action, got {first.action!r}")

    previous = first.state
    for index, step in enumerate(solution.steps):
        if step.step_number != index:
            problems.append(f"step {index}: numbered {step.step_number}")
        if not capacities.contains(step.state):
            problems.append(f"step {index}: {step.state} is outside capacities ({x}, {y})")
        if index == 0:
            continue

        op = _operation_for(step, capacities)
        if op is None:
            problems.append(f"step {index}: unknown action {step.action!r}")
        elif op.apply(previous, capacities) != step.state:
            expected = op.apply(previous, capacities)
            problems.append(f"step {index}: {op.value} from {previous} gives {expected}, not {step.state}")
        previous = step.state

    if not solution.steps[-1].state.holds(z):
        problems.append(f"final state {solution.steps[-1].state} does not hold {z}")

    return problems
