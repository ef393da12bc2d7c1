"""Shortest-path solver over jug states."""

from __future__ import annotations

import logging
import time

from jugsolver.config import SolverConfig, default_max_states
from jugsolver.core.feasibility import FeasibilityVerdict, check_feasibility
from jugsolver.core.operation import successors
from jugsolver.core.result import Outcome, Solution, Step
from jugsolver.core.state import Capacities, JugState
from jugsolver.errors import ConfigValidationError, ErrorContext, SearchLimitExceededError
from jugsolver.exploration.frontier import QueueFrontier
from jugsolver.exploration.graph import StateGraph

logger = logging.getLogger(__name__)

EXHAUSTED_MESSAGE = "No solution found."


def failure_message(verdict: FeasibilityVerdict, x: int, y: int, z: int) -> str:
    """Explain why ``z`` cannot be measured with jugs ``x`` and ``y``."""
    if verdict.outcome is Outcome.EXCEEDS_CAPACITY:
        return (
            f"No solution possible. The target amount ({z}L) exceeds both "
            f"jug capacities ({x}L and {y}L)."
        )
    return (
        f"No solution possible. The target amount ({z}L) cannot be measured with "
        f"these jug capacities: it is not a multiple of gcd({x}, {y}) = {verdict.gcd}."
    )


class Solver:
    """Breadth-first solver for one (x, y, target) triple.

    The solver:
    1. Validates the inputs
    2. Asks the feasibility gate whether the target is reachable at all
    3. Answers a zero target without searching
    4. Otherwise expands states level by level from (0, 0), trying the six
       operations in OPERATION_ORDER, until a state holds the target

    Each Solver owns its frontier and visited graph; nothing is shared
    between instances.
    """

    def __init__(
        self,
        x: int,
        y: int,
        target: int,
        max_states: int | None = None,
        config: SolverConfig | None = None,
    ) -> None:
        self.verdict = check_feasibility(x, y, target)
        self.capacities = Capacities(x, y)
        self.target = target

        if max_states is None:
            max_states = config.max_states if config is not None else default_max_states()
        if max_states <= 0:
            raise ConfigValidationError(
                message=f"max_states must be positive, got {max_states}",
                field="max_states",
                value=max_states,
            )
        self.max_states = max_states
        self.graph = StateGraph(self.capacities)

    def solve(self) -> Solution:
        """Run the gated solve and return a complete Solution."""
        started = time.perf_counter()
        x, y, z = self.capacities.x, self.capacities.y, self.target

        if not self.verdict.feasible:
            logger.debug("Target %d rejected for jugs (%d, %d): %s", z, x, y, self.verdict.outcome.value)
            solution = Solution.failure(self.verdict.outcome, failure_message(self.verdict, x, y, z))
        elif z == 0:
            solution = Solution(possible=True, steps=[Step.initial()], outcome=Outcome.TRIVIAL)
        else:
            solution = self.search()

        solution.capacities = self.capacities
        solution.target = z
        solution.duration_ms = (time.perf_counter() - started) * 1000
        return solution

    def search(self) -> Solution:
        """Breadth-first search from (0, 0), without consulting the gate.

        Returns the first path found to a state holding the target, or an
        EXHAUSTED failure once every reachable state has been expanded.

        Raises:
            SearchLimitExceededError: Discovering a new state would exceed ``max_states``.
        """
        initial = JugState.initial()
        self.graph = StateGraph(self.capacities)
        self.graph.add_initial(initial)
        frontier = QueueFrontier(initial)

        while frontier:
            current = frontier.pop()
            if current.holds(self.target):
                steps = self.graph.path_to(current)
                logger.debug(
                    "Reached %s in %d operations after visiting %d states",
                    current,
                    len(steps) - 1,
                    self.graph.state_count,
                )
                return Solution(
                    possible=True,
                    steps=steps,
                    outcome=Outcome.REACHABLE,
                    states_explored=self.graph.state_count,
                )

            for operation, candidate in successors(current, self.capacities):
                if self.graph.is_visited(candidate):
                    continue
                if self.graph.state_count >= self.max_states:
                    raise SearchLimitExceededError(
                        f"Search exceeded the limit of {self.max_states} discovered states",
                        limit=self.max_states,
                        context=ErrorContext(
                            capacity_x=self.capacities.x,
                            capacity_y=self.capacities.y,
                            target=self.target,
                        ),
                    )
                self.graph.add(candidate, current, operation)
                frontier.add(candidate)

        logger.warning(
            "Search exhausted %d states without reaching %d for jugs (%d, %d)",
            self.graph.state_count,
            self.target,
            self.capacities.x,
            self.capacities.y,
        )
        return Solution.failure(Outcome.EXHAUSTED, EXHAUSTED_MESSAGE, states_explored=self.graph.state_count)


def solve(
    x: int,
    y: int,
    target: int,
    *,
    max_states: int | None = None,
    config: SolverConfig | None = None,
) -> Solution:
    """Find a shortest sequence of operations measuring ``target``.

    Args:
        x: Capacity of jug X (positive).
        y: Capacity of jug Y (positive).
        target: Volume to measure in either jug (non-negative).
        max_states: Discovered-state budget; defaults to ``config.max_states``,
            then ``JUGSOLVER_MAX_STATES``, then DEFAULT_MAX_STATES.
        config: Settings to read the budget from instead of the environment.

    Returns:
        A Solution. Infeasible targets are reported, not raised.

    Raises:
        InvalidInputError: Non-integer, non-positive capacity or negative target.
        SearchLimitExceededError: The search outgrew ``max_states``.
    """
    return Solver(x, y, target, max_states=max_states, config=config).solve()
