"""jugsolver - Shortest solutions to the two-jug water puzzle.

Given two jugs of integer capacity and a target volume, decide whether the
target can be measured exactly and, if so, find a shortest sequence of
fill, empty and pour operations.

Quick Start:
    from jugsolver import solve

    solution = solve(3, 5, 4)
    if solution.possible:
        for step in solution.steps:
            print(step.step_number, step.action, step.x, step.y)
    else:
        print(solution.message)
"""

from __future__ import annotations

from jugsolver.config import SolverConfig, load_config
from jugsolver.core import (
    OPERATION_ORDER,
    Capacities,
    FeasibilityVerdict,
    JugState,
    Operation,
    Outcome,
    Solution,
    Step,
    check_feasibility,
    gcd,
    is_feasible,
    validate_inputs,
    verify_solution,
)
from jugsolver.errors import (
    ConfigValidationError,
    ErrorCode,
    InvalidInputError,
    JugSolverError,
    SearchLimitExceededError,
)
from jugsolver.exploration import Solver, solve

__version__ = "0.1.0"

__all__ = [
    # Solving
    "solve",
    "Solver",
    "is_feasible",
    "check_feasibility",
    "FeasibilityVerdict",
    "gcd",
    "validate_inputs",
    "verify_solution",
    # Data model
    "JugState",
    "Capacities",
    "Operation",
    "OPERATION_ORDER",
    "Step",
    "Solution",
    "Outcome",
    # Configuration
    "SolverConfig",
    "load_config",
    # Errors
    "JugSolverError",
    "ErrorCode",
    "InvalidInputError",
    "ConfigValidationError",
    "SearchLimitExceededError",
    "__version__",
]
