"""Core data objects for jugsolver.

This module contains the fundamental data structures:
- JugState, Capacities: Jug levels and sizes
- Operation, OPERATION_ORDER: The six state transformations
- Step, Solution, Outcome: Solver output
- gcd, check_feasibility, is_feasible: The feasibility gate
- validate_inputs, verify_solution: Input and output checking
"""

from jugsolver.core.feasibility import FeasibilityVerdict, check_feasibility, gcd, is_feasible
from jugsolver.core.operation import INITIAL_ACTION, OPERATION_ORDER, Operation, successors
from jugsolver.core.result import Outcome, Solution, Step
from jugsolver.core.state import Capacities, JugState
from jugsolver.core.validation import validate_inputs
from jugsolver.core.verify import verify_solution

__all__ = [
    "JugState",
    "Capacities",
    "Operation",
    "OPERATION_ORDER",
    "INITIAL_ACTION",
    "successors",
    "Step",
    "Solution",
    "Outcome",
    "FeasibilityVerdict",
    "check_feasibility",
    "gcd",
    "is_feasible",
    "validate_inputs",
    "verify_solution",
]
