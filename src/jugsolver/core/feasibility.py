"""Number-theoretic feasibility check.

A target ``z`` is measurable with jugs of capacity ``x`` and ``y`` exactly
when it fits in the larger jug and is a multiple of ``gcd(x, y)`` (Bezout's
identity). Every volume the six operations can produce is an integer
combination of the capacities, hence a multiple of the gcd.
"""

from __future__ import annotations

from dataclasses import dataclass

from jugsolver.core.result import Outcome
from jugsolver.core.validation import validate_inputs


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by repeated remainder."""
    while b != 0:
        a, b = b, a % b
    return a


@dataclass(frozen=True)
class FeasibilityVerdict:
    """Whether a target is measurable, and why."""

    feasible: bool
    outcome: Outcome
    gcd: int

    def __bool__(self) -> bool:
        return self.feasible


def check_feasibility(x: int, y: int, z: int) -> FeasibilityVerdict:
    """Decide reachability of ``z`` and classify the reason."""
    validate_inputs(x, y, z)
    g = gcd(x, y)

    if z > max(x, y):
        return FeasibilityVerdict(False, Outcome.EXCEEDS_CAPACITY, g)
    if z % g != 0:
        return FeasibilityVerdict(False, Outcome.NOT_MULTIPLE_OF_GCD, g)
    if z == 0:
        return FeasibilityVerdict(True, Outcome.TRIVIAL, g)
    return FeasibilityVerdict(True, Outcome.REACHABLE, g)


def is_feasible(x: int, y: int, z: int) -> bool:
    """True iff ``z`` can be measured exactly in one of the jugs."""
    return check_feasibility(x, y, z).feasible
