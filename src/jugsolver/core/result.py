"""Step and Solution dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from jugsolver.core.operation import INITIAL_ACTION, Operation
from jugsolver.core.state import Capacities, JugState


class Outcome(Enum):
    """Why a solve ended the way it did."""

    TRIVIAL = "trivial"
    REACHABLE = "reachable"
    EXCEEDS_CAPACITY = "exceeds_capacity"
    NOT_MULTIPLE_OF_GCD = "not_multiple_of_gcd"
    EXHAUSTED = "exhausted"

    @property
    def possible(self) -> bool:
        return self in (Outcome.TRIVIAL, Outcome.REACHABLE)


@dataclass(frozen=True)
class Step:
    """A state reached, the action that produced it, and its position."""

    x: int
    y: int
    action: str
    step_number: int
    operation: Operation | None = None

    @classmethod
    def initial(cls) -> Step:
        return cls(x=0, y=0, action=INITIAL_ACTION, step_number=0)

    @property
    def state(self) -> JugState:
        return JugState(self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        return {
            "jugX": self.x,
            "jugY": self.y,
            "action": self.action,
            "stepNumber": self.step_number,
        }


@dataclass
class Solution:
    """The complete output of one solve.

    Either ``possible`` with a non-empty list of steps starting at (0, 0), or
    not possible with a message. Never a partial path.
    """

    possible: bool
    steps: list[Step] = field(default_factory=list)
    message: str | None = None
    outcome: Outcome = Outcome.REACHABLE
    states_explored: int = 0
    duration_ms: float = 0.0
    capacities: Capacities | None = None
    target: int | None = None

    @classmethod
    def failure(cls, outcome: Outcome, message: str, states_explored: int = 0) -> Solution:
        return cls(possible=False, message=message, outcome=outcome, states_explored=states_explored)

    @property
    def operation_count(self) -> int:
        """Number of operations performed, excluding the initial state."""
        return max(len(self.steps) - 1, 0)

    @property
    def final_state(self) -> JugState | None:
        if not self.steps:
            return None
        return self.steps[-1].state

    @property
    def actions(self) -> list[str]:
        return [s.action for s in self.steps]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the ``{possible, steps}`` / ``{possible, message}`` shape."""
        data: dict[str, Any] = {"possible": self.possible}
        if self.possible:
            data["steps"] = [s.to_dict() for s in self.steps]
        else:
            data["message"] = self.message
        data["outcome"] = self.outcome.value
        data["statesExplored"] = self.states_explored
        return data

