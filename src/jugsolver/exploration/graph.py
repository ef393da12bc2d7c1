"""StateGraph - the visited set of one search, with parent pointers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from jugsolver.core.operation import Operation
from jugsolver.core.result import Step
from jugsolver.core.state import Capacities, JugState


@dataclass(frozen=True)
class Discovery:
    """How a state was first reached: from which parent, by which operation."""

    parent_key: str | None
    operation: Operation | None


class StateGraph:
    """Holds every visited state of a search.

    Each state is recorded once, keyed on its coordinate pair, together
    with the state it was discovered from. Paths are rebuilt by walking
    parent pointers back to the initial state, so queued entries never
    carry copies of their prefix.
    """

    def __init__(self, capacities: Capacities) -> None:
        self.capacities = capacities
        self._states: dict[str, JugState] = {}
        self._discoveries: dict[str, Discovery] = {}

    def add_initial(self, state: JugState) -> None:
        self._states[state.key] = state
        self._discoveries[state.key] = Discovery(parent_key=None, operation=None)

    def is_visited(self, state: JugState) -> bool:
        return state.key in self._states

    def add(self, state: JugState, parent: JugState, operation: Operation) -> bool:
        """Record ``state`` as reached from ``parent``.

        Returns:
            True if the state was new, False if it had already been visited.
        """
        if state.key in self._states:
            return False
        self._states[state.key] = state
        self._discoveries[state.key] = Discovery(parent_key=parent.key, operation=operation)
        return True

    def path_to(self, state: JugState) -> list[Step]:
        """Rebuild the step sequence from the initial state to ``state``."""
        if state.key not in self._states:
            return []

        chain: list[tuple[JugState, Operation | None]] = []
        key: str | None = state.key
        while key is not None:
            discovery = self._discoveries[key]
            chain.append((self._states[key], discovery.operation))
            key = discovery.parent_key
        chain.reverse()

        steps = [Step.initial()]
        for number, (node, operation) in enumerate(chain[1:], start=1):
            steps.append(
                Step(
                    x=node.x,
                    y=node.y,
                    action=operation.describe(self.capacities),
                    step_number=number,
                    operation=operation,
                )
            )
        return steps

    def iter_states(self) -> Iterator[JugState]:
        return iter(self._states.values())

    @property
    def state_count(self) -> int:
        return len(self._states)
