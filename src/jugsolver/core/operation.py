"""The six jug operations and their fixed expansion order."""

from __future__ import annotations

from enum import Enum

from jugsolver.core.state import Capacities, JugState

INITIAL_ACTION = "Initial state - both jugs empty"


class Operation(Enum):
    """A deterministic transformation of one state into a successor."""

    FILL_X = "fill_x"
    FILL_Y = "fill_y"
    EMPTY_X = "empty_x"
    EMPTY_Y = "empty_y"
    POUR_X_TO_Y = "pour_x_to_y"
    POUR_Y_TO_X = "pour_y_to_x"

    def apply(self, state: JugState, capacities: Capacities) -> JugState:
        """Return the state reached by performing this operation on ``state``.

        Pours move as much water as the receiving jug has headroom for.
        """
        cx, cy = capacities.x, capacities.y
        x, y = state.x, state.y

        if self is Operation.FILL_X:
            return JugState(cx, y)
        if self is Operation.FILL_Y:
            return JugState(x, cy)
        if self is Operation.EMPTY_X:
            return JugState(0, y)
        if self is Operation.EMPTY_Y:
            return JugState(x, 0)
        if self is Operation.POUR_X_TO_Y:
            return JugState(max(0, x - (cy - y)), min(cy, y + x))
        return JugState(min(cx, x + y), max(0, y - (cx - x)))

    def describe(self, capacities: Capacities) -> str:
        """Human-readable action label used in solution steps."""
        if self is Operation.FILL_X:
            return f"Fill jug X ({capacities.x}L capacity)"
        if self is Operation.FILL_Y:
            return f"Fill jug Y ({capacities.y}L capacity)"
        return _FIXED_LABELS[self]


_FIXED_LABELS = {
    Operation.EMPTY_X: "Empty jug X",
    Operation.EMPTY_Y: "Empty jug Y",
    Operation.POUR_X_TO_Y: "Transfer from jug X to jug Y",
    Operation.POUR_Y_TO_X: "Transfer from jug Y to jug X",
}

# Expansion order for every state. Changing it changes which of several
# equally short solutions is returned.
OPERATION_ORDER: tuple[Operation, ...] = (
    Operation.FILL_X,
    Operation.FILL_Y,
    Operation.EMPTY_X,
    Operation.EMPTY_Y,
    Operation.POUR_X_TO_Y,
    Operation.POUR_Y_TO_X,
)


def successors(state: JugState, capacities: Capacities) -> list[tuple[Operation, JugState]]:
    """All six candidate successors of ``state`` in OPERATION_ORDER."""
    return [(op, op.apply(state, capacities)) for op in OPERATION_ORDER]
