"""Input validation for solver entry points."""

from __future__ import annotations

from typing import Any

from jugsolver.errors import ErrorContext, InvalidInputError


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_inputs(x: Any, y: Any, z: Any) -> None:
    """Raise InvalidInputError unless capacities are positive and target non-negative."""
    context = ErrorContext(capacity_x=x, capacity_y=y, target=z)

    for name, value in (("jug X capacity", x), ("jug Y capacity", y), ("target", z)):
        if not _is_int(value):
            raise InvalidInputError(
                f"{name} must be an integer, got {type(value).__name__}",
                context=context,
            )

    if x <= 0 or y <= 0:
        raise InvalidInputError(
            f"Jug capacities must be positive, got x={x}, y={y}",
            context=context,
        )
    if z < 0:
        raise InvalidInputError(
            f"Target must not be negative, got {z}",
            context=context,
        )
