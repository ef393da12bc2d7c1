"""jugsolver Error Handling Module.

Provides the exception hierarchy with error codes and solve context.
"""

from jugsolver.errors.base import (
    ConfigValidationError,
    ErrorCode,
    ErrorContext,
    InvalidInputError,
    JugSolverError,
    SearchLimitExceededError,
    ValidationError,
)

__all__ = [
    # Base exceptions
    "JugSolverError",
    "ErrorCode",
    "ErrorContext",
    # Validation errors
    "ValidationError",
    "InvalidInputError",
    "ConfigValidationError",
    # Resource errors
    "SearchLimitExceededError",
]
