"""Custom exception hierarchy for jugsolver.

Infeasible targets are not errors: the solver reports them as a regular
``Solution`` with ``possible=False``. Exceptions are reserved for inputs the
solver refuses to work with and for searches that outgrow their budget.

All jugsolver errors inherit from JugSolverError and include:
- error_code: A unique ErrorCode enum for categorization
- context: ErrorContext with the capacities and target being solved
- suggestions: List of actionable steps to resolve the issue

Example:
    try:
        solve(0, 5, 3)
    except InvalidInputError as e:
        print(f"Error [{e.error_code.value}]: {e.message}")
        for suggestion in e.suggestions:
            print(f"  - {suggestion}")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for jugsolver.

    Error codes are organized by category:
    - E2xx: Validation errors
    - E5xx: Resource errors
    - E9xx: Unknown/internal errors
    """

    # Validation errors (E2xx)
    INVALID_INPUT = "E201"
    INVALID_CONFIG = "E202"

    # Resource errors (E5xx)
    SEARCH_LIMIT_EXCEEDED = "E501"

    # Unknown/internal errors (E9xx)
    UNKNOWN = "E999"

    @property
    def category(self) -> str:
        """Get the error category name."""
        code_num = int(self.value[1:])
        if 200 <= code_num < 300:
            return "validation"
        elif 500 <= code_num < 600:
            return "resource"
        return "unknown"


@dataclass
class ErrorContext:
    """Structured context describing the solve that failed.

    Attributes:
        capacity_x: Capacity of jug X, if known.
        capacity_y: Capacity of jug Y, if known.
        target: Target volume, if known.
        extra: Additional context-specific information.
        timestamp: When the error occurred.
    """

    capacity_x: Any = None
    capacity_y: Any = None
    target: Any = None
    extra: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        """Convert context to dictionary for serialization."""
        result = {
            "capacity_x": self.capacity_x,
            "capacity_y": self.capacity_y,
            "target": self.target,
            "extra": self.extra,
            "timestamp": self.timestamp.isoformat(),
        }
        return {k: v for k, v in result.items() if v is not None}

    def format_location(self) -> str:
        """Format the solve inputs as a readable string."""
        parts = []
        if self.capacity_x is not None:
            parts.append(f"x={self.capacity_x}")
        if self.capacity_y is not None:
            parts.append(f"y={self.capacity_y}")
        if self.target is not None:
            parts.append(f"target={self.target}")
        return ", ".join(parts) if parts else "unknown location"


class JugSolverError(Exception):
    """Base exception for all jugsolver errors.

    Attributes:
        error_code: Unique ErrorCode for this error type
        message: Human-readable error description
        context: ErrorContext with the solve inputs
        suggestions: List of actionable steps to resolve the issue
        cause: The underlying exception (if any)
    """

    error_code: ErrorCode = ErrorCode.UNKNOWN
    default_message: str = "An unexpected error occurred"
    default_suggestions: list[str] = []

    def __init__(
        self,
        message: str | None = None,
        error_code: ErrorCode | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
        suggestions: list[str] | None = None,
        **extra_context: Any,
    ) -> None:
        self.message = message or self.default_message
        self.error_code = error_code or self.error_code
        self.context = context or ErrorContext()
        self.cause = cause
        self._suggestions = suggestions

        if extra_context:
            self.context.extra.update(extra_context)

        super().__init__(self.message)

    @property
    def suggestions(self) -> list[str]:
        """Get actionable suggestions for resolving this error."""
        if self._suggestions is not None:
            return self._suggestions
        return self.default_suggestions.copy()

    def __str__(self) -> str:
        parts = [f"[{self.error_code.value}] {self.message}"]

        location = self.context.format_location()
        if location != "unknown location":
            parts.append(f"at {location}")

        return " | ".join(parts)

    def format_verbose(self) -> str:
        """Format error with full details including suggestions."""
        lines = [
            f"Error [{self.error_code.value}]: {self.message}",
        ]

        location = self.context.format_location()
        if location != "unknown location":
            lines.append(f"Inputs: {location}")

        if self.suggestions:
            lines.append("")
            lines.append("Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"  - {suggestion}")

        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "error_code": self.error_code.value,
            "error_type": self.__class__.__name__,
            "message": self.message,
            "suggestions": self.suggestions,
            "context": self.context.to_dict(),
            "cause": str(self.cause) if self.cause else None,
        }


class ValidationError(JugSolverError):
    """Something handed to jugsolver failed validation."""

    error_code = ErrorCode.INVALID_INPUT
    default_message = "Validation failed"


class InvalidInputError(ValidationError):
    """Capacities or target are outside the solver's contract.

    Capacities must be positive integers and the target a non-negative
    integer. The solver never guesses at other values.
    """

    error_code = ErrorCode.INVALID_INPUT
    default_message = "Invalid solver input"
    default_suggestions = [
        "Both jug capacities must be positive whole numbers",
        "The target volume must be a whole number of zero or more",
    ]


class ConfigValidationError(ValidationError):
    """Configuration validation failed.

    The jugsolver.yaml file or a JUGSOLVER_* environment variable holds an
    invalid value.
    """

    error_code = ErrorCode.INVALID_CONFIG
    default_message = "Invalid configuration"
    default_suggestions = [
        "Check jugsolver.yaml syntax with a YAML linter",
        "Unset stray JUGSOLVER_* environment variables",
    ]

    def __init__(
        self,
        message: str | None = None,
        field: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ) -> None:
        self.field = field
        self.value = value
        super().__init__(message, **kwargs)
        if field is not None:
            self.context.extra.setdefault("field", field)


class SearchLimitExceededError(JugSolverError):
    """The breadth-first search visited more states than allowed.

    Raised instead of letting a pathological input run unbounded. The
    ``limit`` attribute holds the configured budget.
    """

    error_code = ErrorCode.SEARCH_LIMIT_EXCEEDED
    default_message = "Search exceeded the explored-state limit"
    default_suggestions = [
        "Raise max_states in jugsolver.yaml or pass --max-states",
        "Set JUGSOLVER_MAX_STATES to a larger value",
    ]

    def __init__(self, message: str | None = None, limit: int | None = None, **kwargs: Any) -> None:
        self.limit = limit
        super().__init__(message, **kwargs)
        if limit is not None:
            self.context.extra.setdefault("limit", limit)
