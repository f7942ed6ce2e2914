# =============================================================================
# core/errors.py - Domain Error Taxonomy
# =============================================================================
# Every expected failure in the Fibonacci service is a DomainError tagged
# with an ErrorKind. The kind, not the exception class, drives how the
# boundary reports the failure (see core/services/error_classifier.py).
#
# Fatal conditions (deep recursion, memory exhaustion) are NOT
# part of this taxonomy. They are listed in FATAL_ERRORS so boundaries can
# re-raise them instead of reporting them as ordinary failures.
# =============================================================================

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """
    Categories of failure the service knows how to report.

    - invalid_input: caller sent something that is not a number
    - out_of_range: position at or above the bounded variant's limit
    - not_found: persisted sequence lookup missed
    - simulated_fault: sentinel input standing in for an unchecked fault
    - division_by_zero: ratio requested where the divisor is fib(0)
    - internal_io: persisting the sequence failed
    - uncategorized: anything else
    """
    INVALID_INPUT = "invalid_input"
    OUT_OF_RANGE = "out_of_range"
    NOT_FOUND = "not_found"
    SIMULATED_FAULT = "simulated_fault"
    DIVISION_BY_ZERO = "division_by_zero"
    INTERNAL_IO = "internal_io"
    UNCATEGORIZED = "uncategorized"


# Conditions that must never be recovered at a boundary. Re-raising them
# only keeps them out of UnexpectedError; the app-wide Exception handler
# still answers the client with the same generic 500.
FATAL_ERRORS: tuple[type[BaseException], ...] = (RecursionError, MemoryError)


class DomainError(Exception):
    """
    Base exception for the Fibonacci service.

    Carries a kind and a human-readable message. Subclasses fix the kind
    and build the message so call sites only pass the facts.
    """

    kind: ErrorKind = ErrorKind.UNCATEGORIZED

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a dict for logging."""
        result = {
            "kind": self.kind.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Input Errors
# =============================================================================

class InvalidInputError(DomainError):
    """Raised when a raw parameter is not a valid integer literal."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, raw: str | None):
        super().__init__(
            "Invalid input. Please provide a valid number",
            details={"raw": raw},
        )


class SimulatedFaultError(DomainError):
    """Raised when the fault sentinel is received in place of a count."""

    kind = ErrorKind.SIMULATED_FAULT

    def __init__(self, raw: str):
        super().__init__(
            f"Simulated unchecked fault triggered by input {raw!r}",
            details={"raw": raw},
        )


# =============================================================================
# Computation Errors
# =============================================================================

class OutOfRangeError(DomainError):
    """Raised when the bounded variant receives a position at or over its limit."""

    kind = ErrorKind.OUT_OF_RANGE

    def __init__(self, position: int, limit: int):
        super().__init__(
            f"Requested position {position} is too large. Please try again.",
            details={"position": position, "limit": limit},
        )


class DivisionByZeroError(DomainError):
    """Raised when a ratio would divide by fib(0)."""

    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, zero_position: int):
        super().__init__(
            f"Division by Zero, produced by the fibonacci of {zero_position}",
            details={"zero_position": zero_position},
        )


# =============================================================================
# Persistence Errors
# =============================================================================

class SequenceNotFoundError(DomainError):
    """Raised when a persisted sequence cannot be found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, filename: str, reason: str):
        super().__init__(
            f"{filename} ({reason})",
            details={"filename": filename},
        )


class SequenceStorageError(DomainError):
    """Raised when writing the sequence to storage fails."""

    kind = ErrorKind.INTERNAL_IO

    def __init__(self, error: str):
        super().__init__(error, details={"error": error})


class UnexpectedError(DomainError):
    """Wraps a failure no other kind describes."""

    kind = ErrorKind.UNCATEGORIZED

    def __init__(self, error: str):
        super().__init__(error, details={"error": error})
