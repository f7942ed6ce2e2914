# =============================================================================
# core/services/sequence_generator.py - Fibonacci Computation
# =============================================================================
# Three ways of producing Fibonacci values:
# - fibonacci_at: plain recursion, no upper bound
# - fibonacci_sequence: iterative list of the first n values
# - fibonacci_at_bounded: recursion that refuses positions >= RANGE_LIMIT
#
# fibonacci_at has no protection against deep recursion. Large positions
# raise RecursionError, which callers must not treat as a domain error.
# =============================================================================

import logging

from core.errors import OutOfRangeError
from core.models.sequence import FibonacciSequence

logger = logging.getLogger(__name__)

# Positions at or above this are rejected by fibonacci_at_bounded
RANGE_LIMIT = 8


def fibonacci_at(position: int) -> int:
    """
    Recursively find the Fibonacci number at a position.

    Positions <= 1 are returned unchanged, so fibonacci_at(-1) == -1.

    Args:
        position: Requested position (example: 8)

    Returns:
        Fibonacci number at position (example: 21)
    """
    # Exit criteria; without it the recursion never terminates
    if position <= 1:
        return position
    return fibonacci_at(position - 1) + fibonacci_at(position - 2)


def fibonacci_sequence(count: int) -> FibonacciSequence:
    """
    Generate the first `count` Fibonacci numbers without recursion.

    The result always starts with 0. A count of zero or less yields [0].

    Args:
        count: How many numbers to add after the leading 0

    Returns:
        FibonacciSequence with count + 1 values
    """
    values = [0]
    prev, curr = 0, 1
    for _ in range(count):
        values.append(curr)
        prev, curr = curr, prev + curr

    logger.debug(f"Generated sequence of {len(values)} values for count={count}")
    return FibonacciSequence(values=tuple(values))


def fibonacci_at_bounded(position: int) -> int:
    """
    Recursive Fibonacci that refuses positions at or above RANGE_LIMIT.

    Raises:
        OutOfRangeError: If position >= RANGE_LIMIT
    """
    if position <= 1:
        return position
    if position >= RANGE_LIMIT:
        raise OutOfRangeError(position, RANGE_LIMIT)
    return fibonacci_at_bounded(position - 1) + fibonacci_at_bounded(position - 2)
