# =============================================================================
# core/services/ratio_calculator.py - Consecutive Fibonacci Ratio
# =============================================================================
# ratio(n) = fib(n) / fib(n - 1), which approaches the golden ratio
# (1.618033988749895) as n grows.
# =============================================================================

from core.errors import DivisionByZeroError
from core.services.sequence_generator import fibonacci_at


def ratio(position: int) -> float:
    """
    Ratio between the Fibonacci numbers at position and position - 1.

    Only position 1 is guarded: its divisor is fib(0) == 0. Zero and
    negative positions go through ordinary float division, so ratio(0)
    is -0.0 and ratio(-1) is 0.5.

    Args:
        position: Position of the dividend

    Returns:
        fib(position) / fib(position - 1)

    Raises:
        DivisionByZeroError: If position == 1
    """
    if position == 1:
        raise DivisionByZeroError(position - 1)

    dividend = fibonacci_at(position)
    divisor = fibonacci_at(position - 1)
    return dividend / divisor
