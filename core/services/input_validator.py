# =============================================================================
# core/services/input_validator.py - Raw Input Parsing
# =============================================================================
# Turns raw query strings into domain integers.
#
# The reserved input FAULT_SENTINEL stands in for an unchecked runtime
# fault. It is raised as SimulatedFaultError so the boundary can tell an
# unexpected fault apart from input that simply failed validation.
# =============================================================================

import logging
import re

from core.errors import InvalidInputError, SimulatedFaultError
from core.models.sequence import FibonacciSequence
from core.services.sequence_generator import fibonacci_sequence

logger = logging.getLogger(__name__)

FAULT_SENTINEL = "npe"

# Optional sign followed by ASCII digits; no whitespace, no underscores
_INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")

# Accepted range of a position: a signed 32-bit integer
MIN_POSITION = -(2 ** 31)
MAX_POSITION = 2 ** 31 - 1


def parse_position(raw: str) -> int:
    """
    Parse a raw string as an integer position.

    Args:
        raw: Untrusted input, e.g. "8" or "-1"

    Returns:
        The parsed integer

    Raises:
        InvalidInputError: If raw is not an integer literal or falls
            outside MIN_POSITION..MAX_POSITION
    """
    if raw is None or not _INTEGER_LITERAL.fullmatch(raw):
        logger.debug(f"Rejected non-numeric input: {raw!r}")
        raise InvalidInputError(raw)

    value = int(raw)
    if not MIN_POSITION <= value <= MAX_POSITION:
        logger.debug(f"Rejected out-of-range input: {raw!r}")
        raise InvalidInputError(raw)
    return value


def parse_count_with_fault_simulation(raw: str) -> FibonacciSequence:
    """
    Parse a count and build the matching sequence.

    Raises:
        SimulatedFaultError: If raw is the fault sentinel
        InvalidInputError: If raw is not an integer literal
    """
    if raw == FAULT_SENTINEL:
        raise SimulatedFaultError(raw)

    count = parse_position(raw)
    return fibonacci_sequence(count)
