# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .error_classifier import ErrorClassification, classify
from .input_validator import parse_count_with_fault_simulation, parse_position
from .ratio_calculator import ratio
from .sequence_generator import (
    RANGE_LIMIT,
    fibonacci_at,
    fibonacci_at_bounded,
    fibonacci_sequence,
)
from .sequence_store import SequenceStore

__all__ = [
    "ErrorClassification",
    "classify",
    "parse_count_with_fault_simulation",
    "parse_position",
    "ratio",
    "RANGE_LIMIT",
    "fibonacci_at",
    "fibonacci_at_bounded",
    "fibonacci_sequence",
    "SequenceStore",
]
