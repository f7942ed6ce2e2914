# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================

from .sequence import FibonacciSequence

__all__ = [
    "FibonacciSequence",
]
