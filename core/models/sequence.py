# =============================================================================
# core/models/sequence.py - Fibonacci Sequence Schema
# =============================================================================
# A FibonacciSequence is produced per request and never mutated afterwards.
# Its text form is what gets persisted: the literal list rendering, e.g.
#   [0, 1, 1, 2]
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class FibonacciSequence(BaseModel):
    """
    Ordered Fibonacci values starting at index 0.

    Always holds at least the leading 0, so len() is the requested
    count + 1 for non-negative counts.

    Example:
        {
            "values": [0, 1, 1, 2]
        }
    """

    model_config = ConfigDict(frozen=True)

    values: tuple[int, ...] = Field(
        default=(0,),
        min_length=1,
        description="Fibonacci values, index 0 first"
    )

    def __len__(self) -> int:
        return len(self.values)

    @property
    def count(self) -> int:
        """Number of values generated after the leading 0."""
        return len(self.values) - 1

    def to_text(self) -> str:
        """
        Render the sequence the way it is stored on disk.

        Example: (0, 1, 1, 2) -> "[0, 1, 1, 2]"
        """
        return "[" + ", ".join(str(value) for value in self.values) + "]"

    def __str__(self) -> str:
        return self.to_text()
