# =============================================================================
# tests/test_sequence_generator.py - Fibonacci Computation Tests
# =============================================================================
# Unit tests for the three generation variants:
# - fibonacci_at: recursion with identity for positions <= 1
# - fibonacci_sequence: iterative list, always seeded with 0
# - fibonacci_at_bounded: recursion that refuses positions >= 8
#
# Run with: poetry run pytest tests/test_sequence_generator.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from core.errors import ErrorKind, OutOfRangeError
from core.models import FibonacciSequence
from core.services.sequence_generator import (
    RANGE_LIMIT,
    fibonacci_at,
    fibonacci_at_bounded,
    fibonacci_sequence,
)


# =============================================================================
# fibonacci_at
# =============================================================================

class TestFibonacciAt:
    """Tests for the unbounded recursive variant."""

    @pytest.mark.parametrize(
        "position, expected",
        [(0, 0), (1, 1), (2, 1), (3, 2), (7, 13), (8, 21), (20, 6765)],
    )
    def test_known_values(self, position, expected):
        """Test well-known Fibonacci numbers."""
        assert fibonacci_at(position) == expected

    @pytest.mark.parametrize("position", [-1, -5, -100])
    def test_negative_positions_return_themselves(self, position):
        """Positions <= 1 are returned unchanged, negatives included."""
        assert fibonacci_at(position) == position

    def test_deep_recursion_is_not_recovered(self):
        """Very large positions exhaust the recursion limit and propagate."""
        with pytest.raises(RecursionError):
            fibonacci_at(100_000)


# =============================================================================
# fibonacci_sequence
# =============================================================================

class TestFibonacciSequence:
    """Tests for the iterative sequence builder."""

    def test_sequence_of_three(self):
        """Test the first three values after the leading 0."""
        sequence = fibonacci_sequence(3)

        assert sequence.values == (0, 1, 1, 2)
        assert sequence.count == 3

    @pytest.mark.parametrize("count", [0, 1, 5, 30])
    def test_length_is_count_plus_one(self, count):
        """Every sequence includes index 0."""
        assert len(fibonacci_sequence(count)) == count + 1

    @pytest.mark.parametrize("count", [0, -1, -42])
    def test_non_positive_count_yields_zero_only(self, count):
        """No iterations happen for counts <= 0."""
        assert fibonacci_sequence(count).values == (0,)

    def test_matches_recursive_values(self):
        """Each index agrees with the recursive definition."""
        sequence = fibonacci_sequence(15)

        for index, value in enumerate(sequence.values):
            assert value == fibonacci_at(index)

    def test_sequence_is_immutable(self):
        """A produced sequence cannot be modified."""
        sequence = fibonacci_sequence(3)

        with pytest.raises(ValidationError):
            sequence.values = (1, 2, 3)

    def test_text_form(self):
        """Test the literal list rendering used for storage."""
        assert fibonacci_sequence(3).to_text() == "[0, 1, 1, 2]"
        assert str(fibonacci_sequence(0)) == "[0]"

    def test_empty_sequence_rejected(self):
        """A sequence always holds at least the leading 0."""
        with pytest.raises(ValidationError):
            FibonacciSequence(values=())


# =============================================================================
# fibonacci_at_bounded
# =============================================================================

class TestFibonacciAtBounded:
    """Tests for the range-checked recursive variant."""

    @pytest.mark.parametrize("position", range(0, RANGE_LIMIT))
    def test_agrees_with_unbounded_below_limit(self, position):
        """Below the limit both variants produce the same value."""
        assert fibonacci_at_bounded(position) == fibonacci_at(position)

    def test_negative_positions_return_themselves(self):
        """The base case is shared with fibonacci_at."""
        assert fibonacci_at_bounded(-1) == -1

    @pytest.mark.parametrize("position", [8, 9, 13])
    def test_rejects_positions_at_or_over_limit(self, position):
        """Test the OutOfRange message names the position."""
        with pytest.raises(OutOfRangeError) as exc_info:
            fibonacci_at_bounded(position)

        assert exc_info.value.kind is ErrorKind.OUT_OF_RANGE
        assert exc_info.value.message == (
            f"Requested position {position} is too large. Please try again."
        )

    def test_rejects_before_recursing(self):
        """A huge position fails on the bound, not on recursion depth."""
        with pytest.raises(OutOfRangeError) as exc_info:
            fibonacci_at_bounded(10_000_000)

        assert exc_info.value.details["position"] == 10_000_000
