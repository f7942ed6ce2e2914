# =============================================================================
# tests/test_ratio_calculator.py - Ratio Tests
# =============================================================================

import math

import pytest

from core.errors import DivisionByZeroError, ErrorKind
from core.services.ratio_calculator import ratio


class TestRatio:
    """Tests for fib(n) / fib(n - 1)."""

    @pytest.mark.parametrize(
        "position, expected",
        [
            (8, 1.6153846153846154),
            (4, 1.5),
            (3, 2.0),
            (2, 1.0),
            (-1, 0.5),
        ],
    )
    def test_known_ratios(self, position, expected):
        """Test ratios at small positions."""
        assert ratio(position) == expected

    def test_position_zero_gives_negative_zero(self):
        """fib(0) / fib(-1) is 0 / -1, which is -0.0."""
        result = ratio(0)

        assert result == 0.0
        assert math.copysign(1.0, result) == -1.0
        assert str(result) == "-0.0"

    def test_position_one_divides_by_zero(self):
        """Position 1 is refused instead of returning inf."""
        with pytest.raises(DivisionByZeroError) as exc_info:
            ratio(1)

        assert exc_info.value.kind is ErrorKind.DIVISION_BY_ZERO
        assert exc_info.value.message == "Division by Zero, produced by the fibonacci of 0"

    def test_approaches_golden_ratio(self):
        """Larger positions converge on the golden ratio."""
        assert ratio(20) == pytest.approx((1 + math.sqrt(5)) / 2, rel=1e-6)
