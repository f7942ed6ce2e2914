# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Fibonacci API:
# - test_sequence_generator.py: Recursive, iterative and bounded variants
# - test_ratio_calculator.py: Consecutive ratios and the zero divisor
# - test_input_validator.py: Raw input parsing and the fault sentinel
# - test_error_classifier.py: Failure -> status/message mapping
# - test_sequence_store.py: Flat-file persistence
# - test_fibonacci_api.py: HTTP endpoints end to end
# - test_health.py: Health endpoints and settings
#
# Run tests with: poetry run pytest
# =============================================================================
