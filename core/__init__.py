# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic business logic:
# - errors.py: DomainError taxonomy
# - models/: Pydantic schemas (FibonacciSequence)
# - services/: Generation, ratios, input parsing, error classification
#   and the flat-file sequence store
#
# Code in this package should NOT import from FastAPI.
# This keeps the logic testable and reusable.
# =============================================================================
