# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - fibonacci.py: Number, ratio and stored-sequence endpoints
# - health.py: Health check endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import fibonacci
from . import health

__all__ = [
    "fibonacci",
    "health",
]
