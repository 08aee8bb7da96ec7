# =============================================================================
# app/routers/ - Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - fruits.py: Fruit views, form handling and the seed endpoint
# - health.py: Health check endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import fruits
from . import health

__all__ = [
    "fruits",
    "health",
]
