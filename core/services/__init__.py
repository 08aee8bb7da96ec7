# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .fruit_service import FruitService, SEED_FRUITS

__all__ = [
    "FruitService",
    "SEED_FRUITS",
]
