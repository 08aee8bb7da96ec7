# =============================================================================
# lib/ - Record Store Modules
# =============================================================================
# This package contains the fruit data access layer:
# - fruit_store.py: FruitStore protocol shared by all stores
# - supabase_client.py: Supabase-backed store (production)
# - memory_store.py: In-process store (tests, local development)
# - utils.py: Shared utilities (fruit ID validation)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.fruit_store import FruitStore
from lib.memory_store import InMemoryFruitStore
from lib.supabase_client import SupabaseFruitStore
from lib.utils import normalize_fruit_id

__all__ = [
    "FruitStore",
    "InMemoryFruitStore",
    "SupabaseFruitStore",
    "normalize_fruit_id",
]
