# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# The record store is built once per app (see create_app) and kept on
# app.state; handlers get a FruitService over it through Depends().
# =============================================================================

import logging
from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from core.services.fruit_service import FruitService
from lib.fruit_store import FruitStore
from lib.memory_store import InMemoryFruitStore
from lib.supabase_client import SupabaseFruitStore

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> FruitStore:
    """
    Create the record store selected by STORE_BACKEND.

    The Supabase client itself is created lazily on first use.
    """
    if settings.STORE_BACKEND == "memory":
        logger.warning("Using in-memory fruit store; data will not survive a restart")
        return InMemoryFruitStore()

    return SupabaseFruitStore(
        url=settings.SUPABASE_URL,
        service_key=settings.SUPABASE_SERVICE_KEY,
        table=settings.FRUITS_TABLE,
    )


def get_fruit_store(request: Request) -> FruitStore:
    """Return the store shared by every request to this app."""
    return request.app.state.fruit_store


def get_fruit_service(
    store: Annotated[FruitStore, Depends(get_fruit_store)],
) -> FruitService:
    """Wrap the shared store in a FruitService."""
    return FruitService(store)


# Type aliases for dependency injection
FruitStoreDep = Annotated[FruitStore, Depends(get_fruit_store)]
FruitServiceDep = Annotated[FruitService, Depends(get_fruit_service)]
