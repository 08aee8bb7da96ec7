# =============================================================================
# lib/fruit_store.py - Record Store Interface
# =============================================================================
# The data access contract shared by every fruit store implementation.
# Routes and services depend on this protocol, never on a concrete store, so
# tests can hand the app an in-memory store.
# =============================================================================

from typing import Protocol, Sequence, runtime_checkable
from uuid import UUID

from core.models.fruit import Fruit, FruitCreate, FruitUpdate


@runtime_checkable
class FruitStore(Protocol):
    """
    Typed accessors over the fruits collection.

    Each method is one request/response exchange with the backend. No
    caching, no retries.

    Raises (all methods):
        StoreUnavailableError: The backend cannot be reached
        StoreError: The backend rejected the operation
    Id-based methods also raise InvalidFruitIdError for malformed ids and
    FruitNotFoundError when no record matches.
    """

    def list_all(self) -> list[Fruit]: ...

    def create_many(self, records: Sequence[FruitCreate]) -> list[Fruit]: ...

    def create_one(self, record: FruitCreate) -> Fruit: ...

    def find_by_id(self, fruit_id: str | UUID) -> Fruit: ...

    def update_by_id(self, fruit_id: str | UUID, fields: FruitUpdate) -> Fruit: ...

    def delete_by_id(self, fruit_id: str | UUID) -> Fruit: ...

    def delete_all(self) -> int: ...

    def ping(self) -> None: ...
