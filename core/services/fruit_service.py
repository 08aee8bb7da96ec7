# =============================================================================
# core/services/fruit_service.py - Fruit Business Logic
# =============================================================================
# Handles fruit CRUD operations and seeding.
# Separates HTTP concerns from database/business logic.
# =============================================================================

import logging
from uuid import UUID

from core.models.fruit import Fruit, FruitCreate, FruitUpdate
from lib.fruit_store import FruitStore

logger = logging.getLogger(__name__)


# Starter data written by the seed route
SEED_FRUITS: tuple[FruitCreate, ...] = (
    FruitCreate(name="Orange", color="orange", ready_to_eat=False),
    FruitCreate(name="Grape", color="purple", ready_to_eat=False),
    FruitCreate(name="Banana", color="orange", ready_to_eat=False),
    FruitCreate(name="Strawberry", color="red", ready_to_eat=False),
    FruitCreate(name="Coconut", color="brown", ready_to_eat=False),
)


class FruitService:
    """
    Service for fruit management operations.

    Provides a clean interface between routes and the record store. Store
    errors (FruitNotFoundError, InvalidFruitIdError, StoreError,
    StoreUnavailableError) propagate unchanged to the exception handlers.
    """

    def __init__(self, store: FruitStore):
        self.store = store

    def list_fruits(self) -> list[Fruit]:
        """Return every fruit in the store."""
        return self.store.list_all()

    def get_fruit(self, fruit_id: str | UUID) -> Fruit:
        """
        Get a fruit by ID.

        Raises:
            InvalidFruitIdError: If fruit_id is malformed
            FruitNotFoundError: If the fruit doesn't exist
        """
        return self.store.find_by_id(fruit_id)

    def create_fruit(self, fruit: FruitCreate) -> Fruit:
        """
        Create a new fruit.

        Args:
            fruit: Validated fruit fields (see FruitBase.from_form)

        Returns:
            The created fruit with its assigned ID
        """
        created = self.store.create_one(fruit)
        logger.info(f"Created fruit: {created.id} ({created.name})")
        return created

    def update_fruit(self, fruit_id: str | UUID, fields: FruitUpdate) -> Fruit:
        """
        Replace a fruit's name, color and ready_to_eat flag.

        Raises:
            InvalidFruitIdError: If fruit_id is malformed
            FruitNotFoundError: If the fruit doesn't exist
        """
        updated = self.store.update_by_id(fruit_id, fields)
        logger.info(f"Updated fruit: {updated.id}")
        return updated

    def delete_fruit(self, fruit_id: str | UUID) -> None:
        """
        Delete a fruit.

        Raises:
            InvalidFruitIdError: If fruit_id is malformed
            FruitNotFoundError: If the fruit doesn't exist
        """
        deleted = self.store.delete_by_id(fruit_id)
        logger.info(f"Deleted fruit: {deleted.id}")

    def seed_fruits(self) -> list[Fruit]:
        """
        Wipe the store and insert the starter fruits.

        Running it repeatedly always leaves exactly the SEED_FRUITS records.

        Returns:
            The created starter fruits
        """
        removed = self.store.delete_all()
        created = self.store.create_many(list(SEED_FRUITS))
        logger.info(f"Seeded {len(created)} fruits (removed {removed})")
        return created
