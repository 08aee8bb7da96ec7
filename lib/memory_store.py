# =============================================================================
# lib/memory_store.py - In-Memory Fruit Store
# =============================================================================
# A process-local FruitStore backed by a dict. Used by the test suite and for
# local development with STORE_BACKEND=memory. Data is lost on restart.
# =============================================================================

import logging
from datetime import datetime, timezone
from typing import Sequence
from uuid import UUID, uuid4

from app.exceptions import FruitNotFoundError
from core.models.fruit import Fruit, FruitCreate, FruitUpdate
from lib.utils import normalize_fruit_id

logger = logging.getLogger(__name__)


class InMemoryFruitStore:
    """FruitStore keeping rows in insertion order in a dict keyed by id."""

    def __init__(self):
        self._rows: dict[str, dict] = {}

    def __len__(self) -> int:
        return len(self._rows)

    def _get_row(self, fruit_id: str | UUID) -> tuple[str, dict]:
        fruit_id_str = normalize_fruit_id(fruit_id)
        row = self._rows.get(fruit_id_str)
        if row is None:
            raise FruitNotFoundError(fruit_id_str)
        return fruit_id_str, row

    def list_all(self) -> list[Fruit]:
        return [Fruit(**row) for row in self._rows.values()]

    def create_many(self, records: Sequence[FruitCreate]) -> list[Fruit]:
        created = []
        for record in records:
            row = {
                "id": str(uuid4()),
                "created_at": datetime.now(timezone.utc),
                **record.to_row(),
            }
            self._rows[row["id"]] = row
            created.append(Fruit(**row))

        logger.debug(f"Inserted {len(created)} fruits in memory")
        return created

    def create_one(self, record: FruitCreate) -> Fruit:
        return self.create_many([record])[0]

    def find_by_id(self, fruit_id: str | UUID) -> Fruit:
        _, row = self._get_row(fruit_id)
        return Fruit(**row)

    def update_by_id(self, fruit_id: str | UUID, fields: FruitUpdate) -> Fruit:
        _, row = self._get_row(fruit_id)
        row.update(fields.to_row())
        return Fruit(**row)

    def delete_by_id(self, fruit_id: str | UUID) -> Fruit:
        fruit_id_str, row = self._get_row(fruit_id)
        del self._rows[fruit_id_str]
        return Fruit(**row)

    def delete_all(self) -> int:
        count = len(self._rows)
        self._rows.clear()
        return count

    def ping(self) -> None:
        return None
