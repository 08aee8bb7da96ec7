# =============================================================================
# lib/supabase_client.py - Supabase Fruit Store
# =============================================================================
# This module provides the production FruitStore on top of a Supabase
# (PostgREST) table. It owns one lazily created client per store instance;
# the app creates a single store at startup and shares it across requests.
#
# Expected table (see scripts/create_fruits_table.sql):
#   fruits(id uuid, name text, color text, ready_to_eat boolean, created_at)
#
# Usage:
#   store = SupabaseFruitStore(url, service_key)
#   fruits = store.list_all()
# =============================================================================

from __future__ import annotations

import logging
from typing import Any, Sequence
from uuid import UUID

import httpx
from supabase import create_client, Client

from app.exceptions import (
    FruitNotFoundError,
    StoreError,
    StoreUnavailableError,
)
from core.models.fruit import Fruit, FruitCreate, FruitUpdate
from lib.utils import normalize_fruit_id

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgREST refuses unfiltered deletes, so delete_all filters on id != NIL_UUID
NIL_UUID = "00000000-0000-0000-0000-000000000000"

# PostgREST code for .single() matching no rows
NO_ROWS_CODE = "PGRST116"


class SupabaseFruitStore:
    """
    FruitStore backed by a Supabase table.

    Example:
        store = SupabaseFruitStore(
            url="https://xxx.supabase.co",
            service_key="...",
        )
        kiwi = store.create_one(FruitCreate(name="Kiwi", color="green"))
        store.find_by_id(kiwi.id)
    """

    def __init__(
        self,
        url: str,
        service_key: str,
        table: str = "fruits",
        client: Client | None = None,
    ):
        self.url = url
        self.service_key = service_key
        self.table = table
        self._client = client

    @property
    def client(self) -> Client:
        """
        Get or create the Supabase client.

        Uses the service_role key which bypasses Row Level Security (RLS).

        Raises:
            StoreUnavailableError: If client creation fails
        """
        if self._client is None:
            try:
                self._client = create_client(self.url, self.service_key)
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise StoreUnavailableError(f"Failed to create Supabase client: {e}")
        return self._client

    def _query(self):
        return self.client.table(self.table)

    def _execute(
        self,
        query,
        operation: str,
        fruit_id: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        Run a built query and return its rows.

        Args:
            query: A PostgREST request builder
            operation: Short description used in error messages
            fruit_id: The ID being looked up, for .single() queries

        Raises:
            StoreUnavailableError: On connection-level failures
            FruitNotFoundError: If a .single() query for fruit_id matched nothing
            StoreError: On any other failure
        """
        try:
            response = query.execute()
        except httpx.TransportError as e:
            raise StoreUnavailableError(str(e))
        except Exception as e:
            if fruit_id and NO_ROWS_CODE in str(e):
                raise FruitNotFoundError(fruit_id)
            raise StoreError(operation, str(e))

        data = response.data
        if data is None:
            return []
        return data if isinstance(data, list) else [data]

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def list_all(self) -> list[Fruit]:
        """
        Fetch every fruit, oldest first.

        Returns:
            List of Fruit records (possibly empty)
        """
        rows = self._execute(
            self._query().select("*").order("created_at"),
            "list fruits",
        )
        logger.debug(f"Fetched {len(rows)} fruits")
        return [Fruit(**row) for row in rows]

    def find_by_id(self, fruit_id: str | UUID) -> Fruit:
        """
        Fetch a specific fruit by ID.

        Raises:
            InvalidFruitIdError: If fruit_id is not a UUID
            FruitNotFoundError: If no fruit has that ID
        """
        fruit_id_str = normalize_fruit_id(fruit_id)

        rows = self._execute(
            self._query().select("*").eq("id", fruit_id_str).single(),
            "fetch fruit",
            fruit_id=fruit_id_str,
        )
        if not rows:
            raise FruitNotFoundError(fruit_id_str)
        return Fruit(**rows[0])

    def ping(self) -> None:
        """Cheapest round trip that proves the table is reachable."""
        self._execute(self._query().select("id").limit(1), "ping store")

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def create_many(self, records: Sequence[FruitCreate]) -> list[Fruit]:
        """
        Insert all records in one request.

        A failure aborts the whole insert; nothing is retried.

        Returns:
            The inserted fruits with their assigned IDs
        """
        if not records:
            return []

        rows = self._execute(
            self._query().insert([record.to_row() for record in records]),
            "insert fruits",
        )
        logger.info(f"Inserted {len(rows)} fruits")
        return [Fruit(**row) for row in rows]

    def create_one(self, record: FruitCreate) -> Fruit:
        created = self.create_many([record])
        if not created:
            raise StoreError("insert fruit", "Insert returned no data")
        return created[0]

    def update_by_id(self, fruit_id: str | UUID, fields: FruitUpdate) -> Fruit:
        """
        Replace name, color and ready_to_eat on one fruit.

        Returns:
            The updated fruit

        Raises:
            InvalidFruitIdError: If fruit_id is not a UUID
            FruitNotFoundError: If no fruit has that ID
        """
        fruit_id_str = normalize_fruit_id(fruit_id)

        rows = self._execute(
            self._query().update(fields.to_row()).eq("id", fruit_id_str),
            "update fruit",
        )
        if not rows:
            raise FruitNotFoundError(fruit_id_str)

        logger.info(f"Updated fruit: {fruit_id_str}")
        return Fruit(**rows[0])

    def delete_by_id(self, fruit_id: str | UUID) -> Fruit:
        """
        Delete one fruit.

        Returns:
            The deleted fruit

        Raises:
            InvalidFruitIdError: If fruit_id is not a UUID
            FruitNotFoundError: If no fruit has that ID
        """
        fruit_id_str = normalize_fruit_id(fruit_id)

        rows = self._execute(
            self._query().delete().eq("id", fruit_id_str),
            "delete fruit",
        )
        if not rows:
            raise FruitNotFoundError(fruit_id_str)

        logger.info(f"Deleted fruit: {fruit_id_str}")
        return Fruit(**rows[0])

    def delete_all(self) -> int:
        """
        Delete every fruit.

        Returns:
            Number of fruits deleted
        """
        rows = self._execute(
            self._query().delete().neq("id", NIL_UUID),
            "delete all fruits",
        )
        logger.info(f"Deleted {len(rows)} fruits")
        return len(rows)
