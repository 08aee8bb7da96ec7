# =============================================================================
# tests/test_supabase_store.py - Supabase Store Tests
# =============================================================================
# Tests SupabaseFruitStore against a mocked Supabase client:
# - Query building for each operation
# - Mapping of empty results and client errors to app exceptions
#
# Tests use mocked Supabase responses to avoid database calls.
# =============================================================================

from unittest.mock import MagicMock, patch

import httpx
import pytest

from app.exceptions import (
    FruitNotFoundError,
    InvalidFruitIdError,
    StoreError,
    StoreUnavailableError,
)
from core.models.fruit import FruitCreate, FruitUpdate
from lib.supabase_client import NIL_UUID, SupabaseFruitStore

FRUIT_ID = "550e8400-e29b-41d4-a716-446655440000"


@pytest.fixture
def mock_client():
    """Supabase client whose table() returns one reusable query mock."""
    client = MagicMock()
    query = client.table.return_value
    # Builder methods return the same mock so any chain ends at one execute()
    for method in ("select", "insert", "update", "delete", "eq", "neq", "order", "limit", "single"):
        getattr(query, method).return_value = query
    return client


@pytest.fixture
def query(mock_client):
    return mock_client.table.return_value


@pytest.fixture
def store(mock_client):
    return SupabaseFruitStore(
        url="https://test-project.supabase.co",
        service_key="test-service-key",
        table="fruits",
        client=mock_client,
    )


def respond(query, data):
    query.execute.return_value = MagicMock(data=data)


class TestClientCreation:
    """Test lazy client creation."""

    def test_client_created_once(self):
        with patch("lib.supabase_client.create_client") as create:
            store = SupabaseFruitStore("https://x.supabase.co", "key")

            assert store.client is store.client
            create.assert_called_once_with("https://x.supabase.co", "key")

    def test_client_creation_failure(self):
        with patch("lib.supabase_client.create_client", side_effect=Exception("Invalid API key")):
            store = SupabaseFruitStore("https://x.supabase.co", "bad")

            with pytest.raises(StoreUnavailableError):
                store.list_all()


class TestReads:
    """Test list_all and find_by_id."""

    def test_list_all(self, store, mock_client, query, sample_fruit_row):
        respond(query, [sample_fruit_row])

        fruits = store.list_all()

        mock_client.table.assert_called_with("fruits")
        query.order.assert_called_once_with("created_at")
        assert [f.name for f in fruits] == ["Kiwi"]

    def test_list_all_with_null_columns(self, store, query, sample_fruit_row):
        """Test rows written by other clients with NULL text columns."""
        respond(query, [{**sample_fruit_row, "name": None, "color": None}])

        [fruit] = store.list_all()

        assert fruit.name == ""
        assert fruit.color == ""

    def test_list_all_empty(self, store, query):
        respond(query, None)

        assert store.list_all() == []

    def test_find_by_id(self, store, query, sample_fruit_row):
        respond(query, sample_fruit_row)

        fruit = store.find_by_id(FRUIT_ID)

        query.eq.assert_called_once_with("id", FRUIT_ID)
        assert fruit.id == FRUIT_ID

    def test_find_by_id_no_rows(self, store, query):
        query.execute.side_effect = Exception(
            "{'code': 'PGRST116', 'message': 'JSON object requested, multiple (or no) rows returned'}"
        )

        with pytest.raises(FruitNotFoundError):
            store.find_by_id(FRUIT_ID)

    def test_find_by_id_invalid(self, store, query):
        """Test that malformed ids never reach the database."""
        with pytest.raises(InvalidFruitIdError):
            store.find_by_id("new")

        query.execute.assert_not_called()

    def test_connection_error(self, store, query):
        query.execute.side_effect = httpx.ConnectError("connection refused")

        with pytest.raises(StoreUnavailableError):
            store.list_all()

    def test_other_errors_are_store_errors(self, store, query):
        query.execute.side_effect = Exception("permission denied for table fruits")

        with pytest.raises(StoreError) as exc_info:
            store.list_all()

        assert exc_info.value.details["operation"] == "list fruits"


class TestWrites:
    """Test inserts, updates and deletes."""

    def test_create_many_sends_rows(self, store, query, sample_fruit_row):
        respond(query, [sample_fruit_row])

        created = store.create_many([FruitCreate(name="Kiwi", color="green", ready_to_eat=True)])

        query.insert.assert_called_once_with(
            [{"name": "Kiwi", "color": "green", "ready_to_eat": True}]
        )
        assert created[0].id == FRUIT_ID

    def test_create_many_empty_skips_request(self, store, query):
        assert store.create_many([]) == []
        query.execute.assert_not_called()

    def test_create_one_no_data(self, store, query):
        respond(query, [])

        with pytest.raises(StoreError):
            store.create_one(FruitCreate(name="Kiwi"))

    def test_update_by_id(self, store, query, sample_fruit_row):
        respond(query, [{**sample_fruit_row, "color": "brown"}])

        fruit = store.update_by_id(FRUIT_ID, FruitUpdate(name="Kiwi", color="brown"))

        query.update.assert_called_once_with(
            {"name": "Kiwi", "color": "brown", "ready_to_eat": False}
        )
        query.eq.assert_called_once_with("id", FRUIT_ID)
        assert fruit.color == "brown"

    def test_update_missing(self, store, query):
        respond(query, [])

        with pytest.raises(FruitNotFoundError):
            store.update_by_id(FRUIT_ID, FruitUpdate(name="Kiwi"))

    def test_delete_by_id(self, store, query, sample_fruit_row):
        respond(query, [sample_fruit_row])

        assert store.delete_by_id(FRUIT_ID).id == FRUIT_ID
        query.delete.assert_called_once()

    def test_delete_missing(self, store, query):
        respond(query, [])

        with pytest.raises(FruitNotFoundError):
            store.delete_by_id(FRUIT_ID)

    def test_delete_all(self, store, query, sample_fruit_row):
        respond(query, [sample_fruit_row, sample_fruit_row])

        assert store.delete_all() == 2
        query.neq.assert_called_once_with("id", NIL_UUID)
