# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Builds apps around an in-memory store so no database is needed
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("PORT", "3000")
os.environ.setdefault("ENVIRONMENT", "development")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from core.models.fruit import FruitCreate
from lib.memory_store import InMemoryFruitStore


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings():
    """Settings for a test app (explicit, not read from .env)."""
    return Settings(
        SUPABASE_URL="https://test-project.supabase.co",
        SUPABASE_SERVICE_KEY="test-service-key",
        PORT=3000,
        STORE_BACKEND="memory",
        _env_file=None,
    )


@pytest.fixture
def memory_store():
    """Empty in-memory fruit store."""
    return InMemoryFruitStore()


@pytest.fixture
def app(settings, memory_store):
    """App wired to the in-memory store."""
    return create_app(settings=settings, store=memory_store)


@pytest.fixture
def client(app):
    """Test client for the app (lifespan runs inside the with block)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def kiwi(memory_store):
    """A stored Kiwi fruit."""
    return memory_store.create_one(
        FruitCreate(name="Kiwi", color="green", ready_to_eat=True)
    )


@pytest.fixture
def sample_fruit_row():
    """A fruits table row as returned by Supabase."""
    return {
        "id": "550e8400-e29b-41d4-a716-446655440000",
        "name": "Kiwi",
        "color": "green",
        "ready_to_eat": True,
        "created_at": "2024-01-15T10:30:00+00:00",
    }
