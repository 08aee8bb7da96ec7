# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Fruits app:
# - test_models.py: Fruit schemas and checkbox coercion
# - test_memory_store.py / test_supabase_store.py: Record store contract
# - test_fruit_service.py: CRUD and seeding
# - test_routes.py / test_middleware.py: HTTP behaviour via TestClient
# - test_config.py: Settings and store selection
#
# Run tests with: pytest
# =============================================================================
