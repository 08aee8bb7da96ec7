# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the fruit business logic:
# - models/: Pydantic schemas for fruit records
# - services/: FruitService (CRUD and seeding over a FruitStore)
#
# Code in this package should NOT import from FastAPI.
# This keeps the logic testable and reusable.
# =============================================================================
