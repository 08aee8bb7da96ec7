# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - fruit.py: Fruit record schemas and form coercion
#
# These models define the "contract" between the store, routes and templates.
# =============================================================================

from .fruit import (
    Fruit,
    FruitBase,
    FruitCreate,
    FruitUpdate,
    checkbox_to_bool,
)

__all__ = [
    "Fruit",
    "FruitBase",
    "FruitCreate",
    "FruitUpdate",
    "checkbox_to_bool",
]
