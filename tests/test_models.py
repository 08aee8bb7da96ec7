# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the fruit models to ensure:
# - Checkbox form values are coerced to booleans
# - Rows in snake_case and payloads in camelCase both parse
# - Records serialize with the readyToEat alias
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import (
    Fruit,
    FruitCreate,
    FruitUpdate,
    checkbox_to_bool,
)


# =============================================================================
# Checkbox Coercion Tests
# =============================================================================

class TestCheckboxToBool:
    """Tests for checkbox_to_bool."""

    def test_on_is_true(self):
        assert checkbox_to_bool("on") is True

    @pytest.mark.parametrize("value", [None, "", "off", "true", "ON", "1"])
    def test_anything_else_is_false(self, value):
        """Only the exact browser value "on" counts as checked."""
        assert checkbox_to_bool(value) is False


# =============================================================================
# Fruit Model Tests
# =============================================================================

class TestFruitCreate:
    """Tests for FruitCreate."""

    def test_from_form_checked(self):
        """Test building a fruit from a form with the box checked."""
        fruit = FruitCreate.from_form(name="Kiwi", color="green", ready_to_eat="on")

        assert fruit.name == "Kiwi"
        assert fruit.color == "green"
        assert fruit.ready_to_eat is True

    def test_from_form_unchecked(self):
        """Test that a missing checkbox means not ready to eat."""
        fruit = FruitCreate.from_form(name="Kiwi", color="green")

        assert fruit.ready_to_eat is False

    def test_accepts_alias(self):
        """Test that the camelCase alias populates ready_to_eat."""
        fruit = FruitCreate(name="Kiwi", color="green", readyToEat=True)

        assert fruit.ready_to_eat is True

    def test_to_row_uses_column_names(self):
        """Test that rows use the table's snake_case columns."""
        row = FruitUpdate(name="Fig", color="purple", ready_to_eat=True).to_row()

        assert row == {"name": "Fig", "color": "purple", "ready_to_eat": True}


class TestFruit:
    """Tests for stored Fruit records."""

    def test_parses_table_row(self, sample_fruit_row):
        """Test creating a Fruit from a Supabase row."""
        fruit = Fruit(**sample_fruit_row)

        assert fruit.id == sample_fruit_row["id"]
        assert fruit.ready_to_eat is True
        assert fruit.created_at is not None

    def test_id_is_required(self):
        """Test that a stored fruit must have an id."""
        with pytest.raises(ValidationError):
            Fruit(name="Kiwi", color="green")

    def test_null_columns_load_as_defaults(self, sample_fruit_row):
        """Test that NULL name/color/flag from the table don't fail validation."""
        row = {**sample_fruit_row, "name": None, "color": None, "ready_to_eat": None}

        fruit = Fruit(**row)

        assert fruit.name == ""
        assert fruit.color == ""
        assert fruit.ready_to_eat is False

    def test_to_json_uses_alias(self, sample_fruit_row):
        """Test JSON output uses readyToEat."""
        data = Fruit(**sample_fruit_row).to_json()

        assert data["readyToEat"] is True
        assert "ready_to_eat" not in data
        assert data["name"] == "Kiwi"
        assert data["id"] == sample_fruit_row["id"]

    def test_to_json_skips_missing_timestamp(self):
        data = Fruit(id="550e8400-e29b-41d4-a716-446655440000", name="Fig").to_json()

        assert "created_at" not in data
