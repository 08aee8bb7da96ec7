# =============================================================================
# core/models/fruit.py - Fruit Schemas
# =============================================================================
# These models define the contract for fruit records:
# - FruitCreate: Fields submitted when creating a fruit
# - FruitUpdate: Fields submitted when editing a fruit (full replace)
# - Fruit: A stored fruit, including its store-assigned id
#
# Records are stored with snake_case columns (ready_to_eat) and serialized to
# clients with the readyToEat alias.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


def checkbox_to_bool(value: str | None) -> bool:
    """
    Convert an HTML checkbox form value to a boolean.

    Browsers send "on" for a checked box and omit the field otherwise, so
    only the exact string "on" counts as checked.
    """
    return value == "on"


class FruitBase(BaseModel):
    """
    Editable fruit fields.

    Example:
        {
            "name": "Kiwi",
            "color": "green",
            "readyToEat": true
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(
        default="",
        description="Fruit name"
    )

    color: str = Field(
        default="",
        description="Fruit color"
    )

    ready_to_eat: bool = Field(
        default=False,
        alias="readyToEat",
        description="Whether the fruit is ready to eat"
    )

    @field_validator("name", "color", mode="before")
    @classmethod
    def null_text_to_empty(cls, value):
        """Rows written by other clients may hold NULL text columns."""
        return "" if value is None else value

    @field_validator("ready_to_eat", mode="before")
    @classmethod
    def null_flag_to_false(cls, value):
        return False if value is None else value

    @classmethod
    def from_form(
        cls,
        name: str = "",
        color: str = "",
        ready_to_eat: str | None = None,
    ):
        """Build the model from URL-encoded form fields."""
        return cls(
            name=name,
            color=color,
            ready_to_eat=checkbox_to_bool(ready_to_eat),
        )

    def to_row(self) -> dict:
        """Column values for the fruits table."""
        return self.model_dump(include={"name", "color", "ready_to_eat"})


class FruitCreate(FruitBase):
    """Schema for creating a new fruit."""


class FruitUpdate(FruitBase):
    """
    Schema for updating a fruit.

    Updates replace name, color and readyToEat together; omitted fields take
    their defaults rather than keeping the stored value.
    """


class Fruit(FruitBase):
    """
    A stored fruit record.

    Returned by every store read and write.
    """

    id: str = Field(
        ...,
        description="Unique fruit identifier (UUID), assigned by the store"
    )

    created_at: datetime | None = Field(
        default=None,
        description="Timestamp when the fruit was created"
    )

    def to_json(self) -> dict:
        """Serialize for JSON responses (camelCase readyToEat)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
