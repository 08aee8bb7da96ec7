# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used by the record stores.
# =============================================================================

from uuid import UUID

from app.exceptions import InvalidFruitIdError


# =============================================================================
# UUID Utilities
# =============================================================================

def normalize_fruit_id(value: str | UUID) -> str:
    """
    Validate a fruit ID and normalize it to canonical UUID string format.

    Args:
        value: UUID as string or UUID object

    Returns:
        Lower-case hyphenated UUID string

    Raises:
        InvalidFruitIdError: If the value is not a well-formed UUID

    Example:
        fruit_id = normalize_fruit_id(uuid_obj)  # "550e8400-..."
        fruit_id = normalize_fruit_id("550E8400E29B41D4A716446655440000")  # "550e8400-..."
    """
    if isinstance(value, UUID):
        return str(value)
    try:
        return str(UUID(value))
    except (TypeError, ValueError, AttributeError):
        raise InvalidFruitIdError(str(value))
