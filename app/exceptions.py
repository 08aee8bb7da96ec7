# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the app.
# Stores and services raise these; the handlers below turn them into a JSON
# error body once, at the HTTP boundary.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class FruitAppException(Exception):
    """
    Base exception for the Fruits app.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "FRUITS_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Lookup Exceptions
# =============================================================================

class FruitNotFoundError(FruitAppException):
    """Raised when no fruit has the given ID."""

    def __init__(self, fruit_id: str):
        super().__init__(
            message=f"Fruit not found: {fruit_id}",
            code="FRUIT_NOT_FOUND",
            status_code=404,
            suggestion="Check that the fruit_id is correct and the fruit hasn't been deleted",
            details={"fruit_id": fruit_id}
        )


class InvalidFruitIdError(FruitAppException):
    """Raised when a fruit ID is not a well-formed UUID."""

    def __init__(self, fruit_id: str):
        super().__init__(
            message=f"Invalid fruit id: {fruit_id}",
            code="INVALID_FRUIT_ID",
            status_code=400,
            suggestion="Fruit ids are UUIDs, e.g. 550e8400-e29b-41d4-a716-446655440000",
            details={"fruit_id": fruit_id}
        )


# =============================================================================
# Store Exceptions
# =============================================================================

class StoreUnavailableError(FruitAppException):
    """Raised when the record store cannot be reached."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Record store unavailable: {error}",
            code="STORE_UNAVAILABLE",
            status_code=503,
            suggestion="Check SUPABASE_URL and that the database is reachable",
            details={"error": error}
        )


class StoreError(FruitAppException):
    """Raised when the record store rejects an operation."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            message=f"Failed to {operation}: {error}",
            code="STORE_ERROR",
            status_code=500,
            suggestion="Try again later or check the fruits table schema",
            details={"operation": operation, "error": error}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def fruit_app_exception_handler(
    request: Request,
    exc: FruitAppException
) -> JSONResponse:
    """
    Convert FruitAppException to a JSON error response.

    The body is always {"error": {...}}. The status is 200 unless the app
    was created with error status codes enabled, in which case the
    exception's own status is used.
    """
    logger.warning(f"{request.method} {request.url.path} failed: [{exc.code}] {exc.message}")

    use_status = getattr(request.app.state, "error_status_codes", False)
    return JSONResponse(
        status_code=exc.status_code if use_status else 200,
        content={"error": exc.to_dict()}
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions, including template rendering failures."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )
