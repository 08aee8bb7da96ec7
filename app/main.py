# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Fruits app.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:create_app --factory --reload
#   python -m app
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from app.config import Settings, get_settings
from app.dependencies import build_store
from app.exceptions import (
    FruitAppException,
    fruit_app_exception_handler,
    general_exception_handler,
)
from app.middleware import MethodOverrideMiddleware, log_requests
from app.routers import fruits, health
from app.templating import DEFAULT_STATIC_DIR, create_templates
from lib.fruit_store import FruitStore

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The store is created by create_app(); startup and shutdown only log.
    """
    settings: Settings = app.state.settings
    store = app.state.fruit_store

    logger.info(f"Starting Fruits app in {settings.ENVIRONMENT} mode")
    logger.info(f"Record store: {type(store).__name__}")

    yield

    logger.info("Shutting down Fruits app")


def create_app(
    settings: Settings | None = None,
    store: FruitStore | None = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: App settings (loaded from the environment when omitted)
        store: Record store to use (built from settings when omitted)

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()
    configure_logging(settings.DEBUG)

    app = FastAPI(
        title="Fruits",
        description="Server-rendered CRUD app for fruit records.",
        version=health.VERSION,
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Fruits",
                "description": "List, create, show, edit, update, delete and seed fruits",
            },
            {
                "name": "Health",
                "description": "App health and readiness checks",
            },
        ],
    )

    app.state.settings = settings
    app.state.fruit_store = store if store is not None else build_store(settings)
    app.state.templates = create_templates(settings.TEMPLATES_DIR)
    app.state.error_status_codes = settings.ERROR_STATUS_CODES

    # =========================================================================
    # Middleware
    # =========================================================================
    # Last registered runs first: the override must see the request
    # before the access log and routing do.

    app.middleware("http")(log_requests)
    app.add_middleware(MethodOverrideMiddleware, param="_method")

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(FruitAppException, fruit_app_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root():
        return "your server is running... better catch it"

    app.include_router(
        fruits.router,
        prefix="/fruits",
        tags=["Fruits"]
    )

    app.include_router(
        health.router,
        tags=["Health"]
    )

    # Public files; mounted last so it only sees paths no route matched
    app.mount(
        "/",
        StaticFiles(directory=settings.STATIC_DIR or DEFAULT_STATIC_DIR),
        name="static",
    )

    return app


def run() -> None:
    """Serve the app on HOST:PORT with uvicorn."""
    settings = get_settings()
    configure_logging(settings.DEBUG)
    logger.info(f"Listening on port {settings.PORT}")

    uvicorn.run(
        "app.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
