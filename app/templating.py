# =============================================================================
# app/templating.py - View Renderer
# =============================================================================
# Jinja2 template rendering for the HTML views.
# Each app holds its own Jinja2Templates instance on app.state.templates so
# tests can point an app at a different templates directory.
# =============================================================================

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_TEMPLATES_DIR = PACKAGE_DIR / "templates"
DEFAULT_STATIC_DIR = PACKAGE_DIR / "static"


def create_templates(directory: str | Path | None = None) -> Jinja2Templates:
    """Build the template environment, defaulting to app/templates."""
    return Jinja2Templates(directory=str(directory or DEFAULT_TEMPLATES_DIR))


def render(request: Request, name: str, context: dict[str, Any] | None = None) -> Response:
    """
    Render a named template with the given context.

    Rendering errors are not caught here; they reach the app's generic
    exception handler.
    """
    templates: Jinja2Templates = request.app.state.templates
    return templates.TemplateResponse(request, name, context or {})
