# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the web application:
# - main.py: App factory, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - middleware.py: Request logging and HTML form method override
# - routers/: Route definitions organized by feature
# - templates/, static/: Server-rendered views and public assets
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================
