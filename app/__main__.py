# =============================================================================
# app/__main__.py - Run the server with `python -m app`
# =============================================================================

from app.main import run

run()
