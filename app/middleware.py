# =============================================================================
# app/middleware.py - Request Middleware
# =============================================================================
# - log_requests: one access-log line per request
#       GET /fruits 200 1532 - 3.214 ms
# - MethodOverrideMiddleware: lets HTML forms (GET/POST only) reach PUT and
#   DELETE routes by posting to e.g. /fruits/<id>?_method=DELETE
#
# Register the override last so it runs first and the access log shows the
# effective method.
# =============================================================================

import logging
import time
from typing import Awaitable, Callable, Iterable
from urllib.parse import parse_qs

from fastapi import Request
from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)

# Methods a form may ask for through the override parameter
OVERRIDE_METHODS = frozenset({"PUT", "PATCH", "DELETE"})


async def log_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Log method, path, status, response size and duration."""
    start = time.perf_counter()
    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"

    try:
        response = await call_next(request)
    except Exception as e:
        duration_ms = (time.perf_counter() - start) * 1000
        logger.error(
            f"{request.method} {path} failed - {type(e).__name__}: {e} ({duration_ms:.3f} ms)"
        )
        raise

    duration_ms = (time.perf_counter() - start) * 1000
    length = response.headers.get("content-length", "-")
    logger.info(f"{request.method} {path} {response.status_code} {length} - {duration_ms:.3f} ms")
    return response


class MethodOverrideMiddleware:
    """
    Rewrite the request method from a query parameter.

    Only requests whose real method is in `methods` (POST by default) are
    considered, and only overrides in OVERRIDE_METHODS are honored. The body
    is never read, so form parsing downstream is unaffected.
    """

    def __init__(
        self,
        app: ASGIApp,
        param: str = "_method",
        methods: Iterable[str] = ("POST",),
    ):
        self.app = app
        self.param = param
        self.methods = frozenset(m.upper() for m in methods)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["method"] in self.methods:
            override = self._requested_method(scope)
            if override:
                logger.debug(f"Method override: {scope['method']} -> {override} {scope['path']}")
                scope = dict(scope, method=override)

        await self.app(scope, receive, send)

    def _requested_method(self, scope: Scope) -> str | None:
        query = parse_qs(scope.get("query_string", b"").decode("latin-1"))
        values = query.get(self.param)
        if not values:
            return None

        method = values[0].strip().upper()
        return method if method in OVERRIDE_METHODS else None
