"""
Logging and HTTP middleware.

Provides:
- Log configuration (readable lines in debug, JSON records otherwise)
- Request ids, propagated into every log record and the X-Request-ID header
- Request logging with timing
- Security headers for a JSON-only API
"""

import json
import logging
import sys
import time
import uuid
from contextvars import ContextVar
from typing import Callable, Optional

from fastapi import FastAPI, Request, Response
from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware

from traceright.core.config import Settings

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

request_logger = logging.getLogger("requests")

# Swagger UI pulls its assets from a CDN, so the docs pages keep the browser default
DOCS_PATHS = {"/docs", "/redoc", "/docs/oauth2-redirect"}

API_CSP = "default-src 'none'; frame-ancestors 'none'; base-uri 'none'; form-action 'none'"


def get_request_id() -> Optional[str]:
    return request_id_var.get()


class RequestIdFilter(logging.Filter):
    """Stamp the current request id onto every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"
        return True


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "request_id": getattr(record, "request_id", "-"),
            "msg": record.getMessage(),
        }
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def configure_logging(settings: Settings) -> None:
    """Install a single stdout handler on the root logger."""
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdFilter())
    if settings.debug:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)-7s [%(request_id)s] %(name)s: %(message)s"
        ))
    else:
        handler.setFormatter(JSONFormatter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(settings.log_level)


class HTTPSRedirectMiddleware(BaseHTTPMiddleware):
    """Redirect plain HTTP seen by the reverse proxy."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.headers.get("x-forwarded-proto") == "http":
            return RedirectResponse(url=str(request.url.replace(scheme="https")), status_code=301)
        return await call_next(request)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "no-referrer"
        if request.url.path not in DOCS_PATHS:
            response.headers["Content-Security-Policy"] = API_CSP
        return response


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Assign a request id and log each request with its outcome.

    The id is taken from X-Request-ID when the caller sends one.
    """

    HEADER_NAME = "X-Request-ID"
    EXCLUDED_PATHS = {"/health", "/health/ready", "/"}

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(self.HEADER_NAME) or uuid.uuid4().hex
        token = request_id_var.set(request_id)
        try:
            if request.url.path in self.EXCLUDED_PATHS:
                response = await call_next(request)
            else:
                response = await self._logged(request, call_next)
        finally:
            request_id_var.reset(token)
        response.headers[self.HEADER_NAME] = request_id
        return response

    async def _logged(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            request_logger.exception(
                f"{request.method} {request.url.path} failed after "
                f"{(time.perf_counter() - started) * 1000:.1f}ms"
            )
            raise
        request_logger.log(
            logging.WARNING if response.status_code >= 400 else logging.INFO,
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"in {(time.perf_counter() - started) * 1000:.1f}ms",
        )
        return response


def setup_observability(app: FastAPI, settings: Settings) -> None:
    """Add the middleware stack. Starlette runs the last one added first."""
    if not settings.debug:
        app.add_middleware(HTTPSRedirectMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestContextMiddleware)
