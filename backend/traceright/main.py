"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from traceright.api.routes import api_router
from traceright.core.config import settings
from traceright.core.errors import register_exception_handlers
from traceright.core.observability import configure_logging, setup_observability
from traceright.core.rate_limit import limiter
from traceright.db.base import Base
from traceright.db.session import Store, StoreDep

import traceright.models  # noqa: F401  (registers tables on Base.metadata)

APP_VERSION = "1.0.0"

configure_logging(settings)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Starting TraceRight supply-chain API")

    store: Store = app.state.store
    # No migrations are shipped; create missing tables when a store is reachable
    if settings.create_tables and store.available:
        Base.metadata.create_all(bind=store.engine)
        logger.info("Database tables created")
    elif not store.available:
        logger.warning("Running in read-degraded mode: lists are empty and writes fail")

    yield

    store.dispose()
    logger.info("Shutting down TraceRight supply-chain API")


app = FastAPI(
    title="TraceRight Supply Chain API",
    description="Materials, suppliers, production, orders, shipments and warehouse management",
    version=APP_VERSION,
    lifespan=lifespan,
    redirect_slashes=True,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# Process-wide store handle; connects lazily on first use
app.state.store = Store(settings.database_url, echo=False)

# Rate limiting setup
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Error taxonomy -> {"kind", "detail"} responses
register_exception_handlers(app)

# HTTPS redirect (production), security headers, request ids and logging
setup_observability(app, settings)

# CORS middleware - MUST be added last so it runs first (Starlette LIFO order).
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=[
        "Content-Type",
        "Authorization",
        "Accept",
        "Origin",
        "X-Requested-With",
        "X-Request-ID",
    ],
    expose_headers=["X-Request-ID"],
    max_age=600,  # Cache preflight for 10 minutes
)

# Include API routes
app.include_router(api_router, prefix=settings.api_v1_prefix)


@app.get("/health")
def health_check():
    """Basic liveness check endpoint."""
    return {"status": "healthy", "version": APP_VERSION}


@app.get("/health/ready")
def readiness_check(store: StoreDep):
    """Readiness probe. The API keeps serving without a store, so this reports
    ``degraded`` rather than failing."""
    checks = {"database": "healthy" if store.available else "unavailable"}
    return {
        "status": "ready" if store.available else "degraded",
        "version": APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": checks,
    }


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "TraceRight Supply Chain API",
        "docs": "/docs",
        "health": "/health",
    }
