"""Database store handle.

A single ``Store`` is built per process and injected into every route through
the ``get_store`` dependency. The engine is created lazily on first use and
memoized; when no database URL is configured or the first connection attempt
fails, the handle stays ``None`` for the life of the process and the
data-access layer runs degraded (reads return empty results, writes raise
``StoreUnavailable``).
"""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Annotated, Any, Dict, Optional

from fastapi import Depends, Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


def _engine_options(database_url: str) -> Dict[str, Any]:
    """Pool/connect options per backend."""
    if database_url.startswith("sqlite"):
        options: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # Keep one shared connection so every session sees the same in-memory DB
            options["poolclass"] = StaticPool
        return options
    # PostgreSQL/MySQL connection pooling configuration
    return {
        "pool_size": 10,
        "max_overflow": 20,
        "pool_pre_ping": True,    # Test connections before using them
        "pool_recycle": 3600,     # Recycle connections after 1 hour
    }


class Store:
    """Lazily-connected handle to the relational store."""

    def __init__(self, database_url: Optional[str], echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self._engine: Optional[Engine] = None
        self._sessionmaker: Optional[sessionmaker] = None
        self._resolved = False
        self._lock = threading.Lock()

    @property
    def engine(self) -> Optional[Engine]:
        """The engine, or None when the store is unavailable.

        Resolution happens once; a failed attempt is not retried.
        """
        if not self._resolved:
            with self._lock:
                if not self._resolved:
                    self._engine = self._connect()
                    if self._engine is not None:
                        self._sessionmaker = sessionmaker(
                            bind=self._engine,
                            autoflush=False,
                            expire_on_commit=False,
                        )
                    self._resolved = True
        return self._engine

    @property
    def available(self) -> bool:
        return self.engine is not None

    def _connect(self) -> Optional[Engine]:
        if not self.database_url:
            logger.warning("[Database] DATABASE_URL not set; running without a database")
            return None
        try:
            engine = create_engine(
                self.database_url,
                echo=self.echo,
                **_engine_options(self.database_url),
            )
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except Exception as e:
            logger.warning(f"[Database] Failed to connect: {e}")
            return None
        logger.info("[Database] Connected")
        return engine

    @contextmanager
    def session(self) -> Iterator[Optional[Session]]:
        """Yield a session, or None when the store is unavailable."""
        if self.engine is None:
            yield None
            return
        db = self._sessionmaker()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()


def get_store(request: Request) -> Store:
    """Store dependency: the process-wide handle built at startup."""
    return request.app.state.store


# Type alias for dependency injection
StoreDep = Annotated[Store, Depends(get_store)]
