"""Generic single-statement data access over a ``Store``.

Every helper opens its own short-lived session. Reads degrade when the store
is unavailable (empty list / None); writes raise ``StoreUnavailable``.
"""

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

from sqlalchemy import delete, select, update

from traceright.core.errors import StoreUnavailable
from traceright.db.base import Base
from traceright.db.session import Store
from traceright.schemas.common import InsertResult

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def list_rows(store: Store, model: Type[ModelT], *criteria) -> List[ModelT]:
    """Rows newest first; ties broken by id so inserts in the same second stay ordered."""
    with store.session() as db:
        if db is None:
            return []
        stmt = (
            select(model)
            .where(*criteria)
            .order_by(model.created_at.desc(), model.id.desc())
        )
        return list(db.scalars(stmt).all())


def get_row(store: Store, model: Type[ModelT], row_id: int) -> Optional[ModelT]:
    with store.session() as db:
        if db is None:
            return None
        return db.get(model, row_id)


def insert_row(store: Store, model: Type[ModelT], values: Dict[str, Any]) -> InsertResult:
    with store.session() as db:
        if db is None:
            raise StoreUnavailable()
        row = model(**values)
        db.add(row)
        db.commit()
        logger.debug(f"Inserted {model.__tablename__} id={row.id}")
        return InsertResult(id=row.id, affected_rows=1)


def update_row(store: Store, model: Type[ModelT], row_id: int, changes: Dict[str, Any]) -> int:
    """Apply ``changes`` to one row. Returns the number of rows touched."""
    with store.session() as db:
        if db is None:
            raise StoreUnavailable()
        if not changes:
            return 0
        result = db.execute(
            update(model).where(model.id == row_id).values(**changes)
        )
        db.commit()
        return result.rowcount


def delete_row(store: Store, model: Type[ModelT], row_id: int) -> int:
    """Delete one row. A missing id is not an error."""
    with store.session() as db:
        if db is None:
            raise StoreUnavailable()
        result = db.execute(delete(model).where(model.id == row_id))
        db.commit()
        return result.rowcount
