"""User persistence: lookup and the sign-in upsert."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import func, select
from sqlalchemy.dialects import mysql, postgresql, sqlite

from traceright.core.errors import StoreUnavailable, ValidationError
from traceright.db.session import Store
from traceright.models.user import User, UserRole
from traceright.schemas.user import UserUpsert

logger = logging.getLogger(__name__)

# Optional attributes merged on upsert only when the caller supplied them
_MERGEABLE_FIELDS = ("name", "email", "login_method")


def _insert_for(dialect_name: str):
    if dialect_name == "postgresql":
        return postgresql.insert
    if dialect_name in ("mysql", "mariadb"):
        return mysql.insert
    if dialect_name == "sqlite":
        return sqlite.insert
    raise StoreUnavailable(f"User upsert is not supported on {dialect_name}")


def build_upsert_values(data: UserUpsert, owner_open_id: Optional[str] = None):
    """Split an upsert payload into (insert values, on-conflict update set).

    Only fields the caller supplied are merged; an explicit ``None`` is kept
    and written as NULL. ``last_signed_in`` defaults to now. The owner is
    elevated to admin unless a role was given.
    """
    if not data.open_id:
        raise ValidationError("User openId is required for upsert")

    supplied = data.model_fields_set
    values: Dict[str, Any] = {"open_id": data.open_id}
    update_set: Dict[str, Any] = {}

    for field in _MERGEABLE_FIELDS:
        if field in supplied:
            values[field] = getattr(data, field)
            update_set[field] = getattr(data, field)

    if data.last_signed_in is not None:
        values["last_signed_in"] = data.last_signed_in
        update_set["last_signed_in"] = data.last_signed_in

    if data.role is not None:
        values["role"] = data.role
        update_set["role"] = data.role
    elif owner_open_id and data.open_id == owner_open_id:
        values["role"] = UserRole.ADMIN
        update_set["role"] = UserRole.ADMIN

    now = datetime.now(timezone.utc)
    if "last_signed_in" not in values:
        values["last_signed_in"] = now
    if not update_set:
        update_set["last_signed_in"] = now

    return values, update_set


def upsert_user(store: Store, data: UserUpsert, owner_open_id: Optional[str] = None) -> None:
    """Insert the user or merge the supplied fields into the existing row.

    Without a store the call is logged and skipped so sign-in still completes.
    """
    values, update_set = build_upsert_values(data, owner_open_id)

    with store.session() as db:
        if db is None:
            logger.warning("[Database] Cannot upsert user: database not available")
            return
        # Core upserts skip Python-side onupdate hooks
        update_set = {**update_set, "updated_at": func.now()}
        insert = _insert_for(db.bind.dialect.name)
        stmt = insert(User).values(**values)
        if insert is mysql.insert:
            stmt = stmt.on_duplicate_key_update(**update_set)
        else:
            stmt = stmt.on_conflict_do_update(index_elements=[User.open_id], set_=update_set)
        db.execute(stmt)
        db.commit()
        logger.info(f"Upserted user {data.open_id}")


def get_user_by_open_id(store: Store, open_id: str) -> Optional[User]:
    with store.session() as db:
        if db is None:
            logger.warning("[Database] Cannot get user: database not available")
            return None
        return db.scalars(select(User).where(User.open_id == open_id).limit(1)).first()
