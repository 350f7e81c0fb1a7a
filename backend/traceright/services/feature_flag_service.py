"""Feature flags.

A flag grants access when its enabled bit is 1 and, for admin-only flags,
the caller is an admin. Mutations are admin-gated at the route layer.
"""

import logging
from typing import List, Optional

from sqlalchemy import select

from traceright.core.errors import StoreUnavailable
from traceright.db.session import Store
from traceright.models.feature_flag import FeatureFlag
from traceright.models.user import UserRole
from traceright.schemas.feature_flag import FeatureFlagCreate, FeatureFlagUpdate
from traceright.schemas.common import InsertResult
from traceright.services.crud import delete_row, get_row, insert_row, list_rows, update_row

logger = logging.getLogger(__name__)


def flag_grants_access(flag: Optional[FeatureFlag], role: Optional[UserRole]) -> bool:
    """Pure enablement predicate."""
    if flag is None or flag.enabled == 0:
        return False
    if flag.required_role == UserRole.ADMIN and role != UserRole.ADMIN:
        return False
    return True


def get_all_feature_flags(store: Store) -> List[FeatureFlag]:
    return list_rows(store, FeatureFlag)


def get_feature_flag_by_id(store: Store, flag_id: int) -> Optional[FeatureFlag]:
    return get_row(store, FeatureFlag, flag_id)


def get_feature_flag_by_key(store: Store, key: str) -> Optional[FeatureFlag]:
    with store.session() as db:
        if db is None:
            return None
        return db.scalars(select(FeatureFlag).where(FeatureFlag.key == key).limit(1)).first()


def is_feature_enabled(store: Store, key: str, role: Optional[UserRole] = None) -> bool:
    return flag_grants_access(get_feature_flag_by_key(store, key), role)


def create_feature_flag(store: Store, data: FeatureFlagCreate) -> InsertResult:
    result = insert_row(store, FeatureFlag, data.model_dump())
    logger.info(f"Feature flag created: {data.key}")
    return result


def update_feature_flag(store: Store, flag_id: int, patch: FeatureFlagUpdate) -> None:
    update_row(store, FeatureFlag, flag_id, patch.changes())


def toggle_feature_flag(store: Store, flag_id: int) -> None:
    """Flip the enabled bit. A missing id is a silent no-op."""
    if not store.available:
        raise StoreUnavailable()
    flag = get_feature_flag_by_id(store, flag_id)
    if flag is None:
        logger.debug(f"Toggle requested for missing feature flag id={flag_id}")
        return
    enabled = 0 if flag.enabled else 1
    update_row(store, FeatureFlag, flag_id, {"enabled": enabled})
    logger.info(f"Feature flag {flag.key} toggled to {enabled}")


def delete_feature_flag(store: Store, flag_id: int) -> None:
    delete_row(store, FeatureFlag, flag_id)
