"""Feature flag routes.

Reads are open to any signed-in user; create, update, toggle and delete are
admin-only.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Request

from traceright.core.rate_limit import limiter
from traceright.core.rbac import CurrentUser, UserRole, require_role
from traceright.db.session import StoreDep
from traceright.models.user import User
from traceright.schemas.common import SuccessResponse
from traceright.schemas.feature_flag import FeatureFlagCreate, FeatureFlagResponse, FeatureFlagUpdate
from traceright.services import feature_flag_service

router = APIRouter()

AdminToCreate = Annotated[User, Depends(require_role(UserRole.ADMIN, "Only admins can create feature flags"))]
AdminToUpdate = Annotated[User, Depends(require_role(UserRole.ADMIN, "Only admins can update feature flags"))]
AdminToToggle = Annotated[User, Depends(require_role(UserRole.ADMIN, "Only admins can toggle feature flags"))]
AdminToDelete = Annotated[User, Depends(require_role(UserRole.ADMIN, "Only admins can delete feature flags"))]


@router.get("/", response_model=list[FeatureFlagResponse], name="featureFlags.list")
@limiter.limit("60/minute")
def list_feature_flags(request: Request, store: StoreDep):
    return feature_flag_service.get_all_feature_flags(store)


@router.get("/by-key/{key}", response_model=Optional[FeatureFlagResponse], name="featureFlags.get")
@limiter.limit("60/minute")
def get_feature_flag(request: Request, key: str, store: StoreDep):
    return feature_flag_service.get_feature_flag_by_key(store, key)


@router.get("/by-key/{key}/enabled", response_model=bool, name="featureFlags.isEnabled")
@limiter.limit("120/minute")
def is_feature_enabled(request: Request, key: str, store: StoreDep, current_user: CurrentUser):
    """Whether the flag is on for the caller's role. Polled by the client UI."""
    return feature_flag_service.is_feature_enabled(store, key, current_user.role)


@router.post("/", response_model=SuccessResponse, name="featureFlags.create")
@limiter.limit("30/minute")
def create_feature_flag(request: Request, data: FeatureFlagCreate, store: StoreDep, admin: AdminToCreate):
    feature_flag_service.create_feature_flag(store, data)
    return SuccessResponse()


@router.put("/{flag_id}", response_model=SuccessResponse, name="featureFlags.update")
@limiter.limit("30/minute")
def update_feature_flag(
    request: Request, flag_id: int, patch: FeatureFlagUpdate, store: StoreDep, admin: AdminToUpdate
):
    feature_flag_service.update_feature_flag(store, flag_id, patch)
    return SuccessResponse()


@router.post("/{flag_id}/toggle", response_model=SuccessResponse, name="featureFlags.toggle")
@limiter.limit("30/minute")
def toggle_feature_flag(request: Request, flag_id: int, store: StoreDep, admin: AdminToToggle):
    """Flip the enabled bit. Succeeds even when no flag has this id."""
    feature_flag_service.toggle_feature_flag(store, flag_id)
    return SuccessResponse()


@router.delete("/{flag_id}", response_model=SuccessResponse, name="featureFlags.delete")
@limiter.limit("30/minute")
def delete_feature_flag(request: Request, flag_id: int, store: StoreDep, admin: AdminToDelete):
    feature_flag_service.delete_feature_flag(store, flag_id)
    return SuccessResponse()
