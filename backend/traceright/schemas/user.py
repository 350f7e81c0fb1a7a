"""User schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from traceright.models.user import UserRole


class UserUpsert(BaseModel):
    """Upsert payload keyed by ``open_id``.

    Optional fields that are left out are not touched on conflict; fields sent
    as ``None`` are written as NULL.
    """

    open_id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    login_method: Optional[str] = None
    last_signed_in: Optional[datetime] = None
    role: Optional[UserRole] = None


class SignInRequest(BaseModel):
    """Identity posted to direct sign-in. Roles are never taken from the caller."""

    open_id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    login_method: Optional[str] = None


class UserResponse(BaseModel):
    """User response schema."""

    id: int
    open_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    login_method: Optional[str] = None
    role: UserRole
    created_at: datetime
    updated_at: datetime
    last_signed_in: datetime

    model_config = {"from_attributes": True}
