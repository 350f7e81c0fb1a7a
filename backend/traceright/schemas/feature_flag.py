"""Feature flag schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from traceright.models.user import UserRole
from traceright.schemas.common import NonEmptyStr, PatchModel


class FeatureFlagCreate(BaseModel):
    """Feature flag creation schema."""

    key: NonEmptyStr
    name: NonEmptyStr
    description: Optional[str] = None
    enabled: int = Field(default=0, ge=0, le=1)
    category: Optional[str] = None
    required_role: UserRole = UserRole.USER


class FeatureFlagUpdate(PatchModel):
    """Feature flag update schema. ``key`` is immutable."""

    name: Optional[NonEmptyStr] = None
    description: Optional[str] = None
    enabled: Optional[int] = Field(default=None, ge=0, le=1)
    category: Optional[str] = None
    required_role: Optional[UserRole] = None


class FeatureFlagResponse(BaseModel):
    """Feature flag response schema."""

    id: int
    key: str
    name: str
    description: Optional[str] = None
    enabled: int
    category: Optional[str] = None
    required_role: Optional[UserRole] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
