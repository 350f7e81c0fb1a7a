"""Warehouse location schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from traceright.models.warehouse import LocationStatus, LocationType
from traceright.schemas.common import NonEmptyStr, PatchModel


class WarehouseLocationCreate(BaseModel):
    """Warehouse location creation schema."""

    name: NonEmptyStr
    code: NonEmptyStr
    type: LocationType
    parent_id: Optional[int] = None
    capacity: Optional[int] = None
    current_utilization: int = 0
    address: Optional[str] = None
    status: LocationStatus = LocationStatus.ACTIVE


class WarehouseLocationUpdate(PatchModel):
    """Warehouse location update schema."""

    name: Optional[NonEmptyStr] = None
    capacity: Optional[int] = None
    current_utilization: Optional[int] = None
    status: Optional[LocationStatus] = None


class WarehouseLocationResponse(BaseModel):
    """Warehouse location response schema."""

    id: int
    name: str
    code: str
    type: LocationType
    parent_id: Optional[int] = None
    capacity: Optional[int] = None
    current_utilization: Optional[int] = None
    address: Optional[str] = None
    status: LocationStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
