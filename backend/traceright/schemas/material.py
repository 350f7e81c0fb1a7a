"""Material schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from traceright.models.material import MaterialStatus, MaterialType
from traceright.schemas.common import NonEmptyStr, PatchModel


class MaterialCreate(BaseModel):
    """Material creation schema. Prices are integer minor units."""

    name: NonEmptyStr
    sku: NonEmptyStr
    type: MaterialType
    description: Optional[str] = None
    unit: NonEmptyStr
    unit_price: int = 0
    reorder_level: int = 0
    current_stock: int = 0
    supplier_id: Optional[int] = None
    category: Optional[str] = None
    image_url: Optional[str] = None
    status: MaterialStatus = MaterialStatus.ACTIVE


class MaterialUpdate(PatchModel):
    """Material update schema. ``sku`` and ``type`` are immutable."""

    name: Optional[NonEmptyStr] = None
    description: Optional[str] = None
    unit: Optional[NonEmptyStr] = None
    unit_price: Optional[int] = None
    reorder_level: Optional[int] = None
    current_stock: Optional[int] = None
    supplier_id: Optional[int] = None
    category: Optional[str] = None
    image_url: Optional[str] = None
    status: Optional[MaterialStatus] = None


class MaterialResponse(BaseModel):
    """Material response schema."""

    id: int
    name: str
    sku: str
    type: MaterialType
    description: Optional[str] = None
    unit: str
    unit_price: Optional[int] = None
    reorder_level: Optional[int] = None
    current_stock: Optional[int] = None
    supplier_id: Optional[int] = None
    category: Optional[str] = None
    image_url: Optional[str] = None
    status: MaterialStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
