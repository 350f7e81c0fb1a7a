"""Purchase order schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from traceright.models.purchase_order import POStatus
from traceright.schemas.common import NonEmptyStr, PatchModel


class PurchaseOrderCreate(BaseModel):
    """Purchase order creation schema.

    ``created_by`` defaults to the authenticated caller when omitted.
    """

    order_number: NonEmptyStr
    supplier_id: int
    expected_delivery_date: Optional[datetime] = None
    status: POStatus = POStatus.DRAFT
    total_amount: int = 0
    notes: Optional[str] = None
    created_by: Optional[int] = None


class PurchaseOrderUpdate(PatchModel):
    status: Optional[POStatus] = None
    expected_delivery_date: Optional[datetime] = None
    actual_delivery_date: Optional[datetime] = None
    total_amount: Optional[int] = None
    notes: Optional[str] = None


class PurchaseOrderResponse(BaseModel):
    """Purchase order response schema."""

    id: int
    order_number: str
    supplier_id: int
    order_date: datetime
    expected_delivery_date: Optional[datetime] = None
    actual_delivery_date: Optional[datetime] = None
    status: POStatus
    total_amount: Optional[int] = None
    notes: Optional[str] = None
    created_by: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PurchaseOrderItemCreate(BaseModel):
    """Line item; ``total_price`` is computed when omitted."""

    material_id: int
    quantity: int
    unit: NonEmptyStr
    unit_price: int
    total_price: Optional[int] = None


class PurchaseOrderItemReceive(PatchModel):
    received_quantity: Optional[int] = None


class PurchaseOrderItemResponse(BaseModel):
    id: int
    purchase_order_id: int
    material_id: int
    quantity: int
    unit: str
    unit_price: int
    total_price: int
    received_quantity: Optional[int] = None
    created_at: datetime

    model_config = {"from_attributes": True}
