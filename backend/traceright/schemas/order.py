"""Customer order schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr

from traceright.models.order import OrderStatus
from traceright.schemas.common import NonEmptyStr, PatchModel


class OrderCreate(BaseModel):
    """Order creation schema."""

    order_number: NonEmptyStr
    customer_name: NonEmptyStr
    customer_email: Optional[EmailStr] = None
    customer_phone: Optional[str] = None
    shipping_address: Optional[str] = None
    requested_delivery_date: Optional[datetime] = None
    status: OrderStatus = OrderStatus.PENDING
    total_amount: int = 0
    notes: Optional[str] = None


class OrderUpdate(PatchModel):
    status: Optional[OrderStatus] = None
    notes: Optional[str] = None


class OrderResponse(BaseModel):
    """Order response schema."""

    id: int
    order_number: str
    customer_name: str
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None
    shipping_address: Optional[str] = None
    order_date: datetime
    requested_delivery_date: Optional[datetime] = None
    status: OrderStatus
    total_amount: Optional[int] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class OrderItemCreate(BaseModel):
    """Order line; ``total_price`` is computed when omitted."""

    product_id: int
    quantity: int
    unit: NonEmptyStr
    unit_price: int
    total_price: Optional[int] = None


class OrderItemResponse(BaseModel):
    id: int
    order_id: int
    product_id: int
    quantity: int
    unit: str
    unit_price: int
    total_price: int
    created_at: datetime

    model_config = {"from_attributes": True}
