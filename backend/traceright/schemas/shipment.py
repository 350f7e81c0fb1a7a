"""Shipment schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from traceright.models.shipment import ShipmentStatus, ShipmentType
from traceright.schemas.common import NonEmptyStr, PatchModel


class ShipmentCreate(BaseModel):
    """Shipment creation schema.

    ``created_by`` defaults to the authenticated caller when omitted.
    """

    shipment_number: NonEmptyStr
    type: ShipmentType
    status: ShipmentStatus = ShipmentStatus.PENDING
    origin: Optional[str] = None
    destination: Optional[str] = None
    carrier: Optional[str] = None
    tracking_number: Optional[str] = None
    estimated_arrival: Optional[datetime] = None
    actual_arrival: Optional[datetime] = None
    notes: Optional[str] = None
    created_by: Optional[int] = None


class ShipmentUpdate(PatchModel):
    status: Optional[ShipmentStatus] = None
    actual_arrival: Optional[datetime] = None
    notes: Optional[str] = None


class ShipmentResponse(BaseModel):
    """Shipment response schema."""

    id: int
    shipment_number: str
    type: ShipmentType
    status: ShipmentStatus
    origin: Optional[str] = None
    destination: Optional[str] = None
    carrier: Optional[str] = None
    tracking_number: Optional[str] = None
    estimated_arrival: Optional[datetime] = None
    actual_arrival: Optional[datetime] = None
    notes: Optional[str] = None
    created_by: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
