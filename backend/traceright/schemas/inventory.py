"""Inventory transaction schemas. Transactions are append-only."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from traceright.models.inventory import TransactionType
from traceright.schemas.common import NonEmptyStr


class InventoryTransactionCreate(BaseModel):
    """Stock movement. ``quantity`` is signed for adjustments."""

    material_id: int
    transaction_type: TransactionType
    quantity: int
    unit: NonEmptyStr
    reference_type: Optional[str] = None
    reference_id: Optional[int] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    performed_by: Optional[int] = None


class InventoryTransactionResponse(BaseModel):
    id: int
    material_id: int
    transaction_type: TransactionType
    quantity: int
    unit: str
    reference_type: Optional[str] = None
    reference_id: Optional[int] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    performed_by: int
    transaction_date: datetime
    created_at: datetime

    model_config = {"from_attributes": True}
