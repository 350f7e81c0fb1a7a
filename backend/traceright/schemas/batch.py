"""Production batch schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from traceright.models.batch import BatchStatus
from traceright.schemas.common import NonEmptyStr, PatchModel


class BatchCreate(BaseModel):
    """Batch creation schema."""

    batch_number: NonEmptyStr
    recipe_id: int
    product_id: int
    quantity: int
    unit: NonEmptyStr
    status: BatchStatus = BatchStatus.PLANNED
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    location: Optional[str] = None
    qr_code: Optional[str] = None
    notes: Optional[str] = None


class BatchUpdate(PatchModel):
    """Batch update schema: progress fields only."""

    status: Optional[BatchStatus] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    location: Optional[str] = None
    notes: Optional[str] = None


class BatchResponse(BaseModel):
    """Batch response schema."""

    id: int
    batch_number: str
    recipe_id: int
    product_id: int
    quantity: int
    unit: str
    status: BatchStatus
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    location: Optional[str] = None
    qr_code: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
