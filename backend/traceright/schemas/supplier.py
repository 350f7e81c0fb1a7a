"""Supplier schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr

from traceright.models.supplier import SupplierStatus
from traceright.schemas.common import NonEmptyStr, PatchModel


class SupplierCreate(BaseModel):
    """Supplier creation schema."""

    name: NonEmptyStr
    code: NonEmptyStr
    contact_person: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    country: Optional[str] = None
    status: SupplierStatus = SupplierStatus.ACTIVE
    rating: int = 0
    certifications: Optional[str] = None


class SupplierUpdate(PatchModel):
    """Supplier update schema. ``code`` is immutable."""

    name: Optional[NonEmptyStr] = None
    contact_person: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    country: Optional[str] = None
    status: Optional[SupplierStatus] = None
    rating: Optional[int] = None
    certifications: Optional[str] = None


class SupplierResponse(BaseModel):
    """Supplier response schema."""

    id: int
    name: str
    code: str
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    country: Optional[str] = None
    status: SupplierStatus
    rating: Optional[int] = None
    certifications: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
