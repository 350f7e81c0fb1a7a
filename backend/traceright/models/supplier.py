"""Supplier model."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from traceright.db.base import Base, TimestampMixin, enum_values


class SupplierStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


class Supplier(Base, TimestampMixin):
    """Supplier/vendor of materials."""

    __tablename__ = "suppliers"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    code: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    contact_person: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(320), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    country: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    status: Mapped[SupplierStatus] = mapped_column(
        enum_values(SupplierStatus), default=SupplierStatus.ACTIVE, nullable=False
    )
    rating: Mapped[Optional[int]] = mapped_column(Integer, default=0, nullable=True)
    certifications: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
