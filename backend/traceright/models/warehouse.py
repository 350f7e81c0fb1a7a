"""Warehouse location hierarchy."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from traceright.db.base import Base, TimestampMixin, enum_values


class LocationType(str, Enum):
    WAREHOUSE = "warehouse"
    ZONE = "zone"
    AISLE = "aisle"
    RACK = "rack"
    BIN = "bin"


class LocationStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    MAINTENANCE = "maintenance"


class WarehouseLocation(Base, TimestampMixin):
    """A node in the warehouse > zone > aisle > rack > bin tree."""

    __tablename__ = "warehouse_locations"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    code: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    type: Mapped[LocationType] = mapped_column(enum_values(LocationType), nullable=False)
    # Weak self-reference to warehouse_locations.id
    parent_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, index=True)
    capacity: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    current_utilization: Mapped[Optional[int]] = mapped_column(Integer, default=0, nullable=True)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[LocationStatus] = mapped_column(
        enum_values(LocationStatus), default=LocationStatus.ACTIVE, nullable=False
    )
