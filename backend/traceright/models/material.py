"""Material model: raw materials, components and finished products."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from traceright.db.base import Base, TimestampMixin, enum_values


class MaterialType(str, Enum):
    RAW_MATERIAL = "raw_material"
    FINISHED_PRODUCT = "finished_product"
    COMPONENT = "component"


class MaterialStatus(str, Enum):
    ACTIVE = "active"
    DISCONTINUED = "discontinued"
    OUT_OF_STOCK = "out_of_stock"


class Material(Base, TimestampMixin):
    """A stocked item. Prices are integer minor units."""

    __tablename__ = "materials"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    sku: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    type: Mapped[MaterialType] = mapped_column(enum_values(MaterialType), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    unit: Mapped[str] = mapped_column(String(50), nullable=False)
    unit_price: Mapped[Optional[int]] = mapped_column(Integer, default=0, nullable=True)
    reorder_level: Mapped[Optional[int]] = mapped_column(Integer, default=0, nullable=True)
    current_stock: Mapped[Optional[int]] = mapped_column(Integer, default=0, nullable=True)
    # Weak reference to suppliers.id
    supplier_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, index=True)
    category: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[MaterialStatus] = mapped_column(
        enum_values(MaterialStatus), default=MaterialStatus.ACTIVE, nullable=False
    )
