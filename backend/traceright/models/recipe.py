"""Recipe (Bill of Materials) models."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from traceright.db.base import Base, CreatedAtMixin, TimestampMixin, enum_values


class RecipeStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    ARCHIVED = "archived"


class Recipe(Base, TimestampMixin):
    """Versioned recipe producing ``yield_quantity`` of a product."""

    __tablename__ = "recipes"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    code: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    product_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    version: Mapped[str] = mapped_column(String(50), default="1.0", nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    yield_quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    yield_unit: Mapped[str] = mapped_column(String(50), nullable=False)
    status: Mapped[RecipeStatus] = mapped_column(
        enum_values(RecipeStatus), default=RecipeStatus.DRAFT, nullable=False
    )


class RecipeIngredient(Base, CreatedAtMixin):
    """A single material line of a recipe."""

    __tablename__ = "recipe_ingredients"

    id: Mapped[int] = mapped_column(primary_key=True)
    recipe_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    material_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    unit: Mapped[str] = mapped_column(String(50), nullable=False)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
