"""Recipe (BOM) schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from traceright.models.recipe import RecipeStatus
from traceright.schemas.common import NonEmptyStr, PatchModel


class RecipeCreate(BaseModel):
    """Recipe creation schema."""

    name: NonEmptyStr
    code: NonEmptyStr
    product_id: int
    version: str = "1.0"
    description: Optional[str] = None
    yield_quantity: int
    yield_unit: NonEmptyStr
    status: RecipeStatus = RecipeStatus.DRAFT


class RecipeUpdate(PatchModel):
    """Recipe update schema."""

    name: Optional[NonEmptyStr] = None
    description: Optional[str] = None
    version: Optional[str] = None
    yield_quantity: Optional[int] = None
    yield_unit: Optional[NonEmptyStr] = None
    status: Optional[RecipeStatus] = None


class RecipeResponse(BaseModel):
    """Recipe response schema."""

    id: int
    name: str
    code: str
    product_id: int
    version: str
    description: Optional[str] = None
    yield_quantity: int
    yield_unit: str
    status: RecipeStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class RecipeIngredientCreate(BaseModel):
    """Ingredient line; the recipe id comes from the route."""

    material_id: int
    quantity: int
    unit: NonEmptyStr
    notes: Optional[str] = None


class RecipeIngredientResponse(BaseModel):
    id: int
    recipe_id: int
    material_id: int
    quantity: int
    unit: str
    notes: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}
