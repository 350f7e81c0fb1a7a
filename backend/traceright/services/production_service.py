"""Recipes (bill of materials), their ingredients, and production batches."""

from typing import List, Optional

from traceright.db.session import Store
from traceright.models.batch import Batch
from traceright.models.recipe import Recipe, RecipeIngredient
from traceright.schemas.batch import BatchCreate, BatchUpdate
from traceright.schemas.common import InsertResult
from traceright.schemas.recipe import RecipeCreate, RecipeIngredientCreate, RecipeUpdate
from traceright.services.crud import delete_row, get_row, insert_row, list_rows, update_row


# ==================== RECIPES ====================

def get_all_recipes(store: Store) -> List[Recipe]:
    return list_rows(store, Recipe)


def get_recipe_by_id(store: Store, recipe_id: int) -> Optional[Recipe]:
    return get_row(store, Recipe, recipe_id)


def create_recipe(store: Store, data: RecipeCreate) -> InsertResult:
    return insert_row(store, Recipe, data.model_dump())


def update_recipe(store: Store, recipe_id: int, patch: RecipeUpdate) -> None:
    update_row(store, Recipe, recipe_id, patch.changes())


def delete_recipe(store: Store, recipe_id: int) -> None:
    """Delete the recipe row only; its ingredient lines are left in place."""
    delete_row(store, Recipe, recipe_id)


def get_recipe_ingredients(store: Store, recipe_id: int) -> List[RecipeIngredient]:
    return list_rows(store, RecipeIngredient, RecipeIngredient.recipe_id == recipe_id)


def add_recipe_ingredient(store: Store, recipe_id: int, data: RecipeIngredientCreate) -> InsertResult:
    return insert_row(store, RecipeIngredient, {"recipe_id": recipe_id, **data.model_dump()})


def delete_recipe_ingredient(store: Store, ingredient_id: int) -> None:
    delete_row(store, RecipeIngredient, ingredient_id)


# ==================== BATCHES ====================

def get_all_batches(store: Store) -> List[Batch]:
    return list_rows(store, Batch)


def get_batch_by_id(store: Store, batch_id: int) -> Optional[Batch]:
    return get_row(store, Batch, batch_id)


def create_batch(store: Store, data: BatchCreate) -> InsertResult:
    return insert_row(store, Batch, data.model_dump())


def update_batch(store: Store, batch_id: int, patch: BatchUpdate) -> None:
    update_row(store, Batch, batch_id, patch.changes())


def delete_batch(store: Store, batch_id: int) -> None:
    delete_row(store, Batch, batch_id)
