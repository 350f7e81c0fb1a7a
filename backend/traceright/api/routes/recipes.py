"""Recipe (BOM) routes."""

from typing import Optional

from fastapi import APIRouter, Request

from traceright.core.rate_limit import limiter
from traceright.db.session import StoreDep
from traceright.schemas.common import InsertResult, SuccessResponse
from traceright.schemas.recipe import (
    RecipeCreate,
    RecipeIngredientCreate,
    RecipeIngredientResponse,
    RecipeResponse,
    RecipeUpdate,
)
from traceright.services import production_service

router = APIRouter()


@router.get("/", response_model=list[RecipeResponse], name="recipes.list")
@limiter.limit("60/minute")
def list_recipes(request: Request, store: StoreDep):
    """List recipes, newest first."""
    return production_service.get_all_recipes(store)


@router.get("/{recipe_id}", response_model=Optional[RecipeResponse], name="recipes.getById")
@limiter.limit("60/minute")
def get_recipe(request: Request, recipe_id: int, store: StoreDep):
    return production_service.get_recipe_by_id(store, recipe_id)


@router.get(
    "/{recipe_id}/ingredients",
    response_model=list[RecipeIngredientResponse],
    name="recipes.getIngredients",
)
@limiter.limit("60/minute")
def get_recipe_ingredients(request: Request, recipe_id: int, store: StoreDep):
    return production_service.get_recipe_ingredients(store, recipe_id)


@router.post("/", response_model=InsertResult, name="recipes.create")
@limiter.limit("30/minute")
def create_recipe(request: Request, data: RecipeCreate, store: StoreDep):
    return production_service.create_recipe(store, data)


@router.post("/{recipe_id}/ingredients", response_model=InsertResult, name="recipes.addIngredient")
@limiter.limit("30/minute")
def add_recipe_ingredient(request: Request, recipe_id: int, data: RecipeIngredientCreate, store: StoreDep):
    return production_service.add_recipe_ingredient(store, recipe_id, data)


@router.put("/{recipe_id}", response_model=SuccessResponse, name="recipes.update")
@limiter.limit("30/minute")
def update_recipe(request: Request, recipe_id: int, patch: RecipeUpdate, store: StoreDep):
    production_service.update_recipe(store, recipe_id, patch)
    return SuccessResponse()


@router.delete(
    "/ingredients/{ingredient_id}",
    response_model=SuccessResponse,
    name="recipes.removeIngredient",
)
@limiter.limit("30/minute")
def delete_recipe_ingredient(request: Request, ingredient_id: int, store: StoreDep):
    production_service.delete_recipe_ingredient(store, ingredient_id)
    return SuccessResponse()


@router.delete("/{recipe_id}", response_model=SuccessResponse, name="recipes.delete")
@limiter.limit("30/minute")
def delete_recipe(request: Request, recipe_id: int, store: StoreDep):
    production_service.delete_recipe(store, recipe_id)
    return SuccessResponse()
