"""Material routes."""

from typing import Optional

from fastapi import APIRouter, Request

from traceright.core.rate_limit import limiter
from traceright.db.session import StoreDep
from traceright.schemas.common import InsertResult, SuccessResponse
from traceright.schemas.material import MaterialCreate, MaterialResponse, MaterialUpdate
from traceright.services import catalog_service

router = APIRouter()


@router.get("/", response_model=list[MaterialResponse], name="materials.list")
@limiter.limit("60/minute")
def list_materials(request: Request, store: StoreDep):
    """List materials, newest first."""
    return catalog_service.get_all_materials(store)


@router.get("/{material_id}", response_model=Optional[MaterialResponse], name="materials.getById")
@limiter.limit("60/minute")
def get_material(request: Request, material_id: int, store: StoreDep):
    return catalog_service.get_material_by_id(store, material_id)


@router.post("/", response_model=InsertResult, name="materials.create")
@limiter.limit("30/minute")
def create_material(request: Request, data: MaterialCreate, store: StoreDep):
    return catalog_service.create_material(store, data)


@router.put("/{material_id}", response_model=SuccessResponse, name="materials.update")
@limiter.limit("30/minute")
def update_material(request: Request, material_id: int, patch: MaterialUpdate, store: StoreDep):
    catalog_service.update_material(store, material_id, patch)
    return SuccessResponse()


@router.delete("/{material_id}", response_model=SuccessResponse, name="materials.delete")
@limiter.limit("30/minute")
def delete_material(request: Request, material_id: int, store: StoreDep):
    catalog_service.delete_material(store, material_id)
    return SuccessResponse()
