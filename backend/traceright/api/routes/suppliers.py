"""Supplier routes."""

from typing import Optional

from fastapi import APIRouter, Request

from traceright.core.rate_limit import limiter
from traceright.db.session import StoreDep
from traceright.schemas.common import InsertResult, SuccessResponse
from traceright.schemas.material import MaterialResponse
from traceright.schemas.supplier import SupplierCreate, SupplierResponse, SupplierUpdate
from traceright.services import catalog_service

router = APIRouter()


# ==================== CORE CRUD ====================

@router.get("/", response_model=list[SupplierResponse], name="suppliers.list")
@limiter.limit("60/minute")
def list_suppliers(request: Request, store: StoreDep):
    """List all suppliers."""
    return catalog_service.get_all_suppliers(store)


@router.get("/{supplier_id}", response_model=Optional[SupplierResponse], name="suppliers.getById")
@limiter.limit("60/minute")
def get_supplier(request: Request, supplier_id: int, store: StoreDep):
    """Get a specific supplier, or null."""
    return catalog_service.get_supplier_by_id(store, supplier_id)


@router.get("/{supplier_id}/materials", response_model=list[MaterialResponse], name="suppliers.getMaterials")
@limiter.limit("60/minute")
def get_supplier_materials(request: Request, supplier_id: int, store: StoreDep):
    """Materials sourced from this supplier."""
    return catalog_service.get_materials_by_supplier(store, supplier_id)


@router.post("/", response_model=InsertResult, name="suppliers.create")
@limiter.limit("30/minute")
def create_supplier(request: Request, data: SupplierCreate, store: StoreDep):
    """Create a new supplier."""
    return catalog_service.create_supplier(store, data)


@router.put("/{supplier_id}", response_model=SuccessResponse, name="suppliers.update")
@limiter.limit("30/minute")
def update_supplier(request: Request, supplier_id: int, patch: SupplierUpdate, store: StoreDep):
    """Update the supplied fields of a supplier."""
    catalog_service.update_supplier(store, supplier_id, patch)
    return SuccessResponse()


@router.delete("/{supplier_id}", response_model=SuccessResponse, name="suppliers.delete")
@limiter.limit("30/minute")
def delete_supplier(request: Request, supplier_id: int, store: StoreDep):
    """Delete a supplier."""
    catalog_service.delete_supplier(store, supplier_id)
    return SuccessResponse()
