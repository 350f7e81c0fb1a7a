"""Warehouse location routes."""

from typing import Optional

from fastapi import APIRouter, Request

from traceright.core.rate_limit import limiter
from traceright.db.session import StoreDep
from traceright.schemas.common import InsertResult, SuccessResponse
from traceright.schemas.warehouse import (
    WarehouseLocationCreate,
    WarehouseLocationResponse,
    WarehouseLocationUpdate,
)
from traceright.services import warehouse_service

router = APIRouter()


@router.get("/locations", response_model=list[WarehouseLocationResponse], name="warehouse.locations")
@limiter.limit("60/minute")
def list_locations(request: Request, store: StoreDep):
    """List warehouse locations, newest first."""
    return warehouse_service.get_all_warehouse_locations(store)


@router.get(
    "/locations/{location_id}",
    response_model=Optional[WarehouseLocationResponse],
    name="warehouse.getLocationById",
)
@limiter.limit("60/minute")
def get_location(request: Request, location_id: int, store: StoreDep):
    return warehouse_service.get_warehouse_location_by_id(store, location_id)


@router.get(
    "/locations/{location_id}/children",
    response_model=list[WarehouseLocationResponse],
    name="warehouse.getChildLocations",
)
@limiter.limit("60/minute")
def get_child_locations(request: Request, location_id: int, store: StoreDep):
    """Direct children of a location (zones of a warehouse, racks of an aisle...)."""
    return warehouse_service.get_child_locations(store, location_id)


@router.post("/locations", response_model=InsertResult, name="warehouse.createLocation")
@limiter.limit("30/minute")
def create_location(request: Request, data: WarehouseLocationCreate, store: StoreDep):
    return warehouse_service.create_warehouse_location(store, data)


@router.put("/locations/{location_id}", response_model=SuccessResponse, name="warehouse.updateLocation")
@limiter.limit("30/minute")
def update_location(request: Request, location_id: int, patch: WarehouseLocationUpdate, store: StoreDep):
    warehouse_service.update_warehouse_location(store, location_id, patch)
    return SuccessResponse()
