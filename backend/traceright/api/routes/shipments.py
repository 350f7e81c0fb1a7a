"""Shipment routes. Shipments are never deleted."""

from typing import Optional

from fastapi import APIRouter, Request

from traceright.core.rate_limit import limiter
from traceright.core.rbac import CurrentUser
from traceright.db.session import StoreDep
from traceright.schemas.common import InsertResult, SuccessResponse
from traceright.schemas.shipment import ShipmentCreate, ShipmentResponse, ShipmentUpdate
from traceright.services import fulfillment_service

router = APIRouter()


@router.get("/", response_model=list[ShipmentResponse], name="shipments.list")
@limiter.limit("60/minute")
def list_shipments(request: Request, store: StoreDep):
    return fulfillment_service.get_all_shipments(store)


@router.get("/{shipment_id}", response_model=Optional[ShipmentResponse], name="shipments.getById")
@limiter.limit("60/minute")
def get_shipment(request: Request, shipment_id: int, store: StoreDep):
    return fulfillment_service.get_shipment_by_id(store, shipment_id)


@router.post("/", response_model=InsertResult, name="shipments.create")
@limiter.limit("30/minute")
def create_shipment(request: Request, data: ShipmentCreate, store: StoreDep, current_user: CurrentUser):
    """Create a shipment; ``created_by`` defaults to the caller."""
    return fulfillment_service.create_shipment(store, data, created_by=current_user.id)


@router.put("/{shipment_id}", response_model=SuccessResponse, name="shipments.update")
@limiter.limit("30/minute")
def update_shipment(request: Request, shipment_id: int, patch: ShipmentUpdate, store: StoreDep):
    fulfillment_service.update_shipment(store, shipment_id, patch)
    return SuccessResponse()
