"""Customer order routes. Orders are never deleted."""

from typing import Optional

from fastapi import APIRouter, Request

from traceright.core.rate_limit import limiter
from traceright.db.session import StoreDep
from traceright.schemas.common import InsertResult, SuccessResponse
from traceright.schemas.order import (
    OrderCreate,
    OrderItemCreate,
    OrderItemResponse,
    OrderResponse,
    OrderUpdate,
)
from traceright.services import fulfillment_service

router = APIRouter()


@router.get("/", response_model=list[OrderResponse], name="orders.list")
@limiter.limit("60/minute")
def list_orders(request: Request, store: StoreDep):
    return fulfillment_service.get_all_orders(store)


@router.get("/{order_id}", response_model=Optional[OrderResponse], name="orders.getById")
@limiter.limit("60/minute")
def get_order(request: Request, order_id: int, store: StoreDep):
    return fulfillment_service.get_order_by_id(store, order_id)


@router.get("/{order_id}/items", response_model=list[OrderItemResponse], name="orders.getItems")
@limiter.limit("60/minute")
def get_order_items(request: Request, order_id: int, store: StoreDep):
    return fulfillment_service.get_order_items(store, order_id)


@router.post("/", response_model=InsertResult, name="orders.create")
@limiter.limit("30/minute")
def create_order(request: Request, data: OrderCreate, store: StoreDep):
    return fulfillment_service.create_order(store, data)


@router.post("/{order_id}/items", response_model=InsertResult, name="orders.addItem")
@limiter.limit("30/minute")
def add_order_item(request: Request, order_id: int, data: OrderItemCreate, store: StoreDep):
    return fulfillment_service.add_order_item(store, order_id, data)


@router.put("/{order_id}", response_model=SuccessResponse, name="orders.update")
@limiter.limit("30/minute")
def update_order(request: Request, order_id: int, patch: OrderUpdate, store: StoreDep):
    """Update order status and notes."""
    fulfillment_service.update_order(store, order_id, patch)
    return SuccessResponse()
