"""Purchase order routes."""

from typing import Optional

from fastapi import APIRouter, Request

from traceright.core.rate_limit import limiter
from traceright.core.rbac import CurrentUser
from traceright.db.session import StoreDep
from traceright.schemas.common import InsertResult, SuccessResponse
from traceright.schemas.purchase_order import (
    PurchaseOrderCreate,
    PurchaseOrderItemCreate,
    PurchaseOrderItemReceive,
    PurchaseOrderItemResponse,
    PurchaseOrderResponse,
    PurchaseOrderUpdate,
)
from traceright.services import procurement_service

router = APIRouter()


@router.get("/", response_model=list[PurchaseOrderResponse], name="purchaseOrders.list")
@limiter.limit("60/minute")
def list_purchase_orders(request: Request, store: StoreDep):
    return procurement_service.get_all_purchase_orders(store)


@router.get("/{po_id}", response_model=Optional[PurchaseOrderResponse], name="purchaseOrders.getById")
@limiter.limit("60/minute")
def get_purchase_order(request: Request, po_id: int, store: StoreDep):
    return procurement_service.get_purchase_order_by_id(store, po_id)


@router.get("/{po_id}/items", response_model=list[PurchaseOrderItemResponse], name="purchaseOrders.getItems")
@limiter.limit("60/minute")
def get_purchase_order_items(request: Request, po_id: int, store: StoreDep):
    return procurement_service.get_purchase_order_items(store, po_id)


@router.post("/", response_model=InsertResult, name="purchaseOrders.create")
@limiter.limit("30/minute")
def create_purchase_order(
    request: Request, data: PurchaseOrderCreate, store: StoreDep, current_user: CurrentUser
):
    """Create a purchase order; ``created_by`` defaults to the caller."""
    return procurement_service.create_purchase_order(store, data, created_by=current_user.id)


@router.post("/{po_id}/items", response_model=InsertResult, name="purchaseOrders.addItem")
@limiter.limit("30/minute")
def add_purchase_order_item(request: Request, po_id: int, data: PurchaseOrderItemCreate, store: StoreDep):
    return procurement_service.add_purchase_order_item(store, po_id, data)


@router.put("/{po_id}", response_model=SuccessResponse, name="purchaseOrders.update")
@limiter.limit("30/minute")
def update_purchase_order(request: Request, po_id: int, patch: PurchaseOrderUpdate, store: StoreDep):
    procurement_service.update_purchase_order(store, po_id, patch)
    return SuccessResponse()


@router.put("/items/{item_id}", response_model=SuccessResponse, name="purchaseOrders.receiveItem")
@limiter.limit("30/minute")
def receive_purchase_order_item(
    request: Request, item_id: int, patch: PurchaseOrderItemReceive, store: StoreDep
):
    """Record the received quantity of a line."""
    procurement_service.update_purchase_order_item(store, item_id, patch)
    return SuccessResponse()
