"""Inventory ledger routes. Transactions are append-only."""

from typing import Optional

from fastapi import APIRouter, Request

from traceright.core.rate_limit import limiter
from traceright.core.rbac import CurrentUser
from traceright.db.session import StoreDep
from traceright.schemas.common import InsertResult
from traceright.schemas.inventory import InventoryTransactionCreate, InventoryTransactionResponse
from traceright.services import procurement_service

router = APIRouter()


@router.get("/transactions", response_model=list[InventoryTransactionResponse], name="inventory.list")
@limiter.limit("60/minute")
def list_transactions(request: Request, store: StoreDep):
    return procurement_service.get_all_inventory_transactions(store)


@router.get(
    "/transactions/{transaction_id}",
    response_model=Optional[InventoryTransactionResponse],
    name="inventory.getById",
)
@limiter.limit("60/minute")
def get_transaction(request: Request, transaction_id: int, store: StoreDep):
    return procurement_service.get_inventory_transaction_by_id(store, transaction_id)


@router.get(
    "/materials/{material_id}/transactions",
    response_model=list[InventoryTransactionResponse],
    name="inventory.getByMaterial",
)
@limiter.limit("60/minute")
def get_material_transactions(request: Request, material_id: int, store: StoreDep):
    return procurement_service.get_material_transactions(store, material_id)


@router.post("/transactions", response_model=InsertResult, name="inventory.create")
@limiter.limit("30/minute")
def create_transaction(
    request: Request, data: InventoryTransactionCreate, store: StoreDep, current_user: CurrentUser
):
    """Record a stock movement; ``performed_by`` defaults to the caller."""
    return procurement_service.create_inventory_transaction(store, data, performed_by=current_user.id)
