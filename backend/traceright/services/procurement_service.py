"""Purchase orders and the inventory ledger."""

from typing import List, Optional

from traceright.db.session import Store
from traceright.models.inventory import InventoryTransaction
from traceright.models.purchase_order import PurchaseOrder, PurchaseOrderItem
from traceright.schemas.common import InsertResult
from traceright.schemas.inventory import InventoryTransactionCreate
from traceright.schemas.purchase_order import (
    PurchaseOrderCreate,
    PurchaseOrderItemCreate,
    PurchaseOrderItemReceive,
    PurchaseOrderUpdate,
)
from traceright.services.crud import get_row, insert_row, list_rows, update_row


# ==================== PURCHASE ORDERS ====================

def get_all_purchase_orders(store: Store) -> List[PurchaseOrder]:
    return list_rows(store, PurchaseOrder)


def get_purchase_order_by_id(store: Store, po_id: int) -> Optional[PurchaseOrder]:
    return get_row(store, PurchaseOrder, po_id)


def create_purchase_order(store: Store, data: PurchaseOrderCreate, created_by: int) -> InsertResult:
    values = data.model_dump()
    if values.get("created_by") is None:
        values["created_by"] = created_by
    return insert_row(store, PurchaseOrder, values)


def update_purchase_order(store: Store, po_id: int, patch: PurchaseOrderUpdate) -> None:
    update_row(store, PurchaseOrder, po_id, patch.changes())


def get_purchase_order_items(store: Store, po_id: int) -> List[PurchaseOrderItem]:
    return list_rows(store, PurchaseOrderItem, PurchaseOrderItem.purchase_order_id == po_id)


def add_purchase_order_item(store: Store, po_id: int, data: PurchaseOrderItemCreate) -> InsertResult:
    values = data.model_dump()
    if values.get("total_price") is None:
        values["total_price"] = data.quantity * data.unit_price
    return insert_row(store, PurchaseOrderItem, {"purchase_order_id": po_id, **values})


def update_purchase_order_item(store: Store, item_id: int, patch: PurchaseOrderItemReceive) -> None:
    update_row(store, PurchaseOrderItem, item_id, patch.changes())


# ==================== INVENTORY TRANSACTIONS ====================

def get_all_inventory_transactions(store: Store) -> List[InventoryTransaction]:
    return list_rows(store, InventoryTransaction)


def get_inventory_transaction_by_id(store: Store, transaction_id: int) -> Optional[InventoryTransaction]:
    return get_row(store, InventoryTransaction, transaction_id)


def get_material_transactions(store: Store, material_id: int) -> List[InventoryTransaction]:
    return list_rows(store, InventoryTransaction, InventoryTransaction.material_id == material_id)


def create_inventory_transaction(
    store: Store, data: InventoryTransactionCreate, performed_by: int
) -> InsertResult:
    """Append a stock movement. The ledger has no update or delete."""
    values = data.model_dump()
    if values.get("performed_by") is None:
        values["performed_by"] = performed_by
    return insert_row(store, InventoryTransaction, values)
