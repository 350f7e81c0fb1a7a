"""Customer orders and shipments. Neither can be deleted."""

from typing import List, Optional

from traceright.db.session import Store
from traceright.models.order import Order, OrderItem
from traceright.models.shipment import Shipment
from traceright.schemas.common import InsertResult
from traceright.schemas.order import OrderCreate, OrderItemCreate, OrderUpdate
from traceright.schemas.shipment import ShipmentCreate, ShipmentUpdate
from traceright.services.crud import get_row, insert_row, list_rows, update_row


# ==================== ORDERS ====================

def get_all_orders(store: Store) -> List[Order]:
    return list_rows(store, Order)


def get_order_by_id(store: Store, order_id: int) -> Optional[Order]:
    return get_row(store, Order, order_id)


def create_order(store: Store, data: OrderCreate) -> InsertResult:
    return insert_row(store, Order, data.model_dump())


def update_order(store: Store, order_id: int, patch: OrderUpdate) -> None:
    update_row(store, Order, order_id, patch.changes())


def get_order_items(store: Store, order_id: int) -> List[OrderItem]:
    return list_rows(store, OrderItem, OrderItem.order_id == order_id)


def add_order_item(store: Store, order_id: int, data: OrderItemCreate) -> InsertResult:
    values = data.model_dump()
    if values.get("total_price") is None:
        values["total_price"] = data.quantity * data.unit_price
    return insert_row(store, OrderItem, {"order_id": order_id, **values})


# ==================== SHIPMENTS ====================

def get_all_shipments(store: Store) -> List[Shipment]:
    return list_rows(store, Shipment)


def get_shipment_by_id(store: Store, shipment_id: int) -> Optional[Shipment]:
    return get_row(store, Shipment, shipment_id)


def create_shipment(store: Store, data: ShipmentCreate, created_by: int) -> InsertResult:
    values = data.model_dump()
    if values.get("created_by") is None:
        values["created_by"] = created_by
    return insert_row(store, Shipment, values)


def update_shipment(store: Store, shipment_id: int, patch: ShipmentUpdate) -> None:
    update_row(store, Shipment, shipment_id, patch.changes())
