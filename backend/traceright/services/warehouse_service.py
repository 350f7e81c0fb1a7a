"""Warehouse location hierarchy."""

from typing import List, Optional

from traceright.db.session import Store
from traceright.models.warehouse import WarehouseLocation
from traceright.schemas.common import InsertResult
from traceright.schemas.warehouse import WarehouseLocationCreate, WarehouseLocationUpdate
from traceright.services.crud import get_row, insert_row, list_rows, update_row


def get_all_warehouse_locations(store: Store) -> List[WarehouseLocation]:
    return list_rows(store, WarehouseLocation)


def get_warehouse_location_by_id(store: Store, location_id: int) -> Optional[WarehouseLocation]:
    return get_row(store, WarehouseLocation, location_id)


def get_child_locations(store: Store, parent_id: int) -> List[WarehouseLocation]:
    return list_rows(store, WarehouseLocation, WarehouseLocation.parent_id == parent_id)


def create_warehouse_location(store: Store, data: WarehouseLocationCreate) -> InsertResult:
    return insert_row(store, WarehouseLocation, data.model_dump())


def update_warehouse_location(store: Store, location_id: int, patch: WarehouseLocationUpdate) -> None:
    update_row(store, WarehouseLocation, location_id, patch.changes())
