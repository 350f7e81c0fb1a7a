"""Materials and suppliers."""

from typing import List, Optional

from traceright.db.session import Store
from traceright.models.material import Material
from traceright.models.supplier import Supplier
from traceright.schemas.common import InsertResult
from traceright.schemas.material import MaterialCreate, MaterialUpdate
from traceright.schemas.supplier import SupplierCreate, SupplierUpdate
from traceright.services.crud import delete_row, get_row, insert_row, list_rows, update_row


# ==================== MATERIALS ====================

def get_all_materials(store: Store) -> List[Material]:
    return list_rows(store, Material)


def get_material_by_id(store: Store, material_id: int) -> Optional[Material]:
    return get_row(store, Material, material_id)


def get_materials_by_supplier(store: Store, supplier_id: int) -> List[Material]:
    return list_rows(store, Material, Material.supplier_id == supplier_id)


def create_material(store: Store, data: MaterialCreate) -> InsertResult:
    return insert_row(store, Material, data.model_dump())


def update_material(store: Store, material_id: int, patch: MaterialUpdate) -> None:
    update_row(store, Material, material_id, patch.changes())


def delete_material(store: Store, material_id: int) -> None:
    delete_row(store, Material, material_id)


# ==================== SUPPLIERS ====================

def get_all_suppliers(store: Store) -> List[Supplier]:
    return list_rows(store, Supplier)


def get_supplier_by_id(store: Store, supplier_id: int) -> Optional[Supplier]:
    return get_row(store, Supplier, supplier_id)


def create_supplier(store: Store, data: SupplierCreate) -> InsertResult:
    return insert_row(store, Supplier, data.model_dump())


def update_supplier(store: Store, supplier_id: int, patch: SupplierUpdate) -> None:
    update_row(store, Supplier, supplier_id, patch.changes())


def delete_supplier(store: Store, supplier_id: int) -> None:
    delete_row(store, Supplier, supplier_id)
