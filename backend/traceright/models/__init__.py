"""SQLAlchemy models."""

from traceright.models.user import User, UserRole
from traceright.models.supplier import Supplier, SupplierStatus
from traceright.models.material import Material, MaterialStatus, MaterialType
from traceright.models.recipe import Recipe, RecipeIngredient, RecipeStatus
from traceright.models.batch import Batch, BatchStatus
from traceright.models.purchase_order import POStatus, PurchaseOrder, PurchaseOrderItem
from traceright.models.inventory import InventoryTransaction, TransactionType
from traceright.models.warehouse import LocationStatus, LocationType, WarehouseLocation
from traceright.models.shipment import Shipment, ShipmentStatus, ShipmentType
from traceright.models.order import Order, OrderItem, OrderStatus
from traceright.models.feature_flag import FeatureFlag

__all__ = [
    "User",
    "UserRole",
    "Supplier",
    "SupplierStatus",
    "Material",
    "MaterialStatus",
    "MaterialType",
    "Recipe",
    "RecipeIngredient",
    "RecipeStatus",
    "Batch",
    "BatchStatus",
    "POStatus",
    "PurchaseOrder",
    "PurchaseOrderItem",
    "InventoryTransaction",
    "TransactionType",
    "LocationStatus",
    "LocationType",
    "WarehouseLocation",
    "Shipment",
    "ShipmentStatus",
    "ShipmentType",
    "Order",
    "OrderItem",
    "OrderStatus",
    "FeatureFlag",
]
