"""API routes."""

from fastapi import APIRouter, Depends

from traceright.api.routes import (
    auth, materials, suppliers, batches, recipes, orders, shipments,
    warehouse, feature_flags, purchase_orders, inventory, integrations,
)
from traceright.core.rbac import get_current_user

api_router = APIRouter()

# Session routes: whoAmI and logout are callable without a session
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# Every other route requires a signed-in caller
authenticated = [Depends(get_current_user)]

# Catalog
api_router.include_router(materials.router, prefix="/materials", tags=["materials"], dependencies=authenticated)
api_router.include_router(suppliers.router, prefix="/suppliers", tags=["suppliers"], dependencies=authenticated)

# Production
api_router.include_router(recipes.router, prefix="/recipes", tags=["recipes"], dependencies=authenticated)
api_router.include_router(batches.router, prefix="/batches", tags=["batches"], dependencies=authenticated)

# Procurement and stock
api_router.include_router(
    purchase_orders.router, prefix="/purchase-orders", tags=["purchase-orders"], dependencies=authenticated
)
api_router.include_router(inventory.router, prefix="/inventory", tags=["inventory"], dependencies=authenticated)
api_router.include_router(warehouse.router, prefix="/warehouse", tags=["warehouse"], dependencies=authenticated)

# Fulfillment
api_router.include_router(orders.router, prefix="/orders", tags=["orders"], dependencies=authenticated)
api_router.include_router(shipments.router, prefix="/shipments", tags=["shipments"], dependencies=authenticated)

# Feature flags (mutations are admin-only)
api_router.include_router(
    feature_flags.router, prefix="/feature-flags", tags=["feature-flags"], dependencies=authenticated
)

# Mocked collaborators
api_router.include_router(
    integrations.router, prefix="/integrations", tags=["integrations"], dependencies=authenticated
)
