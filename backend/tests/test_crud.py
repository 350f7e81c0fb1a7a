"""CRUD operation tests."""

API = "/api/v1"


def _create(client, headers, path, payload) -> int:
    resp = client.post(f"{API}/{path}", json=payload, headers=headers)
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["affected_rows"] == 1
    return body["id"]


class TestSupplierCRUD:
    """Test supplier CRUD operations."""

    def test_list_suppliers_empty(self, client, auth_headers):
        response = client.get(f"{API}/suppliers/", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == []

    def test_create_supplier(self, client, auth_headers):
        supplier_id = _create(client, auth_headers, "suppliers/", {"name": "Acme", "code": "SUP-1"})
        response = client.get(f"{API}/suppliers/{supplier_id}", headers=auth_headers)
        data = response.json()
        assert data["name"] == "Acme"
        assert data["status"] == "active"
        assert data["rating"] == 0

    def test_get_missing_supplier_is_null(self, client, auth_headers):
        response = client.get(f"{API}/suppliers/9999", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() is None

    def test_update_changes_only_sent_fields(self, client, auth_headers):
        supplier_id = _create(client, auth_headers, "suppliers/", {
            "name": "Acme", "code": "SUP-1", "country": "DE", "phone": "+49 30 1234",
        })
        response = client.put(f"{API}/suppliers/{supplier_id}", json={"rating": 4}, headers=auth_headers)
        assert response.json() == {"success": True}

        data = client.get(f"{API}/suppliers/{supplier_id}", headers=auth_headers).json()
        assert data["rating"] == 4
        assert data["name"] == "Acme"
        assert data["country"] == "DE"
        assert data["phone"] == "+49 30 1234"

    def test_code_is_not_patchable(self, client, auth_headers):
        supplier_id = _create(client, auth_headers, "suppliers/", {"name": "Acme", "code": "SUP-1"})
        client.put(f"{API}/suppliers/{supplier_id}", json={"code": "SUP-2"}, headers=auth_headers)
        assert client.get(f"{API}/suppliers/{supplier_id}", headers=auth_headers).json()["code"] == "SUP-1"

    def test_delete_supplier_is_idempotent(self, client, auth_headers):
        supplier_id = _create(client, auth_headers, "suppliers/", {"name": "Acme", "code": "SUP-1"})
        assert client.delete(f"{API}/suppliers/{supplier_id}", headers=auth_headers).json() == {"success": True}
        assert client.get(f"{API}/suppliers/{supplier_id}", headers=auth_headers).json() is None
        assert client.delete(f"{API}/suppliers/{supplier_id}", headers=auth_headers).status_code == 200

    def test_duplicate_code_conflicts(self, client, auth_headers):
        _create(client, auth_headers, "suppliers/", {"name": "Acme", "code": "SUP-1"})
        response = client.post(f"{API}/suppliers/", json={"name": "Other", "code": "SUP-1"}, headers=auth_headers)
        assert response.status_code == 409
        assert response.json()["kind"] == "CONFLICT"

    def test_list_newest_first(self, client, auth_headers):
        _create(client, auth_headers, "suppliers/", {"name": "First", "code": "SUP-1"})
        _create(client, auth_headers, "suppliers/", {"name": "Second", "code": "SUP-2"})
        names = [s["name"] for s in client.get(f"{API}/suppliers/", headers=auth_headers).json()]
        assert names == ["Second", "First"]


class TestMaterialCRUD:
    """Materials, including the supplier reference."""

    def test_supplier_then_material_end_to_end(self, client, auth_headers):
        supplier_id = _create(client, auth_headers, "suppliers/", {"name": "Acme", "code": "SUP-1"})
        material_id = _create(client, auth_headers, "materials/", {
            "name": "Steel Sheet",
            "sku": "STL-001",
            "type": "raw_material",
            "unit": "kg",
            "supplier_id": supplier_id,
        })

        materials = client.get(f"{API}/materials/", headers=auth_headers).json()
        match = [m for m in materials if m["id"] == material_id]
        assert len(match) == 1
        assert match[0]["supplier_id"] == supplier_id

        by_supplier = client.get(f"{API}/suppliers/{supplier_id}/materials", headers=auth_headers).json()
        assert [m["id"] for m in by_supplier] == [material_id]

    def test_defaults_populated(self, client, auth_headers):
        material_id = _create(client, auth_headers, "materials/", {
            "name": "Bolt", "sku": "BLT-1", "type": "component", "unit": "pcs",
        })
        data = client.get(f"{API}/materials/{material_id}", headers=auth_headers).json()
        assert data["unit_price"] == 0
        assert data["reorder_level"] == 0
        assert data["current_stock"] == 0
        assert data["status"] == "active"

    def test_patch_stock_only(self, client, auth_headers):
        material_id = _create(client, auth_headers, "materials/", {
            "name": "Bolt", "sku": "BLT-1", "type": "component", "unit": "pcs",
            "unit_price": 25, "category": "fasteners",
        })
        before = client.get(f"{API}/materials/{material_id}", headers=auth_headers).json()
        client.put(f"{API}/materials/{material_id}", json={"current_stock": 500}, headers=auth_headers)
        after = client.get(f"{API}/materials/{material_id}", headers=auth_headers).json()

        assert after["current_stock"] == 500
        for field in ("name", "sku", "type", "unit", "unit_price", "category", "status", "created_at"):
            assert after[field] == before[field]

    def test_delete_material(self, client, auth_headers):
        material_id = _create(client, auth_headers, "materials/", {
            "name": "Bolt", "sku": "BLT-1", "type": "component", "unit": "pcs",
        })
        client.delete(f"{API}/materials/{material_id}", headers=auth_headers)
        assert client.get(f"{API}/materials/", headers=auth_headers).json() == []


class TestRecipeCRUD:

    def _recipe(self, client, headers) -> int:
        return _create(client, headers, "recipes/", {
            "name": "Widget v1", "code": "RCP-1", "product_id": 7, "yield_quantity": 10, "yield_unit": "pcs",
        })

    def test_recipe_defaults(self, client, auth_headers):
        recipe_id = self._recipe(client, auth_headers)
        data = client.get(f"{API}/recipes/{recipe_id}", headers=auth_headers).json()
        assert data["version"] == "1.0"
        assert data["status"] == "draft"

    def test_ingredients(self, client, auth_headers):
        recipe_id = self._recipe(client, auth_headers)
        ingredient_id = _create(client, auth_headers, f"recipes/{recipe_id}/ingredients", {
            "material_id": 3, "quantity": 2, "unit": "kg",
        })
        ingredients = client.get(f"{API}/recipes/{recipe_id}/ingredients", headers=auth_headers).json()
        assert [(i["material_id"], i["recipe_id"]) for i in ingredients] == [(3, recipe_id)]

        client.delete(f"{API}/recipes/ingredients/{ingredient_id}", headers=auth_headers)
        assert client.get(f"{API}/recipes/{recipe_id}/ingredients", headers=auth_headers).json() == []

    def test_activate_recipe(self, client, auth_headers):
        recipe_id = self._recipe(client, auth_headers)
        client.put(f"{API}/recipes/{recipe_id}", json={"status": "active"}, headers=auth_headers)
        data = client.get(f"{API}/recipes/{recipe_id}", headers=auth_headers).json()
        assert data["status"] == "active"
        assert data["yield_quantity"] == 10


class TestBatchCRUD:

    def test_batch_lifecycle(self, client, auth_headers):
        batch_id = _create(client, auth_headers, "batches/", {
            "batch_number": "B-0001", "recipe_id": 1, "product_id": 7, "quantity": 100, "unit": "pcs",
        })
        assert client.get(f"{API}/batches/{batch_id}", headers=auth_headers).json()["status"] == "planned"

        client.put(f"{API}/batches/{batch_id}", json={
            "status": "in_progress", "start_date": "2024-05-01T08:00:00Z",
        }, headers=auth_headers)
        data = client.get(f"{API}/batches/{batch_id}", headers=auth_headers).json()
        assert data["status"] == "in_progress"
        assert data["start_date"].startswith("2024-05-01T08:00:00")
        assert data["quantity"] == 100

        client.delete(f"{API}/batches/{batch_id}", headers=auth_headers)
        assert client.get(f"{API}/batches/{batch_id}", headers=auth_headers).json() is None


class TestOrderCRUD:

    def test_order_and_items(self, client, auth_headers):
        order_id = _create(client, auth_headers, "orders/", {
            "order_number": "SO-1", "customer_name": "Globex", "customer_email": "buyer@globex.com",
        })
        _create(client, auth_headers, f"orders/{order_id}/items", {
            "product_id": 7, "quantity": 3, "unit": "pcs", "unit_price": 150,
        })
        items = client.get(f"{API}/orders/{order_id}/items", headers=auth_headers).json()
        assert items[0]["total_price"] == 450

        client.put(f"{API}/orders/{order_id}", json={"status": "processing"}, headers=auth_headers)
        data = client.get(f"{API}/orders/{order_id}", headers=auth_headers).json()
        assert data["status"] == "processing"
        assert data["customer_name"] == "Globex"
        assert data["total_amount"] == 0

    def test_orders_cannot_be_deleted(self, client, auth_headers):
        order_id = _create(client, auth_headers, "orders/", {"order_number": "SO-1", "customer_name": "Globex"})
        assert client.delete(f"{API}/orders/{order_id}", headers=auth_headers).status_code == 405


class TestShipmentCRUD:

    def test_created_by_defaults_to_caller(self, client, auth_headers, regular_user):
        shipment_id = _create(client, auth_headers, "shipments/", {
            "shipment_number": "SH-1", "type": "outbound", "carrier": "DHL",
        })
        data = client.get(f"{API}/shipments/{shipment_id}", headers=auth_headers).json()
        assert data["created_by"] == regular_user.id
        assert data["status"] == "pending"

    def test_explicit_created_by_kept(self, client, auth_headers):
        shipment_id = _create(client, auth_headers, "shipments/", {
            "shipment_number": "SH-1", "type": "inbound", "created_by": 42,
        })
        assert client.get(f"{API}/shipments/{shipment_id}", headers=auth_headers).json()["created_by"] == 42

    def test_mark_delivered(self, client, auth_headers):
        shipment_id = _create(client, auth_headers, "shipments/", {
            "shipment_number": "SH-1", "type": "outbound", "tracking_number": "TRK-9",
        })
        client.put(f"{API}/shipments/{shipment_id}", json={
            "status": "delivered", "actual_arrival": "2024-06-01T12:00:00Z",
        }, headers=auth_headers)
        data = client.get(f"{API}/shipments/{shipment_id}", headers=auth_headers).json()
        assert data["status"] == "delivered"
        assert data["tracking_number"] == "TRK-9"

    def test_shipments_cannot_be_deleted(self, client, auth_headers):
        shipment_id = _create(client, auth_headers, "shipments/", {"shipment_number": "SH-1", "type": "inbound"})
        assert client.delete(f"{API}/shipments/{shipment_id}", headers=auth_headers).status_code == 405


class TestWarehouseLocations:

    def test_location_tree(self, client, auth_headers):
        warehouse_id = _create(client, auth_headers, "warehouse/locations", {
            "name": "Main", "code": "WH-1", "type": "warehouse", "capacity": 1000,
        })
        zone_id = _create(client, auth_headers, "warehouse/locations", {
            "name": "Cold zone", "code": "WH-1-Z1", "type": "zone", "parent_id": warehouse_id,
        })
        children = client.get(f"{API}/warehouse/locations/{warehouse_id}/children", headers=auth_headers).json()
        assert [c["id"] for c in children] == [zone_id]

        locations = client.get(f"{API}/warehouse/locations", headers=auth_headers).json()
        assert len(locations) == 2

    def test_update_utilization(self, client, auth_headers):
        location_id = _create(client, auth_headers, "warehouse/locations", {
            "name": "Main", "code": "WH-1", "type": "warehouse", "capacity": 1000,
        })
        client.put(f"{API}/warehouse/locations/{location_id}", json={"current_utilization": 250}, headers=auth_headers)
        data = client.get(f"{API}/warehouse/locations/{location_id}", headers=auth_headers).json()
        assert data["current_utilization"] == 250
        assert data["capacity"] == 1000
        assert data["status"] == "active"

    def test_missing_location_is_null(self, client, auth_headers):
        assert client.get(f"{API}/warehouse/locations/123", headers=auth_headers).json() is None


class TestPurchaseOrders:

    def test_purchase_order_flow(self, client, auth_headers, regular_user):
        po_id = _create(client, auth_headers, "purchase-orders/", {"order_number": "PO-1", "supplier_id": 1})
        po = client.get(f"{API}/purchase-orders/{po_id}", headers=auth_headers).json()
        assert po["status"] == "draft"
        assert po["created_by"] == regular_user.id

        item_id = _create(client, auth_headers, f"purchase-orders/{po_id}/items", {
            "material_id": 5, "quantity": 40, "unit": "kg", "unit_price": 12,
        })
        client.put(f"{API}/purchase-orders/items/{item_id}", json={"received_quantity": 38}, headers=auth_headers)
        items = client.get(f"{API}/purchase-orders/{po_id}/items", headers=auth_headers).json()
        assert items[0]["total_price"] == 480
        assert items[0]["received_quantity"] == 38

        client.put(f"{API}/purchase-orders/{po_id}", json={"status": "submitted"}, headers=auth_headers)
        assert client.get(f"{API}/purchase-orders/{po_id}", headers=auth_headers).json()["status"] == "submitted"


class TestInventoryTransactions:

    def test_append_and_filter_by_material(self, client, auth_headers, regular_user):
        _create(client, auth_headers, "inventory/transactions", {
            "material_id": 1, "transaction_type": "receipt", "quantity": 100, "unit": "kg",
            "reference_type": "purchase_order", "reference_id": 1,
        })
        _create(client, auth_headers, "inventory/transactions", {
            "material_id": 2, "transaction_type": "adjustment", "quantity": -3, "unit": "pcs",
        })
        all_tx = client.get(f"{API}/inventory/transactions", headers=auth_headers).json()
        assert len(all_tx) == 2
        assert all(tx["performed_by"] == regular_user.id for tx in all_tx)

        material_tx = client.get(f"{API}/inventory/materials/1/transactions", headers=auth_headers).json()
        assert [tx["transaction_type"] for tx in material_tx] == ["receipt"]

    def test_ledger_is_append_only(self, client, auth_headers):
        tx_id = _create(client, auth_headers, "inventory/transactions", {
            "material_id": 1, "transaction_type": "receipt", "quantity": 1, "unit": "kg",
        })
        assert client.delete(f"{API}/inventory/transactions/{tx_id}", headers=auth_headers).status_code == 405
        assert client.put(
            f"{API}/inventory/transactions/{tx_id}", json={"quantity": 2}, headers=auth_headers
        ).status_code == 405
