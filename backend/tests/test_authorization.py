"""Authorization tests.

Every route except whoAmI and logout requires a signed-in caller; feature
flag mutations additionally require the admin role.
"""

from datetime import timedelta

import pytest

from traceright.core.security import create_session_token

PROTECTED_READS = [
    "/api/v1/materials/",
    "/api/v1/suppliers/",
    "/api/v1/batches/",
    "/api/v1/recipes/",
    "/api/v1/orders/",
    "/api/v1/shipments/",
    "/api/v1/warehouse/locations",
    "/api/v1/feature-flags/",
    "/api/v1/purchase-orders/",
    "/api/v1/inventory/transactions",
    "/api/v1/integrations/evolution/stats",
]


def _bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


class TestUnauthenticatedDenied:
    """No session should be rejected on protected endpoints."""

    @pytest.mark.parametrize("path", PROTECTED_READS)
    def test_no_token_on_protected_get(self, client, path):
        resp = client.get(path)
        assert resp.status_code == 401
        assert resp.json()["kind"] == "UNAUTHORIZED"

    def test_no_token_on_protected_post(self, client):
        resp = client.post("/api/v1/suppliers/", json={"name": "Acme", "code": "SUP-1"})
        assert resp.status_code == 401

    def test_unauthenticated_precedes_validation(self, client):
        resp = client.post("/api/v1/materials/", json={"type": "not-a-type"})
        assert resp.status_code == 401

    def test_www_authenticate_header(self, client):
        resp = client.get("/api/v1/materials/")
        assert resp.headers.get("WWW-Authenticate") == "Bearer"

    def test_garbage_token(self, client):
        resp = client.get("/api/v1/materials/", headers=_bearer("not-a-jwt"))
        assert resp.status_code == 401

    def test_expired_token(self, client, regular_user):
        token = create_session_token(regular_user.open_id, expires_delta=timedelta(seconds=-1))
        resp = client.get("/api/v1/materials/", headers=_bearer(token))
        assert resp.status_code == 401

    def test_token_for_unknown_user(self, client):
        token = create_session_token("never-signed-in")
        resp = client.get("/api/v1/materials/", headers=_bearer(token))
        assert resp.status_code == 401


class TestAuthenticatedAccess:
    """Any signed-in user may use the non-flag procedures."""

    @pytest.mark.parametrize("path", PROTECTED_READS)
    def test_user_can_read(self, client, auth_headers, path):
        resp = client.get(path, headers=auth_headers)
        assert resp.status_code == 200

    def test_user_can_create_supplier(self, client, auth_headers):
        resp = client.post("/api/v1/suppliers/", json={"name": "Acme", "code": "SUP-1"}, headers=auth_headers)
        assert resp.status_code == 200

    def test_session_cookie_accepted(self, client, regular_user):
        token = create_session_token(regular_user.open_id)
        resp = client.get("/api/v1/materials/", headers={"Cookie": f"app_session_id={token}"})
        assert resp.status_code == 200


class TestPublicAuthRoutes:

    def test_who_am_i_without_session(self, client):
        resp = client.get("/api/v1/auth/me")
        assert resp.status_code == 200
        assert resp.json() is None

    def test_logout_without_session(self, client):
        resp = client.post("/api/v1/auth/logout")
        assert resp.status_code == 200
        assert resp.json() == {"success": True}
