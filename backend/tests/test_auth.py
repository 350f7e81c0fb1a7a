"""Session routes: whoAmI, logout, direct sign-in."""

import jwt
import pytest

from traceright.core.config import settings
from traceright.core.security import (
    create_session_token,
    decode_session_token,
    get_session_cookie_options,
)
from traceright.models.user import UserRole
from traceright.services.user_service import get_user_by_open_id


class TestSessionTokens:

    def test_round_trip(self):
        token = create_session_token("abc", name="Ada")
        payload = decode_session_token(token)
        assert payload["sub"] == "abc"
        assert payload["name"] == "Ada"

    def test_foreign_signature_rejected(self):
        forged = jwt.encode({"sub": "abc"}, "not-the-server-secret-0123456789abcdef", algorithm=settings.algorithm)
        assert decode_session_token(forged) is None

    def test_token_without_subject_rejected(self):
        assert decode_session_token(create_session_token("")) is None


class _FakeRequest:
    def __init__(self, scheme="http", headers=None):
        self.url = type("URL", (), {"scheme": scheme})()
        self.headers = headers or {}


class TestCookieOptions:

    def test_plain_http(self):
        options = get_session_cookie_options(_FakeRequest())
        assert options == {"path": "/", "httponly": True, "samesite": "lax", "secure": False}

    def test_forwarded_https(self):
        options = get_session_cookie_options(_FakeRequest(headers={"x-forwarded-proto": "https"}))
        assert options["secure"] is True
        assert options["samesite"] == "none"


class TestWhoAmI:

    def test_returns_signed_in_user(self, client, auth_headers, regular_user):
        resp = client.get("/api/v1/auth/me", headers=auth_headers)
        assert resp.status_code == 200
        data = resp.json()
        assert data["open_id"] == regular_user.open_id
        assert data["role"] == "user"

    def test_invalid_token_is_anonymous(self, client):
        resp = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer nope"})
        assert resp.json() is None


class TestLogout:

    def test_clears_session_cookie(self, client, auth_headers):
        resp = client.post("/api/v1/auth/logout", headers=auth_headers)
        assert resp.status_code == 200
        assert resp.json() == {"success": True}
        set_cookie = resp.headers.get("set-cookie", "")
        assert set_cookie.startswith(f"{settings.session_cookie_name}=")
        assert "Max-Age=0" in set_cookie
        assert "HttpOnly" in set_cookie
        assert "Path=/" in set_cookie


class TestDirectSignIn:

    def test_disabled_by_default(self, client, store):
        resp = client.post("/api/v1/auth/session", json={"open_id": "new-user"})
        assert resp.status_code == 403
        assert get_user_by_open_id(store, "new-user") is None

    @pytest.fixture
    def sign_in_enabled(self, monkeypatch):
        monkeypatch.setattr(settings, "direct_sign_in_enabled", True)
        monkeypatch.setattr(settings, "owner_open_id", "the-owner")

    def test_sign_in_creates_user_and_session(self, client, store, sign_in_enabled):
        resp = client.post("/api/v1/auth/session", json={"open_id": "new-user", "name": "Neo", "login_method": "github"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["user"]["open_id"] == "new-user"
        assert body["user"]["role"] == "user"
        assert settings.session_cookie_name in resp.cookies

        me = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {body['token']}"})
        assert me.json()["name"] == "Neo"

    def test_owner_signs_in_as_admin(self, client, store, sign_in_enabled):
        resp = client.post("/api/v1/auth/session", json={"open_id": "the-owner"})
        assert resp.json()["user"]["role"] == "admin"
        assert get_user_by_open_id(store, "the-owner").role == UserRole.ADMIN

    def test_missing_open_id(self, client, sign_in_enabled):
        resp = client.post("/api/v1/auth/session", json={"name": "Nobody"})
        assert resp.status_code == 400
        assert resp.json()["kind"] == "BAD_REQUEST"

    def test_role_in_body_is_ignored(self, client, store, sign_in_enabled):
        resp = client.post("/api/v1/auth/session", json={"open_id": "mallory", "role": "admin"})
        assert resp.status_code == 200
        assert resp.json()["user"]["role"] == "user"

        headers = {"Authorization": f"Bearer {resp.json()['token']}"}
        flag = client.post("/api/v1/feature-flags/", json={"key": "beta", "name": "Beta"}, headers=headers)
        assert flag.status_code == 403

    def test_existing_admin_is_not_demoted(self, client, store, admin_user, sign_in_enabled):
        resp = client.post("/api/v1/auth/session", json={"open_id": admin_user.open_id, "role": "user"})
        assert resp.json()["user"]["role"] == "admin"
        assert get_user_by_open_id(store, admin_user.open_id).role == UserRole.ADMIN
