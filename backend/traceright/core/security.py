"""Session tokens and cookie options."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import logging
import secrets

import jwt
from jwt.exceptions import PyJWTError
from starlette.requests import Request

from traceright.core.config import settings

logger = logging.getLogger(__name__)


def create_session_token(
    open_id: str,
    name: str = "",
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed session token for the caller identified by ``open_id``."""
    now = datetime.now(timezone.utc)

    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(days=settings.session_expire_days)

    to_encode: Dict[str, Any] = {
        "sub": open_id,
        "name": name,
        "exp": expire,
        "iat": now,
        "jti": secrets.token_urlsafe(16),
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_session_token(token: str) -> Optional[Dict[str, Any]]:
    """Decode and validate a session token. Returns None when it is not usable."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except PyJWTError as e:
        logger.debug(f"Session token rejected: {e}")
        return None
    if not payload.get("sub"):
        return None
    return payload


def session_token_from_request(request: Request) -> Optional[str]:
    """Read the session token.

    Checks in order:
    1. Authorization: Bearer <token> header
    2. session cookie
    """
    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        token = auth_header.split(" ", 1)[1]
        if token:
            return token
    return request.cookies.get(settings.session_cookie_name) or None


def _is_secure_request(request: Request) -> bool:
    if request.url.scheme == "https":
        return True
    forwarded = request.headers.get("x-forwarded-proto", "")
    return "https" in [proto.strip().lower() for proto in forwarded.split(",")]


def get_session_cookie_options(request: Request) -> Dict[str, Any]:
    """Cookie attributes used when setting or clearing the session cookie."""
    secure = _is_secure_request(request)
    return {
        "path": "/",
        "httponly": True,
        "samesite": "none" if secure else "lax",
        "secure": secure,
    }
