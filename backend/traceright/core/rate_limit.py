"""Shared rate limiter instance for use across route files."""

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from traceright.core.config import settings
from traceright.core.security import decode_session_token, session_token_from_request


def get_user_or_ip(request: Request) -> str:
    """Rate limit by session identity if present, else by IP."""
    token = session_token_from_request(request)
    if token:
        payload = decode_session_token(token)
        if payload:
            return f"user:{payload['sub']}"
    return get_remote_address(request)


limiter = Limiter(key_func=get_user_or_ip, enabled=settings.rate_limit_enabled)
