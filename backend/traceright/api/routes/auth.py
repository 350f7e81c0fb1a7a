"""Authentication routes.

Identity comes from the session token (see ``traceright.core.security``).
``whoAmI`` and ``logout`` are the only routes callable without a session.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Request, Response
from pydantic import BaseModel

from traceright.core.config import settings
from traceright.core.errors import Forbidden
from traceright.core.rate_limit import limiter
from traceright.core.rbac import OptionalCurrentUser
from traceright.core.security import create_session_token, get_session_cookie_options
from traceright.db.session import StoreDep
from traceright.schemas.common import SuccessResponse
from traceright.schemas.user import SignInRequest, UserResponse, UserUpsert
from traceright.services.user_service import get_user_by_open_id, upsert_user

logger = logging.getLogger("auth")

router = APIRouter()


class SessionResponse(BaseModel):
    token: str
    user: Optional[UserResponse] = None


@router.get("/me", response_model=Optional[UserResponse], name="auth.whoAmI")
@limiter.limit("60/minute")
def who_am_i(request: Request, current_user: OptionalCurrentUser):
    """The signed-in user, or null."""
    return current_user


@router.post("/logout", response_model=SuccessResponse, name="auth.logout")
@limiter.limit("30/minute")
def logout(request: Request, response: Response):
    """Clear the session cookie. Always succeeds."""
    response.delete_cookie(settings.session_cookie_name, **get_session_cookie_options(request))
    return SuccessResponse()


@router.post("/session", response_model=SessionResponse, name="auth.signIn")
@limiter.limit("5/minute")
def sign_in(request: Request, response: Response, identity: SignInRequest, store: StoreDep):
    """Start a session for an identity already verified by the identity provider.

    Upserts the user (owner elevation applies), then issues the session token
    both in the body and as the session cookie. Disabled unless
    ``DIRECT_SIGN_IN_ENABLED`` is set.
    """
    if not settings.direct_sign_in_enabled:
        raise Forbidden("Direct sign-in is disabled")

    client_ip = request.client.host if request.client else "unknown"
    data = UserUpsert(
        **identity.model_dump(exclude_unset=True),
        last_signed_in=datetime.now(timezone.utc),
    )
    upsert_user(store, data, owner_open_id=settings.owner_open_id)

    token = create_session_token(identity.open_id, name=identity.name or "")
    response.set_cookie(
        settings.session_cookie_name,
        token,
        max_age=settings.session_expire_days * 24 * 3600,
        **get_session_cookie_options(request),
    )
    logger.info(f"Session started for {identity.open_id} from IP: {client_ip}")
    return SessionResponse(token=token, user=get_user_by_open_id(store, identity.open_id))
