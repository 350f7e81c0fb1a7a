"""Role-Based Access Control (RBAC) utilities."""

from typing import Annotated, Optional

from fastapi import Depends, Request

from traceright.core.errors import Forbidden, Unauthenticated
from traceright.core.security import decode_session_token, session_token_from_request
from traceright.db.session import StoreDep
from traceright.models.user import User, UserRole
from traceright.services.user_service import get_user_by_open_id

__all__ = [
    "UserRole",
    "get_current_user",
    "get_optional_current_user",
    "require_role",
    "CurrentUser",
    "OptionalCurrentUser",
    "RequireAdmin",
]


def get_optional_current_user(request: Request, store: StoreDep) -> Optional[User]:
    """Resolve the caller from the session token, or None.

    Checks in order:
    1. Authorization: Bearer <token> header
    2. session cookie (HttpOnly)
    """
    token = session_token_from_request(request)
    if not token:
        return None
    payload = decode_session_token(token)
    if payload is None:
        return None
    return get_user_by_open_id(store, payload["sub"])


def get_current_user(
    user: Annotated[Optional[User], Depends(get_optional_current_user)],
) -> User:
    """Get the current authenticated user."""
    if user is None:
        raise Unauthenticated()
    return user


def require_role(role: UserRole, message: Optional[str] = None):
    """Dependency requiring the caller's role to equal ``role``.

    Runs before the handler, so a rejected call never reaches the store.
    """

    def role_checker(
        current_user: Annotated[User, Depends(get_current_user)]
    ) -> User:
        if current_user.role != role:
            raise Forbidden(message or f"Requires role {role.value}")
        return current_user

    return role_checker


# Common role dependencies
CurrentUser = Annotated[User, Depends(get_current_user)]
OptionalCurrentUser = Annotated[Optional[User], Depends(get_optional_current_user)]
RequireAdmin = Annotated[User, Depends(require_role(UserRole.ADMIN))]
