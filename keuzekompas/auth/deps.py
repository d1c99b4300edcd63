import logging
from typing import Any, Callable, TypedDict

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from keuzekompas.features.users.repository import user_repository
from keuzekompas.features.users.schemas import UserPublic, to_public
from .service import decode_access_token

logger = logging.getLogger("auth.deps")
security = HTTPBearer(auto_error=False)


class Claims(TypedDict, total=False):
    sub: str
    email: str
    name: str
    iat: int
    exp: int


async def get_current_claims(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> Claims:
    if credentials is None or not credentials.credentials:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Missing token")
    return decode_access_token(credentials.credentials)


async def get_current_user(
    request: Request,
    claims: dict[str, Any] = Depends(get_current_claims),
) -> UserPublic:
    """Resolve the stored user behind a verified token.

    The resolved identity is cached on ``request.state.current_user`` so
    several dependencies in one request share a single lookup.
    """
    cached: UserPublic | None = getattr(request.state, "current_user", None)
    if cached is not None:
        return cached
    user_id = claims.get("sub")
    if not user_id:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Token missing sub")
    doc = await user_repository.get_user_by_id(user_id)
    if not doc:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "User no longer exists")
    current = to_public(doc)
    request.state.current_user = current
    logger.debug("auth_resolved user_id=%s role=%s path=%s", current.id, current.role, request.url.path)
    return current


def require_roles(*allowed: str) -> Callable:
    """Factory returning a dependency that enforces one of the given roles."""
    normalized = {r.lower() for r in allowed if r}

    async def _dep(user: UserPublic = Depends(get_current_user)) -> UserPublic:
        if normalized and user.role.lower() not in normalized:
            raise HTTPException(status.HTTP_403_FORBIDDEN, "Insufficient permissions")
        return user

    return _dep


def require_admin() -> Callable:
    return require_roles("admin")
