import logging
from typing import Annotated, Any

from fastapi import Cookie, Depends

from app.core import security
from app.core.exceptions import ForbiddenError, UnauthorizedError

logger = logging.getLogger(__name__)


async def get_access_token_from_cookie(
    access_token: Annotated[str | None, Cookie()] = None,
) -> str:
    """Extract the access token issued by the identity service."""
    if not access_token:
        raise UnauthorizedError()
    return access_token


async def get_current_principal(
    access_token: str = Depends(get_access_token_from_cookie),
) -> dict[str, Any]:
    """Decode and validate the access token's claims."""
    payload = security.decode_token(access_token)

    if payload is None or payload.get("type") != "access" or not payload.get("sub"):
        raise UnauthorizedError("Could not validate credentials")

    return payload


async def require_admin(
    principal: dict[str, Any] = Depends(get_current_principal),
) -> dict[str, Any]:
    if principal.get("role") != "admin":
        logger.warning("Denied admin access to principal %s", principal.get("sub"))
        raise ForbiddenError("Administrator privileges required")
    return principal
