"""Request-scoped dependencies shared by the v1 routers."""

from fastapi import Header

from workout_log.core.errors import UnauthenticatedError


async def get_current_user_id(x_user_id: str | None = Header(None, alias="X-User-Id")) -> str:
    """
    Opaque user id forwarded by the auth gateway.

    Only presence is checked; the value is used as the ownership key as-is.
    """
    if x_user_id is None or not x_user_id.strip():
        raise UnauthenticatedError("Missing X-User-Id header")
    return x_user_id.strip()
