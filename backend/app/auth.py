"""Shared-secret authentication for the game server.

The Roblox game server sends the raw API secret in the Authorization header
(no scheme prefix).
"""

import secrets

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader

from app.config import settings

api_key_scheme = APIKeyHeader(name="Authorization", auto_error=False)


async def verify_api_key(api_key: str | None = Depends(api_key_scheme)) -> str:
    """Validate the Authorization header against the configured API secret.

    Returns:
        The validated key.

    Raises:
        HTTPException: 403 if the header is missing or does not match.
    """
    if api_key is None or not secrets.compare_digest(
        api_key.encode("utf-8"), settings.api_secret.encode("utf-8")
    ):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access Denied",
        )
    return api_key
