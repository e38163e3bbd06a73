"""Admin API key guard for inventory management routes."""

import hmac
from typing import Optional

from fastapi import Header, HTTPException, status

from app.infrastructure.config.settings import settings

ADMIN_KEY_HEADER = "X-Admin-Key"


def require_admin_key(x_admin_key: Optional[str] = Header(None)) -> None:
    """
    Validate the admin API key header.

    Args:
        x_admin_key: Value of the X-Admin-Key header

    Raises:
        HTTPException: 503 if no admin key is configured, 401 if the header
            is missing or does not match
    """
    if not settings.admin_api_key:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Admin access is not configured",
        )

    if not x_admin_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Missing {ADMIN_KEY_HEADER} header",
        )

    if not hmac.compare_digest(
        x_admin_key.encode("utf-8"), settings.admin_api_key.encode("utf-8")
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid admin key",
        )
