"""
Authentication utilities for FastAPI routes.

Shared auth dependencies used by all route modules.
"""

import logging

from fastapi import HTTPException, Header
from pydantic import BaseModel

from ecolar.db.client import get_service_client

logger = logging.getLogger(__name__)


class AuthenticatedUser(BaseModel):
    """Authenticated user info from Supabase JWT."""
    id: str
    email: str | None
    access_token: str


def _validate_token(access_token: str) -> AuthenticatedUser | None:
    """Ask Supabase who owns the token. None when it's invalid or expired."""
    try:
        client = get_service_client()
        user_response = client.auth.get_user(access_token)
    except Exception as e:
        logger.warning(f"Auth validation failed: {e}")
        return None

    if not user_response or not user_response.user:
        return None

    user = user_response.user
    return AuthenticatedUser(
        id=user.id,
        email=user.email,
        access_token=access_token,
    )


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization or not authorization.startswith("Bearer "):
        return None
    return authorization[7:]  # Remove "Bearer " prefix


async def get_current_user(authorization: str = Header(None)) -> AuthenticatedUser:
    """
    Validate Supabase JWT and extract user info.

    Expects Authorization header: "Bearer <access_token>"
    """
    if not authorization:
        raise HTTPException(status_code=401, detail="Missing authorization header")

    access_token = _bearer_token(authorization)
    if access_token is None:
        raise HTTPException(status_code=401, detail="Invalid authorization format")

    user = _validate_token(access_token)
    if user is None:
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    return user


async def get_optional_user(authorization: str = Header(None)) -> AuthenticatedUser | None:
    """
    Like get_current_user, but returns None instead of raising.

    Used by guarded pages that redirect to login rather than answering 401.
    """
    access_token = _bearer_token(authorization)
    if access_token is None:
        return None

    return _validate_token(access_token)
