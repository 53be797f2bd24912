#!/usr/bin/env python3
"""
Authentication dependencies for the Daily Pulse API.

Bearer tokens are Supabase access tokens; they are verified against the
identity provider and forwarded to the store so row level security applies.
"""

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..integrations.supabase_integration import AuthenticatedUser, SupabaseError, SupabaseStore
from ..schemas.entries import Business

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_store(request: Request) -> SupabaseStore:
    """Store created by the application lifespan."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Store is not configured",
        )
    return store


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    store: SupabaseStore = Depends(get_store),
) -> AuthenticatedUser:
    """Resolve the signed-in user from the bearer token."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise credentials_exception

    try:
        user = await store.verify_user_session(credentials.credentials)
    except SupabaseError as exc:
        logger.error("Session verification failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Identity provider unavailable",
        ) from exc

    if user is None:
        raise credentials_exception
    return user


async def get_current_business(
    current_user: AuthenticatedUser = Depends(get_current_user),
    store: SupabaseStore = Depends(get_store),
) -> Business:
    """The signed-in user's business; 404 until setup has been completed."""
    try:
        business = await store.fetch_my_business(current_user.access_token)
    except SupabaseError as exc:
        logger.error("Failed to load business for user %s: %s", current_user.user_id, exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to load business",
        ) from exc

    if business is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Business setup required",
        )
    return business
