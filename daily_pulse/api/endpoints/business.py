"""Business setup endpoint, used once after sign-up."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ..auth import get_current_user, get_store
from ..models import BusinessCreateRequest, SettingsResponse
from ...integrations.supabase_integration import AuthenticatedUser, SupabaseError, SupabaseStore

router = APIRouter(prefix="/v1/business", tags=["business"])

logger = logging.getLogger(__name__)


@router.post("", response_model=SettingsResponse, status_code=status.HTTP_201_CREATED)
async def create_business(
    request: BusinessCreateRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    store: SupabaseStore = Depends(get_store),
) -> SettingsResponse:
    token = current_user.access_token
    try:
        existing = await store.fetch_my_business(token)
        if existing is not None:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Business already exists",
            )
        business = await store.create_business(
            token,
            owner_user_id=current_user.user_id,
            name=request.name,
            target_monthly_revenue=request.target_monthly_revenue,
        )
    except SupabaseError as exc:
        logger.error("Failed to create business for user %s: %s", current_user.user_id, exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Falha ao criar negócio.",
        ) from exc

    return SettingsResponse(
        business_id=business.id,
        business_name=business.name,
        target_monthly_revenue=request.target_monthly_revenue,
    )
