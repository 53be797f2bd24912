"""Settings endpoints: business name and monthly revenue goal."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ..auth import get_current_business, get_current_user, get_store
from ..models import SettingsResponse, SettingsUpdateRequest
from ...integrations.supabase_integration import AuthenticatedUser, SupabaseError, SupabaseStore
from ...schemas.entries import Business

router = APIRouter(prefix="/v1/settings", tags=["settings"])

logger = logging.getLogger(__name__)


@router.get("", response_model=SettingsResponse)
async def read_settings(
    current_user: AuthenticatedUser = Depends(get_current_user),
    business: Business = Depends(get_current_business),
    store: SupabaseStore = Depends(get_store),
) -> SettingsResponse:
    try:
        settings = await store.fetch_business_settings(current_user.access_token, business.id)
    except SupabaseError as exc:
        logger.error("Failed to load settings for business %s: %s", business.id, exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Falha ao carregar configurações.",
        ) from exc

    return SettingsResponse(
        business_id=business.id,
        business_name=business.name,
        target_monthly_revenue=settings.target_monthly_revenue if settings else None,
    )


@router.put("", response_model=SettingsResponse)
async def update_settings(
    request: SettingsUpdateRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    business: Business = Depends(get_current_business),
    store: SupabaseStore = Depends(get_store),
) -> SettingsResponse:
    """Rename the business and set or clear its monthly goal."""
    token = current_user.access_token
    try:
        if request.business_name != business.name:
            await store.update_business_name(token, business.id, request.business_name)
        await store.upsert_business_settings(token, business.id, request.target_monthly_revenue)
    except SupabaseError as exc:
        logger.error("Failed to update settings for business %s: %s", business.id, exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Falha ao salvar configurações.",
        ) from exc

    logger.info("Updated settings for business %s", business.id)
    return SettingsResponse(
        business_id=business.id,
        business_name=request.business_name,
        target_monthly_revenue=request.target_monthly_revenue,
    )
