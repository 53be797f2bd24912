"""Daily entry endpoint: record (or overwrite) one day's numbers."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ..auth import get_current_business, get_current_user, get_store
from ..models import DailyEntryRequest, EntrySavedResponse
from ...integrations.supabase_integration import AuthenticatedUser, SupabaseError, SupabaseStore
from ...schemas.entries import Business
from ...utils.numbers import format_brl, next_entry_date

router = APIRouter(prefix="/v1/entries", tags=["entries"])

logger = logging.getLogger(__name__)


@router.post("", response_model=EntrySavedResponse, status_code=status.HTTP_200_OK)
async def save_entry(
    request: DailyEntryRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    business: Business = Depends(get_current_business),
    store: SupabaseStore = Depends(get_store),
) -> EntrySavedResponse:
    """Upsert the entry for ``(business, entry_date)``.

    The response carries the following date so clients can keep logging
    history day by day.
    """
    entry_date = request.entry_date.isoformat()
    try:
        entry = await store.upsert_daily_entry(
            current_user.access_token,
            business_id=business.id,
            entry_date=entry_date,
            revenue=request.revenue,
            orders=request.orders,
            notes=request.notes,
        )
    except SupabaseError as exc:
        logger.error("Failed to save entry %s for business %s: %s", entry_date, business.id, exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Falha ao salvar lançamento.",
        ) from exc

    return EntrySavedResponse(
        entry=entry,
        message=f"Salvo {format_brl(request.revenue)} em {entry_date}",
        next_entry_date=next_entry_date(entry_date),
    )
