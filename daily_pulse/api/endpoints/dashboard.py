"""Dashboard endpoint.

Fetches the trailing window of daily entries and the business settings,
runs the metrics engine and the goal-pace projection, and returns the
bundle the dashboard page renders.
"""

import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ..auth import get_current_business, get_current_user, get_store
from ..config import get_service_config
from ..models import DashboardMetricsDTO, DashboardResponse, GoalPaceDTO, InsightDTO
from ...config import DashboardServiceConfig
from ...integrations.supabase_integration import AuthenticatedUser, SupabaseError, SupabaseStore
from ...metrics.dashboard import compute_dashboard_metrics
from ...metrics.pace import build_pace_banner, goal_pace_for
from ...schemas.entries import Business

router = APIRouter(prefix="/v1/dashboard", tags=["dashboard"])

logger = logging.getLogger(__name__)


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    current_user: AuthenticatedUser = Depends(get_current_user),
    business: Business = Depends(get_current_business),
    store: SupabaseStore = Depends(get_store),
    config: DashboardServiceConfig = Depends(get_service_config),
) -> DashboardResponse:
    """Return KPIs, insights and goal pace for the signed-in user's business."""
    token = current_user.access_token
    try:
        entries, settings = await asyncio.gather(
            store.fetch_entries_last_days(token, business.id, config.metrics.entries_window_days),
            store.fetch_business_settings(token, business.id),
        )
    except SupabaseError as exc:
        logger.error("Failed to load dashboard data for business %s: %s", business.id, exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to load dashboard data",
        ) from exc

    metrics = compute_dashboard_metrics(entries)
    target = settings.target_monthly_revenue if settings else None
    pace = goal_pace_for(metrics, target)
    banner = build_pace_banner(pace)

    limit = config.metrics.recent_entries_limit
    recent = sorted(entries, key=lambda e: e.entry_date)[-limit:] if limit > 0 else []
    recent.reverse()

    return DashboardResponse(
        business_id=business.id,
        business_name=business.name,
        target_monthly_revenue=target,
        metrics=DashboardMetricsDTO.model_validate(metrics),
        goal_pace=GoalPaceDTO.model_validate(pace),
        banner=InsightDTO.model_validate(banner) if banner else None,
        recent_entries=recent,
    )
