"""Monthly goal progress and linear pace projection.

Month-to-date revenue is extrapolated to the whole month assuming every
remaining day earns the current daily average, then compared with the
owner's monthly target. The month is anchored on the latest entry's date,
not on today's date.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..schemas.entries import InsightLevel
from ..utils.numbers import format_brl
from .dashboard import DashboardMetrics, Insight, entry_date_of

PCT_CEILING = 999.0
ON_PACE_PCT = 100.0
NEAR_PACE_PCT = 90.0


@dataclass(frozen=True)
class GoalPace:
    goal_pct: Optional[float] = None
    pace_pct: Optional[float] = None
    projected_month_total: Optional[float] = None
    pace_status: Optional[InsightLevel] = None
    days_in_month: Optional[int] = None
    day_of_month: Optional[int] = None


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def pace_status_for(pace_pct: Optional[float]) -> Optional[InsightLevel]:
    if pace_pct is None:
        return None
    if pace_pct >= ON_PACE_PCT:
        return InsightLevel.SUCCESS
    if pace_pct >= NEAR_PACE_PCT:
        return InsightLevel.WARNING
    return InsightLevel.DANGER


def compute_goal_pace(
    month_total: float,
    target_monthly_revenue: Optional[float],
    anchor_date: Optional[str],
) -> GoalPace:
    """Goal and pace percentages for the month of ``anchor_date``.

    Returns an empty ``GoalPace`` when there is no target, the target is not
    positive, or there is no anchor (no entries yet).
    """
    if not target_monthly_revenue or target_monthly_revenue <= 0 or not anchor_date:
        return GoalPace()

    try:
        anchor = date.fromisoformat(anchor_date[:10])
    except ValueError:
        return GoalPace()

    days_in_month = calendar.monthrange(anchor.year, anchor.month)[1]
    day_of_month = max(1, anchor.day)

    projected = (month_total / day_of_month) * days_in_month
    goal_pct = clamp(month_total / target_monthly_revenue * 100, 0, PCT_CEILING)
    pace_pct = clamp(projected / target_monthly_revenue * 100, 0, PCT_CEILING)

    return GoalPace(
        goal_pct=goal_pct,
        pace_pct=pace_pct,
        projected_month_total=projected,
        pace_status=pace_status_for(pace_pct),
        days_in_month=days_in_month,
        day_of_month=day_of_month,
    )


def goal_pace_for(metrics: DashboardMetrics, target_monthly_revenue: Optional[float]) -> GoalPace:
    """Goal pace anchored on the latest entry of a computed dashboard."""
    anchor = entry_date_of(metrics.last_entry) if metrics.last_entry is not None else None
    return compute_goal_pace(metrics.month_total, target_monthly_revenue, anchor)


def build_pace_banner(pace: GoalPace) -> Optional[Insight]:
    """Headline banner with the projected month close, coloured by pace."""
    if pace.projected_month_total is None or pace.pace_status is None:
        return None

    days_elapsed = max(1, pace.day_of_month or 1)
    suffix = ""
    if days_elapsed < 3:
        suffix = " (estimativa inicial)"
    elif days_elapsed < 7:
        suffix = " (estimativa preliminar)"

    return Insight(
        title="Ritmo do mês",
        message=(
            f"Mantendo esse ritmo, você fecha o mês em "
            f"{format_brl(pace.projected_month_total)}{suffix}."
        ),
        level=pace.pace_status,
    )
