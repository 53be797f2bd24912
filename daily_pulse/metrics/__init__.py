"""Metrics package for dashboard KPIs, insights and goal pace."""

from .dashboard import (
    DashboardMetrics,
    Insight,
    compute_dashboard_metrics,
    pct,
)
from .pace import (
    GoalPace,
    build_pace_banner,
    clamp,
    compute_goal_pace,
    goal_pace_for,
)
