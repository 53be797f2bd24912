"""
Configuration management for the Daily Pulse service.

Handles environment variables for the hosted store and metric windows.
"""

import os
from typing import Optional
from dataclasses import dataclass


@dataclass
class SupabaseSettings:
    """Hosted store (PostgREST + auth) configuration."""

    url: Optional[str] = None
    anon_key: Optional[str] = None
    businesses_table: str = "businesses"
    settings_table: str = "business_settings"
    entries_table: str = "daily_entries"
    timeout_seconds: float = 10.0


@dataclass
class MetricsConfig:
    """Dashboard computation settings."""

    # Trailing window fetched for the dashboard; covers the 28-entry average
    entries_window_days: int = 40
    recent_entries_limit: int = 10


@dataclass
class DashboardServiceConfig:
    """Main configuration class for the Daily Pulse service."""

    supabase: SupabaseSettings
    metrics: MetricsConfig

    # Logging
    log_level: str = "INFO"


def load_config() -> DashboardServiceConfig:
    """Load configuration from environment variables."""

    supabase_config = SupabaseSettings(
        url=os.getenv("SUPABASE_URL"),
        anon_key=os.getenv("SUPABASE_ANON_KEY"),
        businesses_table=os.getenv("SUPABASE_BUSINESSES_TABLE", "businesses"),
        settings_table=os.getenv("SUPABASE_SETTINGS_TABLE", "business_settings"),
        entries_table=os.getenv("SUPABASE_ENTRIES_TABLE", "daily_entries"),
        timeout_seconds=float(os.getenv("SUPABASE_TIMEOUT_SECONDS", "10")),
    )

    metrics_config = MetricsConfig(
        entries_window_days=int(os.getenv("ENTRIES_WINDOW_DAYS", "40")),
        recent_entries_limit=int(os.getenv("RECENT_ENTRIES_LIMIT", "10")),
    )

    return DashboardServiceConfig(
        supabase=supabase_config,
        metrics=metrics_config,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
