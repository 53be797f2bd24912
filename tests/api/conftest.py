#!/usr/bin/env python3
"""
Pytest configuration for API tests

Endpoints run against an in-memory store injected through
``app.dependency_overrides``; no Supabase project is needed.
"""

from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from daily_pulse.api.auth import get_store
from daily_pulse.api.config import get_service_config
from daily_pulse.api.main import app
from daily_pulse.config import DashboardServiceConfig, MetricsConfig, SupabaseSettings
from daily_pulse.integrations.supabase_integration import AuthenticatedUser, SupabaseError
from daily_pulse.schemas.entries import Business, BusinessSettings, DailyEntry

VALID_TOKEN = "valid-token"
USER_ID = "user-123"


class FakeStore:
    """In-memory stand-in for SupabaseStore."""

    def __init__(self):
        self.business: Optional[Business] = None
        self.settings: Optional[BusinessSettings] = None
        self.entries: Dict[str, DailyEntry] = {}
        self.fail = False
        self.calls: List[str] = []

    def _check(self, name: str) -> None:
        self.calls.append(name)
        if self.fail:
            raise SupabaseError("store unavailable", status_code=503)

    async def verify_user_session(self, access_token: str) -> Optional[AuthenticatedUser]:
        if access_token != VALID_TOKEN:
            return None
        return AuthenticatedUser(user_id=USER_ID, email="owner@example.com", access_token=access_token)

    async def fetch_my_business(self, access_token: str) -> Optional[Business]:
        self._check("fetch_my_business")
        return self.business

    async def create_business(self, access_token, owner_user_id, name, target_monthly_revenue=None):
        self._check("create_business")
        self.business = Business(id="biz-new", owner_user_id=owner_user_id, name=name)
        self.settings = BusinessSettings(business_id="biz-new", target_monthly_revenue=target_monthly_revenue)
        return self.business

    async def update_business_name(self, access_token, business_id, name):
        self._check("update_business_name")
        self.business = self.business.model_copy(update={"name": name})

    async def fetch_business_settings(self, access_token, business_id):
        self._check("fetch_business_settings")
        return self.settings

    async def upsert_business_settings(self, access_token, business_id, target_monthly_revenue):
        self._check("upsert_business_settings")
        self.settings = BusinessSettings(business_id=business_id, target_monthly_revenue=target_monthly_revenue)

    async def upsert_daily_entry(self, access_token, business_id, entry_date, revenue, orders, notes=None):
        self._check("upsert_daily_entry")
        entry = DailyEntry(
            id=f"entry-{entry_date}",
            business_id=business_id,
            entry_date=entry_date,
            revenue=revenue,
            orders=orders,
            notes=notes,
        )
        self.entries[entry_date] = entry
        return entry

    async def fetch_entries_last_days(self, access_token, business_id, days, today=None):
        self._check("fetch_entries_last_days")
        return [self.entries[key] for key in sorted(self.entries)]

    def add_entry(self, entry_date: str, revenue: float, orders: int = 10) -> None:
        self.entries[entry_date] = DailyEntry(
            id=f"entry-{entry_date}",
            business_id=self.business.id if self.business else "biz-1",
            entry_date=entry_date,
            revenue=revenue,
            orders=orders,
        )


@pytest.fixture
def fake_store():
    """Store with one business and no goal."""
    store = FakeStore()
    store.business = Business(id="biz-1", owner_user_id=USER_ID, name="Padaria Central")
    store.settings = BusinessSettings(business_id="biz-1", target_monthly_revenue=None)
    return store


@pytest.fixture
def test_client(fake_store):
    """Create test client with the fake store injected."""
    app.dependency_overrides[get_store] = lambda: fake_store
    app.dependency_overrides[get_service_config] = lambda: DashboardServiceConfig(
        supabase=SupabaseSettings(),
        metrics=MetricsConfig(entries_window_days=40, recent_entries_limit=10),
    )
    client = TestClient(app)

    yield client

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """Create authentication headers."""
    return {"Authorization": f"Bearer {VALID_TOKEN}"}
