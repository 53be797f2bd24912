"""
Supabase integration for the Daily Pulse service.
Reads and writes businesses, settings and daily entries through the
PostgREST API and verifies user sessions against the auth API.

Every table call forwards the caller's access token, so row level security
on the hosted side limits rows to the signed-in owner.
"""

import logging
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import httpx
from pydantic import BaseModel

from ..config import SupabaseSettings
from ..schemas.entries import Business, BusinessSettings, DailyEntry

logger = logging.getLogger(__name__)


class SupabaseError(Exception):
    """A store or auth request failed or was rejected."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AuthenticatedUser(BaseModel):
    """Identity resolved from a Supabase access token."""
    user_id: str
    email: Optional[str] = None
    access_token: str


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(body, dict):
        for key in ("message", "msg", "error_description", "error"):
            if body.get(key):
                return str(body[key])
    return str(body)


class SupabaseStore:
    """Async client for the daily entry tables and the identity provider."""

    def __init__(self, config: SupabaseSettings, client: Optional[httpx.AsyncClient] = None):
        if not config.url or not config.anon_key:
            raise ValueError("Supabase URL and anon key are required")
        self.config = config
        self.base_url = config.url.rstrip("/")
        self.client = client or httpx.AsyncClient(timeout=config.timeout_seconds)

        logger.info("Initialized Supabase store for %s", self.base_url)

    def _headers(self, access_token: str, prefer: Optional[str] = None) -> Dict[str, str]:
        headers = {
            "Authorization": f"Bearer {access_token}",
            "apikey": self.config.anon_key,
            "Content-Type": "application/json",
        }
        if prefer:
            headers["Prefer"] = prefer
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        access_token: str,
        params: Optional[Dict[str, str]] = None,
        json: Any = None,
        prefer: Optional[str] = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = await self.client.request(
                method,
                url,
                params=params,
                json=json,
                headers=self._headers(access_token, prefer),
            )
        except httpx.HTTPError as exc:
            logger.error("Supabase request %s %s failed: %s", method, path, exc)
            raise SupabaseError(f"Request to store failed: {exc}") from exc

        if response.status_code >= 400:
            message = _error_message(response)
            logger.warning(
                "Supabase request rejected",
                extra={"method": method, "path": path, "status_code": response.status_code},
            )
            raise SupabaseError(message, status_code=response.status_code)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def _table(self, name: str) -> str:
        return f"/rest/v1/{name}"

    async def verify_user_session(self, access_token: str) -> Optional[AuthenticatedUser]:
        """Resolve the user behind an access token, or None if it is not valid."""
        try:
            user_data = await self._request("GET", "/auth/v1/user", access_token)
        except SupabaseError as exc:
            if exc.status_code in (401, 403):
                logger.info("Rejected access token: %s", exc.message)
                return None
            raise

        if not user_data or "id" not in user_data:
            return None
        return AuthenticatedUser(
            user_id=user_data["id"],
            email=user_data.get("email"),
            access_token=access_token,
        )

    async def fetch_my_business(self, access_token: str) -> Optional[Business]:
        """First business visible to the signed-in user."""
        rows = await self._request(
            "GET",
            self._table(self.config.businesses_table),
            access_token,
            params={"select": "*", "limit": "1"},
        )
        if not rows:
            return None
        return Business(**rows[0])

    async def create_business(
        self,
        access_token: str,
        owner_user_id: str,
        name: str,
        target_monthly_revenue: Optional[float] = None,
    ) -> Business:
        """Create a business and its settings row."""
        rows = await self._request(
            "POST",
            self._table(self.config.businesses_table),
            access_token,
            json={"owner_user_id": owner_user_id, "name": name},
            prefer="return=representation",
        )
        if not rows:
            raise SupabaseError("Store did not return the created business")
        business = Business(**rows[0])

        await self._request(
            "POST",
            self._table(self.config.settings_table),
            access_token,
            json={"business_id": business.id, "target_monthly_revenue": target_monthly_revenue},
        )
        logger.info("Created business %s for user %s", business.id, owner_user_id)
        return business

    async def update_business_name(self, access_token: str, business_id: str, name: str) -> None:
        await self._request(
            "PATCH",
            self._table(self.config.businesses_table),
            access_token,
            params={"id": f"eq.{business_id}"},
            json={"name": name},
        )

    async def fetch_business_settings(self, access_token: str, business_id: str) -> Optional[BusinessSettings]:
        rows = await self._request(
            "GET",
            self._table(self.config.settings_table),
            access_token,
            params={
                "select": "business_id,target_monthly_revenue,created_at",
                "business_id": f"eq.{business_id}",
            },
        )
        if not rows:
            return None
        return BusinessSettings(**rows[0])

    async def upsert_business_settings(
        self,
        access_token: str,
        business_id: str,
        target_monthly_revenue: Optional[float],
    ) -> None:
        await self._request(
            "POST",
            self._table(self.config.settings_table),
            access_token,
            params={"on_conflict": "business_id"},
            json={"business_id": business_id, "target_monthly_revenue": target_monthly_revenue},
            prefer="resolution=merge-duplicates",
        )

    async def upsert_daily_entry(
        self,
        access_token: str,
        business_id: str,
        entry_date: str,
        revenue: float,
        orders: int,
        notes: Optional[str] = None,
    ) -> DailyEntry:
        """Insert or replace the entry for ``(business_id, entry_date)``."""
        rows = await self._request(
            "POST",
            self._table(self.config.entries_table),
            access_token,
            params={"on_conflict": "business_id,entry_date"},
            json={
                "business_id": business_id,
                "entry_date": entry_date,
                "revenue": revenue,
                "orders": orders,
                "notes": notes,
            },
            prefer="resolution=merge-duplicates,return=representation",
        )
        if not rows:
            raise SupabaseError("Store did not return the saved entry")
        logger.debug("Upserted entry %s for business %s", entry_date, business_id)
        return DailyEntry(**rows[0])

    async def fetch_entries_last_days(
        self,
        access_token: str,
        business_id: str,
        days: int,
        today: Optional[date] = None,
    ) -> List[DailyEntry]:
        """Entries dated from ``today - days`` onwards, oldest first."""
        if today is None:
            today = datetime.now(timezone.utc).date()
        from_date = (today - timedelta(days=days)).isoformat()

        rows = await self._request(
            "GET",
            self._table(self.config.entries_table),
            access_token,
            params={
                "select": "*",
                "business_id": f"eq.{business_id}",
                "entry_date": f"gte.{from_date}",
                "order": "entry_date.asc",
            },
        )
        entries = [DailyEntry(**row) for row in rows or []]
        logger.info("Fetched %d entries for business %s since %s", len(entries), business_id, from_date)
        return entries

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()
