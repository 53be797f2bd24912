"""
Store record schemas.

Mirror the rows of the ``businesses``, ``business_settings`` and
``daily_entries`` tables. Dates are kept as ISO ``YYYY-MM-DD`` strings so
that ordering by string equals chronological ordering.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class InsightLevel(str, Enum):
    """Severity of an insight or pace banner."""
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"


class Business(BaseModel):
    """A business owned by a signed-in user."""
    model_config = ConfigDict(extra="ignore")

    id: str
    owner_user_id: str
    name: str
    created_at: Optional[datetime] = None


class BusinessSettings(BaseModel):
    """Per-business settings. A null target means no goal is set."""
    model_config = ConfigDict(extra="ignore")

    business_id: str
    target_monthly_revenue: Optional[float] = Field(None, ge=0)
    created_at: Optional[datetime] = None


class DailyEntry(BaseModel):
    """One day's recorded revenue and order count for a business."""
    model_config = ConfigDict(extra="ignore")

    id: str
    business_id: str
    entry_date: str = Field(..., description="ISO calendar date, YYYY-MM-DD")
    # Nullable on purpose: the metrics engine coerces missing values to 0
    revenue: Optional[float] = 0.0
    orders: Optional[int] = 0
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
