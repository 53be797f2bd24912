#!/usr/bin/env python3
"""
Pydantic models for the Daily Pulse API
"""

import math
from datetime import date
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..schemas.entries import DailyEntry, InsightLevel
from ..utils.numbers import parse_number_pt_br


def _parse_amount(value: Any) -> Any:
    if isinstance(value, str):
        return parse_number_pt_br(value)
    return value


def _parse_optional_amount(value: Any) -> Any:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return _parse_amount(value)


def _require_name(value: str) -> str:
    name = value.strip()
    if not name:
        raise ValueError("Informe o nome do negócio.")
    return name


class DailyEntryRequest(BaseModel):
    """Request model for recording one day."""

    entry_date: date = Field(..., description="Calendar date of the entry")
    revenue: float = Field(..., description="Revenue, number or pt-BR text such as '3.300,50'")
    orders: int = Field(..., description="Number of orders")
    notes: Optional[str] = Field(None, description="Free-text note")

    @field_validator("revenue", mode="before")
    @classmethod
    def parse_revenue(cls, v):
        return _parse_amount(v)

    @field_validator("revenue")
    @classmethod
    def validate_revenue(cls, v):
        if math.isnan(v) or math.isinf(v) or v < 0:
            raise ValueError("Faturamento inválido (ex: 3300 ou 3300,50).")
        return v

    @field_validator("orders", mode="before")
    @classmethod
    def parse_orders(cls, v):
        if isinstance(v, bool):
            raise ValueError("Pedidos deve ser um número inteiro.")
        if isinstance(v, str):
            text = v.strip()
            # A blank field counts as zero orders
            if not text:
                return 0
            try:
                v = float(text)
            except ValueError as exc:
                raise ValueError("Pedidos deve ser um número inteiro.") from exc
        if isinstance(v, float):
            if not v.is_integer():
                raise ValueError("Pedidos deve ser um número inteiro.")
            return int(v)
        return v

    @field_validator("orders")
    @classmethod
    def validate_orders(cls, v):
        if v < 0:
            raise ValueError("Pedidos deve ser um número inteiro.")
        return v

    @field_validator("notes")
    @classmethod
    def blank_notes_to_none(cls, v):
        if v is None:
            return None
        return v.strip() or None


class TargetRequestMixin(BaseModel):
    target_monthly_revenue: Optional[float] = Field(
        None,
        description="Monthly revenue goal; blank or null clears it",
    )

    @field_validator("target_monthly_revenue", mode="before")
    @classmethod
    def parse_target(cls, v):
        return _parse_optional_amount(v)

    @field_validator("target_monthly_revenue")
    @classmethod
    def validate_target(cls, v):
        if v is not None and (math.isnan(v) or math.isinf(v) or v < 0):
            raise ValueError("Meta mensal inválida (ex: 50000 ou 50000,50).")
        return v


class BusinessCreateRequest(TargetRequestMixin):
    """Request model for the first-time business setup."""

    name: str = Field(..., max_length=255)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return _require_name(v)


class SettingsUpdateRequest(TargetRequestMixin):
    """Request model for updating the business name and monthly goal."""

    business_name: str = Field(..., max_length=255)

    @field_validator("business_name")
    @classmethod
    def validate_name(cls, v):
        return _require_name(v)


class InsightDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str
    message: str
    level: InsightLevel


class DashboardMetricsDTO(BaseModel):
    """Response shape of the computed dashboard metrics."""
    model_config = ConfigDict(from_attributes=True)

    last_entry: Optional[DailyEntry] = None
    month_total: float = 0.0

    last7_revenue_avg: Optional[float] = None
    last28_revenue_avg: Optional[float] = None
    last_vs28_pct: Optional[float] = None

    last_ticket_avg: Optional[float] = None
    last7_ticket_avg: Optional[float] = None
    last28_ticket_avg: Optional[float] = None
    last_ticket_vs7_pct: Optional[float] = None

    last7_vs28_revenue_pct: Optional[float] = None
    last7_vs28_ticket_pct: Optional[float] = None

    insights: List[InsightDTO] = Field(default_factory=list)


class GoalPaceDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    goal_pct: Optional[float] = None
    pace_pct: Optional[float] = None
    projected_month_total: Optional[float] = None
    pace_status: Optional[InsightLevel] = None
    days_in_month: Optional[int] = None
    day_of_month: Optional[int] = None


class DashboardResponse(BaseModel):
    """Everything the dashboard page renders."""

    business_id: str
    business_name: str
    target_monthly_revenue: Optional[float] = None
    metrics: DashboardMetricsDTO
    goal_pace: GoalPaceDTO
    banner: Optional[InsightDTO] = None
    recent_entries: List[DailyEntry] = Field(default_factory=list)


class EntrySavedResponse(BaseModel):
    """Response model after recording a day."""

    entry: DailyEntry
    message: str
    next_entry_date: str = Field(..., description="Suggested date for the next entry")


class SettingsResponse(BaseModel):
    business_id: str
    business_name: str
    target_monthly_revenue: Optional[float] = None


class HealthResponse(BaseModel):
    status: str
    version: str
    store_configured: bool
