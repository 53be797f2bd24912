"""Dashboard metrics and insight rules computed from daily entries.

``compute_dashboard_metrics`` is a pure function: it takes a snapshot of a
business's daily entries (any order, any window length) and returns rolling
revenue and ticket averages, their percentage deltas, the month-to-date
total and a list of rule-based insights. Nothing is fetched, logged or
mutated here; the API layer supplies the entries and renders the result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..schemas.entries import InsightLevel
from ..utils.numbers import round_half_away_from_zero

SHORT_WINDOW = 7
LONG_WINDOW = 28

DAY_VS_MONTH_THRESHOLD = 20.0
TICKET_VS_WEEK_THRESHOLD = 15.0
WEEK_VS_MONTH_THRESHOLD = 12.0

BUILDING_REFERENCE_DAYS = 7
REFINING_REFERENCE_DAYS = 14


@dataclass(frozen=True)
class Insight:
    title: str
    message: str
    level: InsightLevel


@dataclass
class DashboardMetrics:
    """Derived KPIs for one business. Recomputed on every call."""

    last_entry: Optional[Any] = None
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

    insights: List[Insight] = field(default_factory=list)


def _field(entry: Any, name: str) -> Any:
    if isinstance(entry, Mapping):
        return entry.get(name)
    return getattr(entry, name, None)


def _revenue(entry: Any) -> float:
    return float(_field(entry, "revenue") or 0)


def _orders(entry: Any) -> int:
    return int(_field(entry, "orders") or 0)


def entry_date_of(entry: Any) -> str:
    return str(_field(entry, "entry_date") or "")


def _ticket(entry: Any) -> Optional[float]:
    """Revenue per order for a single day, or None without orders."""
    orders = _orders(entry)
    if orders <= 0:
        return None
    return _revenue(entry) / orders


def pct(current: Optional[float], base: Optional[float]) -> Optional[float]:
    """Percentage difference of ``current`` relative to ``base``.

    None when either side is missing or the base is zero.
    """
    if current is None or base is None or base == 0:
        return None
    return ((current - base) / base) * 100


def average_revenue(entries: Sequence[Any]) -> Optional[float]:
    if not entries:
        return None
    return sum(_revenue(e) for e in entries) / len(entries)


def average_ticket(entries: Sequence[Any]) -> Optional[float]:
    """Mean of each day's ticket. Days without orders count as 0."""
    if not entries:
        return None
    return sum(_ticket(e) or 0.0 for e in entries) / len(entries)


def _year_month(iso: str) -> Optional[Tuple[int, int]]:
    try:
        parsed = date.fromisoformat(iso[:10])
    except ValueError:
        return None
    return parsed.year, parsed.month


def month_total(sorted_entries: Sequence[Any]) -> float:
    """Revenue of the entries sharing the latest entry's calendar month."""
    if not sorted_entries:
        return 0.0
    anchor = _year_month(entry_date_of(sorted_entries[-1]))
    if anchor is None:
        return 0.0
    return sum(
        _revenue(e) for e in sorted_entries
        if _year_month(entry_date_of(e)) == anchor
    )


def _threshold_insight(
    value: Optional[float],
    threshold: float,
    drop: Tuple[str, str, InsightLevel],
    rise: Tuple[str, str, InsightLevel],
) -> Optional[Insight]:
    """Pick the drop or rise insight for a percentage, if it crosses ``threshold``.

    Message templates take the rounded absolute percentage as ``{pct}``.
    """
    if value is None:
        return None
    if value <= -threshold:
        title, template, level = drop
    elif value >= threshold:
        title, template, level = rise
    else:
        return None
    return Insight(
        title=title,
        message=template.format(pct=round_half_away_from_zero(abs(value))),
        level=level,
    )


def build_insights(metrics: DashboardMetrics, entry_count: int) -> List[Insight]:
    rules = [
        (
            metrics.last_vs28_pct,
            DAY_VS_MONTH_THRESHOLD,
            ("Queda fora do normal",
             "Seu último lançamento está {pct}% abaixo da média das últimas 4 semanas.",
             InsightLevel.DANGER),
            ("Dia acima do normal",
             "Seu último lançamento está {pct}% acima da média das últimas 4 semanas.",
             InsightLevel.SUCCESS),
        ),
        (
            metrics.last_ticket_vs7_pct,
            TICKET_VS_WEEK_THRESHOLD,
            ("Ticket caiu",
             "O ticket do último dia ficou {pct}% abaixo do ticket médio da última semana.",
             InsightLevel.WARNING),
            ("Ticket subiu",
             "O ticket do último dia ficou {pct}% acima do ticket médio da última semana.",
             InsightLevel.SUCCESS),
        ),
        (
            metrics.last7_vs28_revenue_pct,
            WEEK_VS_MONTH_THRESHOLD,
            ("Semana mais fraca",
             "A média da última semana está {pct}% abaixo da média das últimas 4 semanas.",
             InsightLevel.WARNING),
            ("Semana mais forte",
             "A média da última semana está {pct}% acima da média das últimas 4 semanas.",
             InsightLevel.SUCCESS),
        ),
        (
            metrics.last7_vs28_ticket_pct,
            WEEK_VS_MONTH_THRESHOLD,
            ("Ticket da semana caiu",
             "O ticket médio da última semana está {pct}% abaixo da média das últimas 4 semanas.",
             InsightLevel.WARNING),
            ("Ticket da semana subiu",
             "O ticket médio da última semana está {pct}% acima da média das últimas 4 semanas.",
             InsightLevel.SUCCESS),
        ),
    ]

    insights: List[Insight] = []
    for value, threshold, drop, rise in rules:
        insight = _threshold_insight(value, threshold, drop, rise)
        if insight is not None:
            insights.append(insight)

    # Reference insight always goes first
    if entry_count < BUILDING_REFERENCE_DAYS:
        insights.insert(0, Insight(
            title="Construindo referência",
            message="Com ~7 dias de lançamentos, as comparações ficam mais úteis.",
            level=InsightLevel.WARNING,
        ))
    elif entry_count < REFINING_REFERENCE_DAYS:
        insights.insert(0, Insight(
            title="Aprimorando referência",
            message="Com ~14 dias de lançamentos, as comparações ficam mais confiáveis.",
            level=InsightLevel.SUCCESS,
        ))

    return insights


def compute_dashboard_metrics(entries: Iterable[Any]) -> DashboardMetrics:
    """Compute the dashboard bundle for one business's daily entries.

    Accepts ``DailyEntry`` models or plain mappings with the same keys, in
    any order. Empty input yields the empty bundle (no last entry, zero
    month total, no averages, no insights).
    """
    ordered = sorted(entries, key=entry_date_of)
    if not ordered:
        return DashboardMetrics()

    last = ordered[-1]
    last7 = ordered[-SHORT_WINDOW:]
    last28 = ordered[-LONG_WINDOW:]

    last7_revenue_avg = average_revenue(last7)
    last28_revenue_avg = average_revenue(last28)

    last_ticket_avg = _ticket(last)
    last7_ticket_avg = average_ticket(last7)
    last28_ticket_avg = average_ticket(last28)

    metrics = DashboardMetrics(
        last_entry=last,
        month_total=month_total(ordered),
        last7_revenue_avg=last7_revenue_avg,
        last28_revenue_avg=last28_revenue_avg,
        last_vs28_pct=pct(_revenue(last), last28_revenue_avg),
        last_ticket_avg=last_ticket_avg,
        last7_ticket_avg=last7_ticket_avg,
        last28_ticket_avg=last28_ticket_avg,
        last_ticket_vs7_pct=pct(last_ticket_avg, last7_ticket_avg),
        last7_vs28_revenue_pct=pct(last7_revenue_avg, last28_revenue_avg),
        last7_vs28_ticket_pct=pct(last7_ticket_avg, last28_ticket_avg),
    )
    metrics.insights = build_insights(metrics, len(ordered))
    return metrics
