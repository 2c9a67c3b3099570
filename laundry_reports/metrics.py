"""Aggregates over normalized transactions for reporting views.

Consumers read these instead of recomputing from raw fields: grouping is by the
exact ``raw_date`` string, ordering by the parsed calendar date, and hours come
from the naive ``timestamp``.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime

from .models import CycleType, Transaction
from .normalizers import build_timestamp

DAY_NAMES: tuple[str, ...] = (
    "domingo",
    "segunda-feira",
    "terça-feira",
    "quarta-feira",
    "quinta-feira",
    "sexta-feira",
    "sábado",
)
_WEEKEND = (0, 6)


@dataclass(frozen=True, slots=True)
class DailyMetric:
    date: str
    revenue: float
    wash_count: int
    dry_count: int
    total_count: int
    day_of_week: int


@dataclass(frozen=True, slots=True)
class HourlyMetric:
    hour: int
    count: int
    revenue: float


@dataclass(frozen=True, slots=True)
class MachineRank:
    name: str
    count: int


@dataclass(frozen=True, slots=True)
class ReportSummary:
    total_revenue: float
    total_cycles: int
    wash_count: int
    dry_count: int
    daily: tuple[DailyMetric, ...]
    hourly: tuple[HourlyMetric, ...]
    day_of_week_counts: tuple[int, ...]
    ranking: tuple[MachineRank, ...]
    peak_hour: int
    weekend_share: float
    top_machine: MachineRank
    avg_cycles_per_day: float


@dataclass(frozen=True, slots=True)
class DailyRevenue:
    date: str
    self_service: float
    attendant: float
    total: float
    cumulative: float


@dataclass(frozen=True, slots=True)
class RevenueComparison:
    self_service_total: float
    attendant_total: float
    grand_total: float
    self_service_count: int
    attendant_count: int
    self_service_ticket: float
    attendant_ticket: float
    average_ticket: float
    daily: tuple[DailyRevenue, ...]


def raw_date_key(raw_date: str) -> datetime:
    """Sort key for ``DD/MM/YYYY`` strings, with the same calendar rollover as
    transaction timestamps (``31/02/2024`` sorts as ``02/03/2024``)."""

    return build_timestamp(raw_date)


def _ticket(total: float, count: int) -> float:
    return total / count if count else 0.0


def summarize(transactions: Sequence[Transaction]) -> ReportSummary:
    """Compute dashboard aggregates for one report."""

    hourly_count = [0] * 24
    hourly_revenue = [0.0] * 24
    dow_counts = [0] * 7
    machines: Counter[str] = Counter()
    daily: dict[str, dict] = {}
    total_revenue = 0.0
    wash = dry = 0

    for tx in transactions:
        total_revenue += tx.amount
        is_wash = tx.cycle_type is CycleType.WASH
        is_dry = tx.cycle_type is CycleType.DRY
        wash += is_wash
        dry += is_dry
        machines[tx.machine] += 1
        hourly_count[tx.timestamp.hour] += 1
        hourly_revenue[tx.timestamp.hour] += tx.amount
        dow_counts[tx.day_of_week] += 1

        day = daily.setdefault(
            tx.raw_date,
            {"revenue": 0.0, "wash": 0, "dry": 0, "total": 0, "dow": tx.day_of_week},
        )
        day["revenue"] += tx.amount
        day["wash"] += is_wash
        day["dry"] += is_dry
        day["total"] += 1

    daily_metrics = tuple(
        DailyMetric(
            date=raw,
            revenue=v["revenue"],
            wash_count=v["wash"],
            dry_count=v["dry"],
            total_count=v["total"],
            day_of_week=v["dow"],
        )
        for raw, v in sorted(daily.items(), key=lambda kv: raw_date_key(kv[0]))
    )
    # Counter.most_common keeps first-seen order for equal counts.
    ranking = tuple(MachineRank(name, count) for name, count in machines.most_common())
    # First hour wins on ties.
    peak_hour = max(range(24), key=lambda h: (hourly_count[h], -h))
    n = len(transactions)

    return ReportSummary(
        total_revenue=total_revenue,
        total_cycles=n,
        wash_count=wash,
        dry_count=dry,
        daily=daily_metrics,
        hourly=tuple(HourlyMetric(h, hourly_count[h], hourly_revenue[h]) for h in range(24)),
        day_of_week_counts=tuple(dow_counts),
        ranking=ranking,
        peak_hour=peak_hour if n else 0,
        weekend_share=(sum(dow_counts[d] for d in _WEEKEND) / n * 100) if n else 0.0,
        top_machine=ranking[0] if ranking else MachineRank("N/A", 0),
        avg_cycles_per_day=n / (len(daily) or 1),
    )


def compare_revenue(
    self_service: Iterable[Transaction], attendant: Iterable[Transaction]
) -> RevenueComparison:
    """Combine both channels into revenue totals, tickets and a daily series."""

    self_list = list(self_service)
    att_list = list(attendant)
    per_day: dict[str, list[float]] = {}
    for tx in self_list:
        per_day.setdefault(tx.raw_date, [0.0, 0.0])[0] += tx.amount
    for tx in att_list:
        per_day.setdefault(tx.raw_date, [0.0, 0.0])[1] += tx.amount

    running = 0.0
    daily: list[DailyRevenue] = []
    for raw in sorted(per_day, key=raw_date_key):
        s, a = per_day[raw]
        running += s + a
        daily.append(
            DailyRevenue(date=raw, self_service=s, attendant=a, total=s + a, cumulative=running)
        )

    self_total = sum(t.amount for t in self_list)
    att_total = sum(t.amount for t in att_list)
    grand = self_total + att_total
    return RevenueComparison(
        self_service_total=self_total,
        attendant_total=att_total,
        grand_total=grand,
        self_service_count=len(self_list),
        attendant_count=len(att_list),
        self_service_ticket=_ticket(self_total, len(self_list)),
        attendant_ticket=_ticket(att_total, len(att_list)),
        average_ticket=_ticket(grand, len(self_list) + len(att_list)),
        daily=tuple(daily),
    )


__all__ = [
    "DAY_NAMES",
    "DailyMetric",
    "DailyRevenue",
    "HourlyMetric",
    "MachineRank",
    "ReportSummary",
    "RevenueComparison",
    "compare_revenue",
    "raw_date_key",
    "summarize",
]
