"""
Biweekly totals: work and OT over the 14-day pay period, OT approval capped by
work in excess of the statutory minimum.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .accounting import DayResult, account_day
from .models import PayPeriod, WEEK_KEYS

MIN_PERIOD_MINUTES = 80 * 60   # 2주 최소 근무시간
MAX_PERIOD_MINUTES = 104 * 60  # 2주 최대 근무시간


@dataclass
class WeekTotals:
    work: int = 0
    ot: int = 0


@dataclass
class PeriodSummary:
    """Aggregate figures for one pay period. All values are non-negative minutes."""
    total_work: int
    total_ot: int
    total_requested_ot: int
    total_approved_ot: int
    per_week: List[WeekTotals]
    remaining_to_max: int
    remaining_to_min: int
    # Per-day results, [week][weekday], for display
    days: List[List[DayResult]] = field(default_factory=list)

    @property
    def is_under_minimum(self) -> bool:
        return self.total_work < MIN_PERIOD_MINUTES

    @property
    def is_over_maximum(self) -> bool:
        return self.total_work > MAX_PERIOD_MINUTES

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_work": self.total_work,
            "total_ot": self.total_ot,
            "total_requested_ot": self.total_requested_ot,
            "total_approved_ot": self.total_approved_ot,
            "per_week": [{"work": w.work, "ot": w.ot} for w in self.per_week],
            "remaining_to_max": self.remaining_to_max,
            "remaining_to_min": self.remaining_to_min,
        }


def summarize_period(period: PayPeriod) -> PeriodSummary:
    """Recompute every day of the period and aggregate. Pure; safe to call after every edit."""
    per_week: List[WeekTotals] = []
    days: List[List[DayResult]] = []
    total_requested = 0
    provisional_approved = 0

    for week_key in WEEK_KEYS:
        totals = WeekTotals()
        week_results = []
        for day_index, record in enumerate(period.week(week_key)):
            result = account_day(record, day_index)
            week_results.append(result)
            totals.work += result.actual_work_minutes
            totals.ot += result.ot_minutes
            requested = record.requested_ot or 0
            total_requested += requested
            provisional_approved += min(result.ot_minutes, requested)
        per_week.append(totals)
        days.append(week_results)

    total_work = sum(w.work for w in per_week)
    total_ot = sum(w.ot for w in per_week)

    # Only work above the 80h minimum can be approved as OT
    excess_over_minimum = max(0, total_work - MIN_PERIOD_MINUTES)
    total_approved = min(provisional_approved, excess_over_minimum)

    return PeriodSummary(
        total_work=total_work,
        total_ot=total_ot,
        total_requested_ot=total_requested,
        total_approved_ot=total_approved,
        per_week=per_week,
        remaining_to_max=max(0, MAX_PERIOD_MINUTES - total_work),
        remaining_to_min=max(0, MIN_PERIOD_MINUTES - total_work),
        days=days,
    )
