"""
JSON-serializable structures for the web API.
"""
from typing import Any, Dict, List

from .accounting import DayResult, is_holiday, ot_status_label
from .models import DAYS, DayRecord, PayPeriod, WEEK_KEYS, is_weekend
from .period import PeriodSummary, summarize_period
from .storage import period_to_dict


def _day_row(record: DayRecord, day_index: int, result: DayResult) -> Dict[str, Any]:
    return {
        "day": DAYS[day_index],
        "day_index": day_index,
        "is_weekend": is_weekend(day_index),
        "is_holiday": is_holiday(record, day_index),
        "actual_work_minutes": result.actual_work_minutes,
        "ot_minutes": result.ot_minutes,
        "ot_claimable": result.ot_claimable,
        "ot_label": ot_status_label(record, result),
        "requested_ot": record.requested_ot,
    }


def build_day_rows(period: PayPeriod, summary: PeriodSummary) -> List[Dict[str, Any]]:
    rows = []
    for week_key, i, record in period.iter_days():
        row = _day_row(record, i, summary.days[WEEK_KEYS.index(week_key)][i])
        row["week"] = week_key
        rows.append(row)
    return rows


def build_api_response(period: PayPeriod, summary: PeriodSummary = None) -> Dict[str, Any]:
    """Period (wire layout), aggregate summary and per-day derived figures."""
    if summary is None:
        summary = summarize_period(period)
    return {
        "period": period_to_dict(period),
        "summary": summary.to_dict(),
        "days": build_day_rows(period, summary),
    }
