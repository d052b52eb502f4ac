"""
Human-readable outputs: period summary and per-day table.
"""
from typing import List

from .accounting import ot_status_label
from .models import DAYS, PayPeriod, VACATION_NONE, WEEK_KEYS, is_weekend
from .period import MAX_PERIOD_MINUTES, MIN_PERIOD_MINUTES, PeriodSummary
from .time_utils import format_duration_minutes, format_hours_minutes


def format_period_summary(summary: PeriodSummary) -> str:
    """Summary block: totals against the 80h/104h bounds and OT figures."""
    lines = [
        f"총 근무시간: {format_hours_minutes(summary.total_work)}",
        f"최소 근무시간 기준 남은 시간: {format_hours_minutes(summary.remaining_to_min)}",
        f"최대 근무시간 기준 남은 시간: {format_hours_minutes(summary.remaining_to_max)}",
        f"OT시간: {format_hours_minutes(summary.total_ot)}",
        f"OT신청시간: {format_hours_minutes(summary.total_requested_ot)}",
        f"OT인정시간: {format_hours_minutes(summary.total_approved_ot)}",
    ]
    if summary.is_under_minimum:
        lines.append(f"(2주 최소 {MIN_PERIOD_MINUTES // 60}시간 미달)")
    if summary.is_over_maximum:
        lines.append(f"(2주 최대 {MAX_PERIOD_MINUTES // 60}시간 초과)")
    return "\n".join(lines)


def format_week_table(period: PayPeriod, summary: PeriodSummary) -> str:
    """One row per day: times, vacation, non-work, actual work, OT status, requested OT."""
    lines: List[str] = []
    for w, week_key in enumerate(WEEK_KEYS):
        week_totals = summary.per_week[w]
        lines.append(f"{w + 1}주차 ({format_hours_minutes(week_totals.work)})")
        for i, record in enumerate(period.week(week_key)):
            result = summary.days[w][i]
            holiday = is_weekend(i) or record.is_holiday
            marker = "*" if holiday else " "
            vacation = record.vacation if record.vacation != VACATION_NONE else "-"
            requested = "" if record.requested_ot is None else str(record.requested_ot)
            lines.append(
                f"  {marker}{DAYS[i]}  {record.start_time or '--:--:--':>8} {record.end_time or '--:--:--':>8}"
                f"  {vacation:<7} 비업무 {format_duration_minutes(record.non_work_minutes) or '-':>5}"
                f"  근무 {format_hours_minutes(result.actual_work_minutes):>10}"
                f"  OT {ot_status_label(record, result) or '-':>6}"
                f"  신청 {requested or '-':>4}"
            )
        lines.append("")
    return "\n".join(lines).rstrip()


def format_run_summary(week_key: str, imported_days: int, state_path: str) -> str:
    """Run summary text for the CLI."""
    return (
        f"Imported week: {week_key or '-'}\n"
        f"Days updated from HR data: {imported_days}\n"
        f"State file: {state_path or '-'}"
    )
