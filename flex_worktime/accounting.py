"""
Per-day accounting: actual work minutes and overtime for one day record.
"""
from dataclasses import dataclass

from . import breaks
from .time_utils import format_hours_minutes
from .models import DayRecord, VACATION_NONE, is_weekend

DAILY_STANDARD_MINUTES = 8 * 60
OT_UNIT_MINUTES = 10
MIN_CLAIMABLE_OT_MINUTES = 60

# OT status labels for display
OT_STATUS_NONE = ""
OT_STATUS_NOT_CLAIMABLE = "신청불가"


@dataclass(frozen=True)
class DayResult:
    actual_work_minutes: int
    ot_minutes: int

    @property
    def ot_claimable(self) -> bool:
        return self.ot_minutes >= MIN_CLAIMABLE_OT_MINUTES


def is_holiday(record: DayRecord, day_index: int) -> bool:
    """Weekend, or a weekday flagged as a holiday."""
    return is_weekend(day_index) or bool(record.is_holiday)


def day_work_seconds(record: DayRecord, day_index: int) -> int:
    """Net seconds of work for the day after vacation credit and deductions (never negative)."""
    if record.has_clock_times:
        seconds = breaks.net_work_seconds_for_times(
            record.start_time, record.end_time, is_holiday(record, day_index)
        )
    else:
        seconds = record.gross_work_minutes * 60

    if record.vacation != VACATION_NONE:
        seconds += record.vacation_credit_minutes * 60

    seconds -= record.non_work_minutes * 60

    if record.breakfast_break:
        seconds -= record.breakfast_break_minutes * 60
    if record.dinner_break:
        seconds -= record.dinner_break_minutes * 60

    return max(0, seconds)


def _round_minutes(seconds: int) -> int:
    # Half a minute rounds up
    return (seconds + 30) // 60


def overtime_minutes(actual_work_minutes: int, holiday: bool) -> int:
    """
    Holiday: all work is OT. Weekday: work beyond 8h is OT.
    Quantized down to 10 minutes; under 60 minutes is not claimable and counts as 0.
    """
    if holiday:
        ot = actual_work_minutes // OT_UNIT_MINUTES * OT_UNIT_MINUTES
    else:
        excess = max(0, actual_work_minutes - DAILY_STANDARD_MINUTES)
        ot = excess // OT_UNIT_MINUTES * OT_UNIT_MINUTES
    if ot < MIN_CLAIMABLE_OT_MINUTES:
        ot = 0
    return ot


def account_day(record: DayRecord, day_index: int) -> DayResult:
    actual = _round_minutes(day_work_seconds(record, day_index))
    return DayResult(
        actual_work_minutes=actual,
        ot_minutes=overtime_minutes(actual, is_holiday(record, day_index)),
    )


def ot_status_label(record: DayRecord, result: DayResult) -> str:
    """'' when there is nothing to claim, 신청불가 on vacation days, else e.g. "2시간 0분 (120분)"."""
    has_vacation = record.vacation != VACATION_NONE
    if not has_vacation and result.ot_minutes <= 0:
        return OT_STATUS_NONE
    if has_vacation:
        return OT_STATUS_NOT_CLAIMABLE
    return f"{format_hours_minutes(result.ot_minutes)} ({result.ot_minutes}분)"
