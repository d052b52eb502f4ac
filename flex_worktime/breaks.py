"""
Break accrual: 30 minutes of unpaid break after every completed 4-hour work block
on non-holiday days. Holidays get no break deduction.
"""
from . import time_utils

WORK_BLOCK_SECONDS = 4 * 3600
BREAK_SECONDS = 30 * 60


def accrued_break_seconds(span: int) -> int:
    """
    Total break for a span, by stepping through the day.
    Each break is consumed from the span before the next block starts, so a 4h span
    already earns one break and an 8.5h span earns two.
    """
    elapsed = 0
    break_total = 0
    while elapsed + WORK_BLOCK_SECONDS <= span:
        elapsed += WORK_BLOCK_SECONDS
        break_total += BREAK_SECONDS
        elapsed += BREAK_SECONDS
    return break_total


def net_work_seconds(start_seconds: int, end_seconds: int, is_holiday: bool) -> int:
    """Worked seconds between clock-in and clock-out after break deduction."""
    span = time_utils.span_seconds(start_seconds, end_seconds)
    if is_holiday:
        return max(0, span)
    return max(0, span - accrued_break_seconds(span))


def net_work_seconds_for_times(start_time: str, end_time: str, is_holiday: bool) -> int:
    """Same as net_work_seconds, from HH:MM:SS text. Either time empty -> 0."""
    if not start_time or not end_time:
        return 0
    return net_work_seconds(
        time_utils.parse_clock_time(start_time),
        time_utils.parse_clock_time(end_time),
        is_holiday,
    )
