"""
Day edits as explicit state transitions: apply_edit(record, intent) -> new record.
Coupled field changes (meal checkbox + non-work minutes, holiday reset) happen in one step.
"""
from dataclasses import dataclass, replace
from typing import Any

from . import time_utils
from .models import DayRecord, PayPeriod, VACATION_NONE, normalize_vacation

MEAL_BREAK_MINUTES = 30

# Intent kinds
SET_START_TIME = "start_time"
SET_END_TIME = "end_time"
SET_GROSS_WORK = "gross_work"
SET_VACATION = "vacation"
SET_BREAKFAST = "breakfast_break"
SET_DINNER = "dinner_break"
SET_BREAKFAST_MINUTES = "breakfast_break_minutes"
SET_DINNER_MINUTES = "dinner_break_minutes"
SET_NON_WORK = "non_work"
SET_HOLIDAY = "holiday"
SET_REQUESTED_OT = "requested_ot"

EDIT_KINDS = (
    SET_START_TIME, SET_END_TIME, SET_GROSS_WORK, SET_VACATION,
    SET_BREAKFAST, SET_DINNER, SET_BREAKFAST_MINUTES, SET_DINNER_MINUTES,
    SET_NON_WORK, SET_HOLIDAY, SET_REQUESTED_OT,
)


@dataclass(frozen=True)
class EditIntent:
    kind: str
    value: Any = None


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _toggle_meal(record: DayRecord, flag_field: str, checked: bool) -> DayRecord:
    """Flip a meal checkbox and move non-work minutes by 30 in the same step."""
    if getattr(record, flag_field) == checked:
        return record
    delta = MEAL_BREAK_MINUTES if checked else -MEAL_BREAK_MINUTES
    return replace(
        record,
        **{flag_field: checked},
        non_work_minutes=max(0, record.non_work_minutes + delta),
    )


def _requested_ot(record: DayRecord, value: Any) -> DayRecord:
    # "" / None clears; text with leading digits sets ("12abc" -> 12); anything else leaves it as it was
    if value is None or (isinstance(value, str) and value.strip() == ""):
        return replace(record, requested_ot=None)
    if isinstance(value, bool):
        return record
    if isinstance(value, int):
        return replace(record, requested_ot=value) if value >= 0 else record
    text = str(value).strip()
    if text[:1].isdigit():
        return replace(record, requested_ot=time_utils.lenient_int(text))
    return record


def apply_edit(record: DayRecord, intent: EditIntent) -> DayRecord:
    """Return the record after one edit. The input record is not modified."""
    kind, value = intent.kind, intent.value

    if kind == SET_START_TIME:
        return replace(record, start_time=str(value or "").strip())
    if kind == SET_END_TIME:
        return replace(record, end_time=str(value or "").strip())
    if kind == SET_GROSS_WORK:
        return replace(record, gross_work_minutes=time_utils.parse_duration_text(value))
    if kind == SET_VACATION:
        return replace(record, vacation=normalize_vacation(value))
    if kind == SET_BREAKFAST:
        return _toggle_meal(record, "breakfast_break", _as_bool(value))
    if kind == SET_DINNER:
        return _toggle_meal(record, "dinner_break", _as_bool(value))
    if kind == SET_BREAKFAST_MINUTES:
        return replace(record, breakfast_break_minutes=time_utils.parse_duration_text(value))
    if kind == SET_DINNER_MINUTES:
        return replace(record, dinner_break_minutes=time_utils.parse_duration_text(value))
    if kind == SET_NON_WORK:
        return replace(record, non_work_minutes=time_utils.parse_duration_text(value))
    if kind == SET_HOLIDAY:
        holiday = _as_bool(value)
        if not holiday:
            return replace(record, is_holiday=False)
        # Holidays carry no vacation, meal breaks or non-work time
        return replace(
            record,
            is_holiday=True,
            vacation=VACATION_NONE,
            breakfast_break=False,
            dinner_break=False,
            non_work_minutes=0,
        )
    if kind == SET_REQUESTED_OT:
        return _requested_ot(record, value)
    raise ValueError(f"Unknown edit: {kind!r}")


def apply_period_edit(period: PayPeriod, week_key: str, day_index: int, intent: EditIntent) -> PayPeriod:
    """Apply one edit to one day of the period. Returns a new period."""
    record = period.day(week_key, day_index)
    return period.with_day(week_key, day_index, apply_edit(record, intent))


def reset_period() -> PayPeriod:
    """Fresh period of 14 empty days."""
    return PayPeriod()
