"""
Pay period data: day records, weeks, two-week periods, vacation codes.
"""
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

# Day names (Mon..Sun) used as keys in stored/shared state
DAYS = ["월", "화", "수", "목", "금", "토", "일"]
DAYS_PER_WEEK = 7
WEEK_KEYS = ("week1", "week2")
WEEKEND_INDEXES = (5, 6)

# Vacation codes (근태항목)
VACATION_NONE = "none"
VACATION_FULL = "full"        # 연차
VACATION_HALF = "half"        # 반차
VACATION_QUARTER = "quarter"  # 반반차
VACATION_OTHER_8H = "8h"      # 기타: any other attendance marker

# Minutes of work credited per vacation code
VACATION_CREDIT_MINUTES = {
    VACATION_NONE: 0,
    VACATION_FULL: 8 * 60,
    VACATION_HALF: 4 * 60,
    VACATION_QUARTER: 2 * 60,
    VACATION_OTHER_8H: 8 * 60,
}


def normalize_vacation(code: Optional[str]) -> str:
    """Known code as-is, empty -> none, anything else -> the 8h bucket."""
    if not code:
        return VACATION_NONE
    if code in VACATION_CREDIT_MINUTES:
        return code
    return VACATION_OTHER_8H


def is_weekend(day_index: int) -> bool:
    return day_index in WEEKEND_INDEXES


@dataclass
class DayRecord:
    """Attendance facts for one calendar day. Derived figures are never stored here."""
    start_time: str = ""   # HH:MM:SS, "" = not clocked
    end_time: str = ""
    gross_work_minutes: int = 0  # manual entry, used only without clock times
    vacation: str = VACATION_NONE
    breakfast_break: bool = False
    dinner_break: bool = False
    breakfast_break_minutes: int = 0
    dinner_break_minutes: int = 0
    non_work_minutes: int = 0
    is_holiday: bool = False
    requested_ot: Optional[int] = None  # None = no OT requested

    @property
    def has_clock_times(self) -> bool:
        return bool(self.start_time) and bool(self.end_time)

    @property
    def vacation_credit_minutes(self) -> int:
        return VACATION_CREDIT_MINUTES.get(self.vacation, VACATION_CREDIT_MINUTES[VACATION_OTHER_8H])


def _seven_days(days: Optional[List[DayRecord]]) -> List[DayRecord]:
    days = list(days or [])[:DAYS_PER_WEEK]
    while len(days) < DAYS_PER_WEEK:
        days.append(DayRecord())
    return days


@dataclass
class WeekRecord:
    """Exactly seven days, Mon..Sun. Index 5 and 6 are always holidays."""
    days: List[DayRecord] = field(default_factory=list)

    def __post_init__(self):
        self.days = _seven_days(self.days)

    def __getitem__(self, index: int) -> DayRecord:
        return self.days[index]

    def __iter__(self) -> Iterator[DayRecord]:
        return iter(self.days)

    def __len__(self) -> int:
        return len(self.days)


@dataclass
class PayPeriod:
    """Two-week pay period: always 14 day records."""
    week1: WeekRecord = field(default_factory=WeekRecord)
    week2: WeekRecord = field(default_factory=WeekRecord)

    def week(self, week_key: str) -> WeekRecord:
        if week_key not in WEEK_KEYS:
            raise KeyError(f"Unknown week: {week_key!r}")
        return getattr(self, week_key)

    def day(self, week_key: str, day_index: int) -> DayRecord:
        return self.week(week_key)[day_index]

    def iter_days(self) -> Iterator[Tuple[str, int, DayRecord]]:
        """Yield (week_key, weekday_index, record) for all 14 days in order."""
        for week_key in WEEK_KEYS:
            for i, record in enumerate(self.week(week_key)):
                yield week_key, i, record

    def with_day(self, week_key: str, day_index: int, record: DayRecord) -> "PayPeriod":
        """Copy of this period with one day replaced."""
        weeks = {k: list(self.week(k).days) for k in WEEK_KEYS}
        weeks[week_key][day_index] = record
        return PayPeriod(week1=WeekRecord(weeks["week1"]), week2=WeekRecord(weeks["week2"]))


def week_key_from_number(n) -> str:
    """1 -> week1, 2 -> week2. Accepts the key itself too."""
    s = str(n).strip().lower()
    if s in WEEK_KEYS:
        return s
    if s in ("1", "2"):
        return f"week{s}"
    raise ValueError(f"Week must be 1 or 2, got {n!r}")
