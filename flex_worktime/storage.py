"""
Persistence port: PayPeriod <-> JSON, share-link fragment, JSON file store.
The wire layout is {"week1": {"월": {...}, ...}, "week2": {...}} with camelCase day keys.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import quote, unquote

from .models import (
    DAYS,
    DayRecord,
    PayPeriod,
    WEEK_KEYS,
    WeekRecord,
    normalize_vacation,
)

logger = logging.getLogger(__name__)

SHARE_PREFIX = "#!data="

# DayRecord attribute -> wire key
_FIELD_KEYS = (
    ("start_time", "startTime"),
    ("end_time", "endTime"),
    ("gross_work_minutes", "workMinutes"),
    ("non_work_minutes", "nonWorkMinutes"),
    ("vacation", "vacation"),
    ("breakfast_break", "breakfastBreak"),
    ("dinner_break", "dinnerBreak"),
    ("breakfast_break_minutes", "breakfastBreakMinutes"),
    ("dinner_break_minutes", "dinnerBreakMinutes"),
    ("is_holiday", "isHoliday"),
)
_INT_FIELDS = {"gross_work_minutes", "non_work_minutes", "breakfast_break_minutes", "dinner_break_minutes"}
_BOOL_FIELDS = {"breakfast_break", "dinner_break", "is_holiday"}


class StateFormatError(ValueError):
    """Stored or shared state is not a pay period."""


def day_to_dict(record: DayRecord) -> Dict[str, Any]:
    out = {key: getattr(record, attr) for attr, key in _FIELD_KEYS}
    # Absent requested OT stays absent; 0 is written as 0
    if record.requested_ot is not None:
        out["requestedOT"] = record.requested_ot
    return out


def _int_value(raw: Any, where: str) -> int:
    if raw is None:
        return 0
    if isinstance(raw, bool):
        raise StateFormatError(f"{where}: expected a number, got {raw!r}")
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise StateFormatError(f"{where}: expected a number, got {raw!r}")
    return max(0, value)


def day_from_dict(data: Optional[Dict[str, Any]], where: str = "day") -> DayRecord:
    """Day record from wire data; missing keys take their defaults."""
    if data is None:
        return DayRecord()
    if not isinstance(data, dict):
        raise StateFormatError(f"{where}: expected an object, got {type(data).__name__}")
    kwargs: Dict[str, Any] = {}
    for attr, key in _FIELD_KEYS:
        if key not in data or data[key] is None:
            continue
        raw = data[key]
        if attr in _INT_FIELDS:
            kwargs[attr] = _int_value(raw, f"{where}.{key}")
        elif attr in _BOOL_FIELDS:
            kwargs[attr] = bool(raw)
        elif attr == "vacation":
            kwargs[attr] = normalize_vacation(str(raw))
        else:
            kwargs[attr] = str(raw)
    if data.get("requestedOT") is not None:
        kwargs["requested_ot"] = _int_value(data["requestedOT"], f"{where}.requestedOT")
    return DayRecord(**kwargs)


def period_to_dict(period: PayPeriod) -> Dict[str, Any]:
    return {
        week_key: {DAYS[i]: day_to_dict(record) for i, record in enumerate(period.week(week_key))}
        for week_key in WEEK_KEYS
    }


def period_from_dict(data: Any) -> PayPeriod:
    """
    Pay period from wire data. Missing days become empty records.
    Raises StateFormatError if the top level is not {"week1": {...}, "week2": {...}}.
    """
    if not isinstance(data, dict):
        raise StateFormatError("Pay period must be an object")
    weeks = {}
    for week_key in WEEK_KEYS:
        week_data = data.get(week_key)
        if not isinstance(week_data, dict):
            raise StateFormatError(f"Pay period is missing {week_key}")
        weeks[week_key] = WeekRecord([
            day_from_dict(week_data.get(day), f"{week_key}.{day}") for day in DAYS
        ])
    return PayPeriod(week1=weeks["week1"], week2=weeks["week2"])


def dumps_period(period: PayPeriod) -> str:
    return json.dumps(period_to_dict(period), ensure_ascii=False)


def loads_period(text: str) -> PayPeriod:
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise StateFormatError(f"Pay period is not valid JSON: {e}")
    return period_from_dict(data)


def encode_share_fragment(period: PayPeriod) -> str:
    """URL fragment carrying the whole period: #!data=<percent-encoded JSON>."""
    return SHARE_PREFIX + quote(dumps_period(period), safe="")


def decode_share_fragment(fragment: str) -> PayPeriod:
    """Inverse of encode_share_fragment. Accepts a full URL too."""
    if not fragment:
        raise StateFormatError("Empty share link")
    idx = fragment.find(SHARE_PREFIX)
    if idx < 0:
        # Bare fragment without the leading '#'
        idx = fragment.find(SHARE_PREFIX[1:])
        if idx < 0:
            raise StateFormatError("Share link has no #!data= fragment")
        payload = fragment[idx + len(SHARE_PREFIX) - 1:]
    else:
        payload = fragment[idx + len(SHARE_PREFIX):]
    return loads_period(unquote(payload))


def share_url(base_url: str, period: PayPeriod) -> str:
    return base_url.split("#", 1)[0] + encode_share_fragment(period)


class PeriodStore:
    """Where the host keeps the current period. Call save() after each recompute."""

    def load(self) -> PayPeriod:
        raise NotImplementedError

    def save(self, period: PayPeriod) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class JsonFileStore(PeriodStore):
    """Period kept as one JSON file. A missing file is a fresh period."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> PayPeriod:
        if not self.path.exists():
            logger.info("No saved period at %s; starting empty", self.path)
            return PayPeriod()
        with open(self.path, "r", encoding="utf-8") as f:
            text = f.read()
        try:
            period = loads_period(text)
        except StateFormatError:
            logger.warning("Saved period at %s is not readable", self.path)
            raise
        logger.info("Loaded period from %s", self.path)
        return period

    def save(self, period: PayPeriod) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            f.write(dumps_period(period))
        tmp.replace(self.path)
        logger.info("Saved period to %s", self.path)

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
            logger.info("Cleared saved period at %s", self.path)
