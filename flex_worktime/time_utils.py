"""
Time handling: HH:MM:SS clock times, H:MM durations, midnight crossover.
All parsing is lenient: a bad token counts as 0, never an error.
"""
import re
from typing import Optional

SECONDS_PER_DAY = 24 * 3600

# Leading digits of a token, like the HR grid's number cells ("30", "30분", " 7")
_INT_PREFIX_RE = re.compile(r"^\s*\+?(\d+)")


def lenient_int(s) -> int:
    """Integer prefix of s, or 0 if there is none."""
    if s is None:
        return 0
    if isinstance(s, int):
        return max(0, s)
    if isinstance(s, float):
        return max(0, int(s))
    m = _INT_PREFIX_RE.match(str(s))
    return int(m.group(1)) if m else 0


def parse_clock_time(s: Optional[str]) -> int:
    """Parse H:MM:SS (or H:MM, or H) to seconds since midnight. Empty -> 0 (no time entered)."""
    if not s:
        return 0
    parts = [lenient_int(p) for p in str(s).strip().split(":")]
    parts += [0, 0, 0]
    h, m, sec = parts[0], parts[1], parts[2]
    return h * 3600 + m * 60 + sec


def span_seconds(start_seconds: int, end_seconds: int) -> int:
    """Seconds from start to end. End before start means the next day."""
    span = end_seconds - start_seconds
    if span < 0:
        span += SECONDS_PER_DAY
    return span


def parse_duration_text(s) -> int:
    """'8:30' -> 510 minutes; bare '45' -> 45 minutes; anything else -> 0."""
    if s is None or s == "":
        return 0
    if isinstance(s, int):
        return lenient_int(s)
    s = str(s).strip()
    if ":" in s:
        parts = s.split(":")
        hours = lenient_int(parts[0])
        minutes = lenient_int(parts[1]) if len(parts) > 1 else 0
        return hours * 60 + minutes
    return lenient_int(s)


def format_duration_minutes(minutes: int) -> str:
    """Minutes to H:MM for input fields. 0 -> '' (field left blank)."""
    if not minutes or minutes <= 0:
        return ""
    h, mn = divmod(int(minutes), 60)
    return f"{h}:{mn:02d}"


def format_hours_minutes(minutes: int) -> str:
    """Minutes to the long display form, e.g. 510 -> '8시간 30분'."""
    minutes = max(0, int(minutes))
    h, mn = divmod(minutes, 60)
    return f"{h}시간 {mn}분"


def format_clock_time(seconds: int) -> str:
    """Seconds since midnight to HH:MM:SS. Wraps past midnight."""
    seconds = max(0, int(seconds)) % SECONDS_PER_DAY
    h, rest = divmod(seconds, 3600)
    m, s = divmod(rest, 60)
    return f"{h:02d}:{m:02d}:{s:02d}"
