"""
HR timesheet parser. Reads rows pasted (or exported) from the HR attendance screen
(개인출퇴근현황) and produces day updates for one week.

Row layout, whitespace separated:
    start end [attendance marker] [non-work system] [non-work personal]
e.g. "07:30:00 18:30:00 0 30" or "07:22:23 08:05:55 (휴가)반반차 0"
"""
import csv
import datetime
import logging
import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, Optional, Sequence

from . import time_utils
from .models import (
    DAYS_PER_WEEK,
    PayPeriod,
    VACATION_FULL,
    VACATION_HALF,
    VACATION_NONE,
    VACATION_OTHER_8H,
    VACATION_QUARTER,
)

logger = logging.getLogger(__name__)

# Attendance markers start with this prefix; anything not in the table is "기타" (8h)
VACATION_MARKER_PREFIX = "(휴가)"
VACATION_MARKERS = {
    "(휴가)연차": VACATION_FULL,
    "(휴가)반차": VACATION_HALF,
    "(휴가)반반차": VACATION_QUARTER,
}

_WS_RE = re.compile(r"\s+")
_DIGIT_RE = re.compile(r"\d")


class HRParseError(ValueError):
    """Pasted HR data could not be read as lines at all."""


@dataclass
class DayImport:
    """One parsed HR row: the fields bulk import is allowed to replace."""
    start_time: str = ""
    end_time: str = ""
    vacation: str = VACATION_NONE
    non_work_minutes: int = 0
    source_line_index: int = 0  # 0-based among non-blank lines

    @property
    def has_time(self) -> bool:
        return bool(self.start_time) or bool(self.end_time)


def vacation_from_marker(marker: str) -> str:
    """Exact marker match, else the 8h bucket."""
    return VACATION_MARKERS.get(marker, VACATION_OTHER_8H)


def parse_hr_line(line: str, line_index: int = 0) -> DayImport:
    """Parse one row. Never fails: missing or bad tokens become empty/0."""
    parts = _WS_RE.split((line or "").strip())
    parts = [p for p in parts if p]

    def tok(i: int) -> str:
        return parts[i] if i < len(parts) else ""

    if len(parts) >= 3 and parts[2].startswith(VACATION_MARKER_PREFIX):
        # start end marker [non-work]; personal non-work is not read on vacation rows
        return DayImport(
            start_time=tok(0),
            end_time=tok(1),
            vacation=vacation_from_marker(parts[2]),
            non_work_minutes=time_utils.lenient_int(tok(3)),
            source_line_index=line_index,
        )

    # start end [system break] [personal break]
    return DayImport(
        start_time=tok(0),
        end_time=tok(1),
        vacation=VACATION_NONE,
        non_work_minutes=time_utils.lenient_int(tok(2)) + time_utils.lenient_int(tok(3)),
        source_line_index=line_index,
    )


def parse_hr_lines(lines: Sequence[str]) -> List[DayImport]:
    """
    Parse rows for one week: blank lines are dropped, then the first 7 rows map to Mon..Sun.
    Raises HRParseError if there is no non-blank row.
    """
    rows = [ln for ln in lines if ln is not None and str(ln).strip()]
    if not rows:
        raise HRParseError("No HR data rows found")
    if len(rows) > DAYS_PER_WEEK:
        logger.info("HR data has %d rows; only the first %d are used", len(rows), DAYS_PER_WEEK)
    imports = []
    for i, line in enumerate(rows[:DAYS_PER_WEEK]):
        imp = parse_hr_line(str(line), i)
        if not imp.has_time:
            logger.debug("HR row %d has no start/end time; day left unchanged", i)
        imports.append(imp)
    return imports


def parse_hr_text(text: str) -> List[DayImport]:
    """Parse a pasted block of HR rows (one week)."""
    if not isinstance(text, str):
        raise HRParseError(f"HR data must be text, got {type(text).__name__}")
    if not text.strip():
        raise HRParseError("HR data is empty")
    return parse_hr_lines(text.strip().splitlines())


def merge_week_import(period: PayPeriod, week_key: str, imports: Sequence[DayImport]) -> PayPeriod:
    """
    Apply parsed rows to one week of the period, by row position.
    Only days whose row has a start or end time are touched, and only start/end,
    vacation and non-work minutes change. Returns a new period.
    """
    merged = period
    applied = 0
    for index, imp in enumerate(imports[:DAYS_PER_WEEK]):
        if not imp.has_time:
            continue
        current = merged.day(week_key, index)
        updated = replace(
            current,
            start_time=imp.start_time,
            end_time=imp.end_time,
            vacation=imp.vacation,
            non_work_minutes=imp.non_work_minutes,
        )
        merged = merged.with_day(week_key, index, updated)
        applied += 1
    logger.info("Imported %d of %d HR rows into %s", applied, len(imports), week_key)
    return merged


def import_hr_text(period: PayPeriod, week_key: str, text: str) -> PayPeriod:
    """Parse pasted HR text and merge it into one week. Period is unchanged on HRParseError."""
    return merge_week_import(period, week_key, parse_hr_text(text))


# --- File exports of the same grid ---


def _cell_text(value) -> str:
    """Excel/CSV cell to the text the HR screen would show."""
    if value is None:
        return ""
    if isinstance(value, datetime.datetime):
        return value.strftime("%H:%M:%S")
    if isinstance(value, datetime.time):
        return value.strftime("%H:%M:%S")
    if isinstance(value, datetime.timedelta):
        return time_utils.format_clock_time(int(value.total_seconds()))
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _row_to_line(cells) -> str:
    return " ".join(t for t in (_cell_text(c) for c in cells) if t)


def _drop_header(lines: List[str]) -> List[str]:
    """Exports start with a header row (인정출근시간 ...); data rows always carry digits."""
    while lines and lines[0].strip() and not _DIGIT_RE.search(lines[0]):
        logger.debug("Skipping header row: %r", lines[0])
        lines = lines[1:]
    return lines


def extract_lines_from_text_file(path: Path) -> List[str]:
    """Read lines from a plain text file."""
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return [ln.rstrip("\n\r") for ln in f.readlines()]


def extract_lines_from_csv(path: Path) -> List[str]:
    """One line per CSV row, cells joined by spaces."""
    with open(path, "r", encoding="utf-8-sig", errors="replace", newline="") as f:
        return [_row_to_line(row) for row in csv.reader(f)]


def extract_lines_from_xlsx(path: Path, sheet_name: Optional[str] = None) -> List[str]:
    """One line per row of the active (or named) sheet."""
    try:
        import openpyxl
    except ImportError:
        raise RuntimeError("openpyxl required for Excel. pip install openpyxl")
    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    try:
        ws = wb.active
        if sheet_name and sheet_name in wb.sheetnames:
            ws = wb[sheet_name]
        rows = list(ws.iter_rows(values_only=True))
    finally:
        wb.close()
    return [_row_to_line(row) for row in rows]


def extract_lines_from_pdf(pdf_path: Path) -> List[str]:
    """
    Extract text lines from a printed HR screen.
    pdfplumber extract_text() returns lines in reading order; one grid row per line.
    """
    try:
        import pdfplumber
    except ImportError:
        raise RuntimeError("pdfplumber is required for PDF input. pip install pdfplumber")
    lines = []
    with pdfplumber.open(pdf_path) as pdf:
        for page in pdf.pages:
            text = page.extract_text()
            if text:
                lines.extend(ln.strip() for ln in text.splitlines())
    return lines


def load_hr_lines(path: Path) -> List[str]:
    """Load HR rows from TXT, CSV, Excel, or PDF. Header rows are dropped."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(str(path))
    suf = path.suffix.lower()
    if suf == ".pdf":
        lines = extract_lines_from_pdf(path)
    elif suf == ".csv":
        lines = extract_lines_from_csv(path)
    elif suf in (".xlsx", ".xlsm"):
        lines = extract_lines_from_xlsx(path)
    else:
        lines = extract_lines_from_text_file(path)
    return _drop_header([ln for ln in lines if ln.strip()])


def load_hr_file(path: Path) -> List[DayImport]:
    """Load and parse an HR export file (one week)."""
    return parse_hr_lines(load_hr_lines(path))
