"""
Orchestrate one CLI run: load the saved period, apply import/restore/reset,
recompute, save, and render outputs.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .models import PayPeriod, week_key_from_number
from .outputs import format_period_summary, format_run_summary, format_week_table
from .parser import load_hr_file, merge_week_import, parse_hr_text
from .period import PeriodSummary, summarize_period
from .storage import JsonFileStore, PeriodStore, decode_share_fragment, encode_share_fragment

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    period: PayPeriod
    summary: PeriodSummary
    summary_text: str
    table_text: str
    run_summary_text: str
    share_fragment: str
    imported_days: int


def run(
    state_path: Optional[Path] = None,
    hr_path: Optional[Path] = None,
    hr_text: Optional[str] = None,
    week: Optional[str] = None,
    restore_fragment: Optional[str] = None,
    reset: bool = False,
    store: Optional[PeriodStore] = None,
) -> RunResult:
    """
    Load period, apply at most one of reset / restore / HR import, save, summarize.
    HR import needs a target week (1 or 2). On any parse error nothing is saved.
    """
    if store is None and state_path is not None:
        store = JsonFileStore(state_path)

    # The store is only written once the import has parsed
    if reset:
        period = PayPeriod()
    elif restore_fragment:
        period = decode_share_fragment(restore_fragment)
    else:
        period = store.load() if store is not None else PayPeriod()

    imported_days = 0
    week_key = ""
    if hr_path is not None or hr_text is not None:
        if not week:
            raise ValueError("HR import needs a target week (1 or 2)")
        week_key = week_key_from_number(week)
        if hr_path is not None:
            imports = load_hr_file(hr_path)
        else:
            imports = parse_hr_text(hr_text)
        imported_days = sum(1 for imp in imports if imp.has_time)
        period = merge_week_import(period, week_key, imports)
        logger.info("HR import: %d day(s) into %s", imported_days, week_key)

    if store is not None:
        if reset:
            store.clear()
        store.save(period)

    summary = summarize_period(period)
    return RunResult(
        period=period,
        summary=summary,
        summary_text=format_period_summary(summary),
        table_text=format_week_table(period, summary),
        run_summary_text=format_run_summary(
            week_key, imported_days, str(state_path) if state_path else ""
        ),
        share_fragment=encode_share_fragment(period),
        imported_days=imported_days,
    )
