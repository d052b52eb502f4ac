"""
FastAPI backend for the flex worktime calculator.
The client owns the period; every call sends it and gets back the recomputed figures.
"""
from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import Any, Dict

from fastapi import Body, FastAPI, File, Form, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware

from flex_worktime.api_data import build_api_response
from flex_worktime.config import Config
from flex_worktime.edits import EDIT_KINDS, EditIntent, apply_period_edit
from flex_worktime.models import PayPeriod, week_key_from_number
from flex_worktime.parser import HRParseError, load_hr_file, merge_week_import, parse_hr_text
from flex_worktime.storage import (
    StateFormatError,
    decode_share_fragment,
    encode_share_fragment,
    loads_period,
    period_from_dict,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Flex Worktime Calculator", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

HR_FILE_SUFFIXES = (".txt", ".csv", ".xlsx", ".pdf")


def _period_or_400(data: Any) -> PayPeriod:
    try:
        return period_from_dict(data)
    except StateFormatError as e:
        raise HTTPException(400, str(e))


def _week_or_400(week: Any) -> str:
    try:
        return week_key_from_number(week)
    except ValueError as e:
        raise HTTPException(400, str(e))


@app.get("/api/health")
def health():
    return {"status": "ok"}


@app.post("/api/summary")
def summary(period: Dict[str, Any] = Body(...)):
    """Recompute all days and the period totals."""
    return build_api_response(_period_or_400(period))


@app.post("/api/import")
async def import_hr(
    week: str = Form(...),
    period: str = Form(default=""),
    hr_text: str = Form(default=""),
    hr_file: UploadFile | None = File(default=None),
):
    """Merge pasted HR rows (or an exported HR file) into one week of the period."""
    week_key = _week_or_400(week)
    try:
        current = loads_period(period) if period.strip() else PayPeriod()
    except StateFormatError as e:
        raise HTTPException(400, str(e))

    try:
        if hr_file is not None and hr_file.filename:
            suffix = Path(hr_file.filename).suffix.lower()
            if suffix not in HR_FILE_SUFFIXES:
                raise HTTPException(400, "HR file must be TXT, CSV, Excel, or PDF")
            with tempfile.TemporaryDirectory() as tmp:
                hr_path = Path(tmp) / ("hr" + suffix)
                with open(hr_path, "wb") as f:
                    f.write(await hr_file.read())
                imports = load_hr_file(hr_path)
        else:
            imports = parse_hr_text(hr_text)
    except HRParseError as e:
        raise HTTPException(400, f"HR data could not be parsed: {e}")

    merged = merge_week_import(current, week_key, imports)
    response = build_api_response(merged)
    response["imported_days"] = sum(1 for imp in imports if imp.has_time)
    return response


@app.post("/api/edit")
def edit(payload: Dict[str, Any] = Body(...)):
    """Apply one day edit: {period, week, day, kind, value}."""
    current = _period_or_400(payload.get("period"))
    week_key = _week_or_400(payload.get("week"))
    kind = payload.get("kind")
    if kind not in EDIT_KINDS:
        raise HTTPException(400, f"Unknown edit kind: {kind!r}")
    day = payload.get("day")
    if not isinstance(day, int) or isinstance(day, bool) or not 0 <= day <= 6:
        raise HTTPException(400, "day must be an integer 0..6")
    updated = apply_period_edit(current, week_key, day, EditIntent(kind, payload.get("value")))
    return build_api_response(updated)


@app.post("/api/share")
def share(period: Dict[str, Any] = Body(...)):
    return {"fragment": encode_share_fragment(_period_or_400(period))}


@app.post("/api/restore")
def restore(payload: Dict[str, Any] = Body(...)):
    try:
        restored = decode_share_fragment(payload.get("fragment") or "")
    except StateFormatError as e:
        logger.warning("Rejected share link: %s", e)
        raise HTTPException(400, str(e))
    return build_api_response(restored)
