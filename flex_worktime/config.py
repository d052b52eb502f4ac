import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent  # <project>

DEFAULT_STATE_PATH = BASE_DIR / "data" / "flex_worktime.json"
DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


class Config:
    STATE_PATH = Path(os.getenv("FLEX_WORKTIME_STATE") or DEFAULT_STATE_PATH)
    CORS_ORIGINS = [
        o.strip()
        for o in os.getenv("FLEX_WORKTIME_CORS_ORIGINS", DEFAULT_CORS_ORIGINS).split(",")
        if o.strip()
    ]
    LOG_LEVEL = os.getenv("FLEX_WORKTIME_LOG_LEVEL", "WARNING").upper()
