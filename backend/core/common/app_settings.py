from __future__ import annotations

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _as_int(value: str | None, default: int) -> int:
    try:
        return int(value) if value is not None else default
    except Exception:
        return default


def _as_float(value: str | None, default: float) -> float:
    try:
        return float(value) if value is not None else default
    except Exception:
        return default


@dataclass(frozen=True)
class AppSettings:
    app_name: str
    api_url: str
    api_timeout: float
    host: str
    port: int
    threads: int
    auto_reload: bool
    debug: bool
    log_level: str
    log_file: str
    display_timezone: str


def load_app_settings() -> AppSettings:
    return AppSettings(
        app_name=os.getenv("APP_NAME", "VendorWize"),
        api_url=os.getenv(
            "API_URL", "https://api-production-7a33.up.railway.app"
        ).rstrip("/"),
        api_timeout=max(0.1, _as_float(os.getenv("API_TIMEOUT"), 5.0)),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_as_int(os.getenv("PORT"), 3000),
        threads=max(1, _as_int(os.getenv("THREADS"), 1)),
        auto_reload=_as_bool(os.getenv("AUTO_RELOAD"), False),
        debug=_as_bool(os.getenv("DEBUG"), False),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_file=os.getenv("LOG_FILE", ""),
        display_timezone=os.getenv("DISPLAY_TIMEZONE", "America/New_York"),
    )


settings = load_app_settings()
