"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import streamlit as st

PROJECT_ROOT = Path(__file__).resolve().parent.parent

DEFAULT_API_URL = "http://localhost:3000/api/csv"
DEFAULT_STATIC_PATH = "public/Table_Input.csv"
DEFAULT_DATA_PATH = "Table_Input.csv"
DEFAULT_PORT = 3000
DEFAULT_TIMEOUT_S = 5.0
LOG_FORMAT = "%(asctime)s - [%(levelname)s] - %(name)s - %(message)s"

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    api_url: str
    static_path: Path
    data_path: Path
    request_timeout: float
    port: int
    debug_mode: bool
    log_level: str


def get_setting(name: str, default: Optional[str] = None) -> Optional[str]:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            return str(v) if v is not None else default
    except Exception:
        # st.secrets raises when no secrets.toml exists outside Streamlit
        pass
    return default


def _resolve_path(raw: str) -> Path:
    path = Path(raw)
    return path if path.is_absolute() else PROJECT_ROOT / path


def _as_float(raw: Optional[str], default: float) -> float:
    try:
        return float(raw) if raw is not None else default
    except ValueError:
        return default


def _as_int(raw: Optional[str], default: int) -> int:
    try:
        return int(raw) if raw is not None else default
    except ValueError:
        return default


def load_settings() -> Settings:
    return Settings(
        api_url=get_setting("CSV_API_URL", DEFAULT_API_URL) or DEFAULT_API_URL,
        static_path=_resolve_path(get_setting("CSV_STATIC_PATH", DEFAULT_STATIC_PATH) or DEFAULT_STATIC_PATH),
        data_path=_resolve_path(get_setting("CSV_DATA_PATH", DEFAULT_DATA_PATH) or DEFAULT_DATA_PATH),
        request_timeout=_as_float(get_setting("CSV_REQUEST_TIMEOUT"), DEFAULT_TIMEOUT_S),
        port=_as_int(get_setting("PORT"), DEFAULT_PORT),
        debug_mode=str(get_setting("DEBUG_MODE", "false")).strip().lower() in TRUTHY,
        log_level=(get_setting("LOG_LEVEL", "INFO") or "INFO").upper(),
    )


def configure_logging(level: Optional[str] = None) -> None:
    """Idempotent root logger setup shared by the dashboard and the server."""
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)


@dataclass(frozen=True)
class SectionConfig:
    key: str
    label: str


# Ordered page sections for the dashboard
SECTIONS = [
    SectionConfig("table", "Table 1: Input Data"),
    SectionConfig("calculations", "Table 2: Calculations"),
]
