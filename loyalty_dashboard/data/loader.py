"""
Streamlit-cached CSV source resolution.

The cache is keyed by the source configuration; "Refresh Data" clears it so
the next run walks the providers again.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

import streamlit as st

from loyalty_dashboard.config import Settings, load_settings
from loyalty_dashboard.data.sources import SOURCE_MESSAGES, ResolvedSource, default_providers, resolve_csv
from loyalty_dashboard.diagnostics import DiagnosticsCollector, ensure_collector

logger = logging.getLogger(__name__)


def load_csv(
    settings: Optional[Settings] = None,
    diagnostics: Optional[DiagnosticsCollector] = None,
) -> ResolvedSource:
    """Wrapper that resolves config and calls the cached implementation.

    A fresh resolution logs every attempt; a cache hit logs only which source
    the cached text came from and when it was fetched.
    """
    settings = settings or load_settings()
    diagnostics = ensure_collector(diagnostics)
    started = time.time()
    resolved, fetched_at = _load_csv_impl(settings.api_url, str(settings.static_path), settings.request_timeout)
    if fetched_at < started:
        fetched = datetime.fromtimestamp(fetched_at).strftime("%H:%M:%S")
        diagnostics.log(f"♻️ Using cached CSV from {resolved.name} (fetched at {fetched})")
        return resolved

    for attempt in resolved.attempts:
        if attempt.ok:
            diagnostics.log(SOURCE_MESSAGES.get(attempt.name, f"✅ CSV loaded from {attempt.name}"))
        else:
            diagnostics.log(f"Source {attempt.name} unavailable: {attempt.detail}")
    return resolved


@st.cache_data(show_spinner=False, ttl=600)
def _load_csv_impl(api_url: str, static_path: str, timeout: float) -> Tuple[ResolvedSource, float]:
    """Walk the providers once. Cached by api_url, static_path and timeout."""
    providers = default_providers(api_url, Path(static_path), timeout=timeout)
    return resolve_csv(providers), time.time()


def clear_cache() -> None:
    _load_csv_impl.clear()  # type: ignore[attr-defined]
