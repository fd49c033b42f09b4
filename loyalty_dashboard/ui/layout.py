"""
Layout helpers for the Streamlit application (page config, sidebar, failure state).
"""

from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from loyalty_dashboard.data.pipeline import PipelineOutcome

FAILURE_MESSAGES = {
    "parse_failure": "The CSV data could not be parsed.",
    "empty_dataset": "The CSV data has no rows to display.",
    "missing_identifier": "A row required by the calculations is missing or not a number.",
    "arithmetic_error": "A calculation could not be completed (division by zero).",
    "render_target_missing": "The display is not ready.",
    "source_unavailable": "No CSV source is available.",
}


@dataclass(frozen=True)
class SidebarState:
    refresh: bool
    debug_mode: bool


def setup_page() -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title="Simple Loyalty Assessment",
        layout="centered",
        page_icon=":bar_chart:",
    )


def sidebar_controls(debug_default: bool = False) -> SidebarState:
    refresh = st.sidebar.button("🔄 Refresh Data")
    debug_mode = st.sidebar.toggle(
        "Debug mode",
        value=debug_default,
        key="la_debug_mode",
        help="Show the pipeline diagnostics log.",
    )
    return SidebarState(refresh=refresh, debug_mode=debug_mode)


def render_failure(outcome: PipelineOutcome) -> None:
    """Single user-visible failure state; details stay in the debug log."""
    message = FAILURE_MESSAGES.get(outcome.error_kind or "", "Failed to load the data.")
    st.error(f"❌ Error loading data. {message}")
