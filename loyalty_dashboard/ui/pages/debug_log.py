from __future__ import annotations

import streamlit as st

from loyalty_dashboard.ui.pages.context import PageContext


def render(context: PageContext) -> None:
    if not context.debug_mode:
        return
    with st.expander("Debug log", expanded=True):
        outcome = context.outcome
        st.caption(f"Source: {outcome.source or 'none'}")
        st.code(context.diagnostics.as_text() or "(empty)", language="text")
