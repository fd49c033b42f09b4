from __future__ import annotations

import streamlit as st

from loyalty_dashboard.config import SectionConfig
from loyalty_dashboard.data.renderer import HIGHLIGHT_SET
from loyalty_dashboard.ui.components.tables import render_highlighted_table
from loyalty_dashboard.ui.pages.context import PageContext


def render(context: PageContext, section: SectionConfig) -> None:
    st.subheader(section.label)
    render_highlighted_table(context.surface)
    highlighted = ", ".join(sorted(HIGHLIGHT_SET, key=lambda v: (len(v), v)))
    st.caption(f"Highlighted rows ({highlighted}) are used in the calculations below.")
