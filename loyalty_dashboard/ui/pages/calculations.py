from __future__ import annotations

from typing import List

import streamlit as st

from loyalty_dashboard.config import SectionConfig
from loyalty_dashboard.data.calculator import FORMULAS
from loyalty_dashboard.data.model import CalculationResult
from loyalty_dashboard.ui.components.kpi import KpiCard, render_kpi_cards
from loyalty_dashboard.ui.pages.context import PageContext


def _calculation_cards(result: CalculationResult) -> List[KpiCard]:
    values = result.as_dict()
    cards = []
    for formula in FORMULAS:
        left = result.operand(formula.left)
        right = result.operand(formula.right)
        cards.append(
            KpiCard(
                label=formula.name.title(),
                value=values[formula.name],
                help_text=f"{formula.expression} = {left} {formula.symbol} {right}",
            )
        )
    return cards


def render(context: PageContext, section: SectionConfig) -> None:
    st.subheader(section.label)
    result = context.outcome.result
    if result is None:
        st.info("No calculations available.")
        return
    render_kpi_cards(_calculation_cards(result), columns=3)
    st.caption("Beta uses integer division (rounded down).")
