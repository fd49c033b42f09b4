"""
Table surface that collects rendered rows into a DataFrame, and the Streamlit
helper that draws it with calculation rows highlighted.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import pandas as pd
import streamlit as st

from loyalty_dashboard.data.model import Record

HIGHLIGHT_STYLE = "background-color: #fff3cd; font-weight: 600;"


class FrameTableSurface:
    """`TableSurface` that buffers header, rows and errors for later display."""

    def __init__(self) -> None:
        self.columns: List[str] = []
        self.rows: List[Record] = []
        self.flags: List[bool] = []
        self.errors: List[Tuple[str, str]] = []

    def has_targets(self) -> bool:
        return True

    def render_header(self, columns: Sequence[str]) -> None:
        self.columns = list(columns)
        self.rows = []
        self.flags = []

    def render_row(self, record: Record, flagged: bool) -> None:
        self.rows.append(dict(record))
        self.flags.append(flagged)

    def report_error(self, kind: str, message: str) -> None:
        self.errors.append((kind, message))

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.rows, columns=self.columns, dtype=object)

    @property
    def flagged_rows(self) -> List[Record]:
        return [row for row, flagged in zip(self.rows, self.flags) if flagged]


def render_highlighted_table(
    surface: FrameTableSurface,
    height: Optional[int] = None,
    export_file_name: str = "Table_Input.csv",
) -> None:
    df = surface.to_frame()
    if df.empty:
        st.info("No rows to display.")
        return

    flags = list(surface.flags)

    def _style_row(row: pd.Series) -> List[str]:
        style = HIGHLIGHT_STYLE if flags[row.name] else ""
        return [style] * len(row)

    styled = df.style.apply(_style_row, axis=1)
    kwargs = {"height": height} if height else {}
    st.dataframe(styled, use_container_width=True, hide_index=True, **kwargs)

    csv_bytes = df.to_csv(index=False).encode("utf-8")
    st.download_button(
        "Download CSV",
        data=csv_bytes,
        file_name=export_file_name,
        mime="text/csv",
    )
