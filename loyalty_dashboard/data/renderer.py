"""
Projects a `Dataset` onto any display surface implementing `TableSurface`.
"""

from __future__ import annotations

import logging
from typing import FrozenSet, Optional, Protocol, Sequence

from loyalty_dashboard.data.model import Dataset, Record
from loyalty_dashboard.diagnostics import DiagnosticsCollector, ensure_collector
from loyalty_dashboard.errors import EmptyDataset, RenderTargetMissing

logger = logging.getLogger(__name__)

# Rows that feed the calculations
HIGHLIGHT_SET: FrozenSet[str] = frozenset({"A5", "A7", "A12", "A13", "A15", "A20"})


class TableSurface(Protocol):
    def has_targets(self) -> bool:
        ...

    def render_header(self, columns: Sequence[str]) -> None:
        ...

    def render_row(self, record: Record, flagged: bool) -> None:
        ...

    def report_error(self, kind: str, message: str) -> None:
        ...


def is_flagged(record: Record, columns: Sequence[str]) -> bool:
    if not columns:
        return False
    return record.get(columns[0]) in HIGHLIGHT_SET


def render_table(
    dataset: Dataset,
    surface: TableSurface,
    diagnostics: Optional[DiagnosticsCollector] = None,
) -> int:
    """Emit one header and one row per record; return the row count."""
    diagnostics = ensure_collector(diagnostics)
    if not surface.has_targets():
        raise RenderTargetMissing("Cannot populate table - missing display targets")
    if dataset.is_empty:
        raise EmptyDataset("Cannot populate table - dataset has no rows")

    columns = list(dataset.columns)
    surface.render_header(columns)
    for record in dataset:
        surface.render_row(record, is_flagged(record, columns))

    diagnostics.log(f"✅ Table 1 populated with {len(dataset)} rows")
    return len(dataset)
