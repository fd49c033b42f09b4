"""
Runs resolve -> parse -> render -> calculate once and reduces any surfaced
error to a single failure outcome.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from loyalty_dashboard.data.calculator import calculate_dataset
from loyalty_dashboard.data.model import CalculationResult, Dataset
from loyalty_dashboard.data.parser import parse_csv
from loyalty_dashboard.data.renderer import TableSurface, render_table
from loyalty_dashboard.data.sources import SourceProvider, resolve_csv
from loyalty_dashboard.diagnostics import DiagnosticsCollector, ensure_collector
from loyalty_dashboard.errors import DashboardError

logger = logging.getLogger(__name__)


@dataclass
class PipelineOutcome:
    ok: bool
    source: Optional[str] = None
    dataset: Optional[Dataset] = None
    result: Optional[CalculationResult] = None
    error_kind: Optional[str] = None
    error_message: Optional[str] = None


def process_text(
    source_name: str,
    text: str,
    surface: TableSurface,
    diagnostics: Optional[DiagnosticsCollector] = None,
) -> PipelineOutcome:
    """Parse, render and calculate already-resolved CSV text."""
    diagnostics = ensure_collector(diagnostics)
    dataset: Optional[Dataset] = None
    try:
        dataset = parse_csv(text, diagnostics)
        render_table(dataset, surface, diagnostics)
        result = calculate_dataset(dataset, diagnostics)
    except DashboardError as exc:
        logger.error("❌ Error processing CSV: %s", exc)
        diagnostics.error(f"Error: {exc}")
        surface.report_error(exc.kind, str(exc))
        return PipelineOutcome(
            ok=False,
            source=source_name,
            dataset=dataset,
            error_kind=exc.kind,
            error_message=str(exc),
        )
    return PipelineOutcome(ok=True, source=source_name, dataset=dataset, result=result)


def run_pipeline(
    providers: Sequence[SourceProvider],
    surface: TableSurface,
    diagnostics: Optional[DiagnosticsCollector] = None,
) -> PipelineOutcome:
    diagnostics = ensure_collector(diagnostics)
    try:
        resolved = resolve_csv(providers, diagnostics)
    except DashboardError as exc:
        diagnostics.error(f"Error: {exc}")
        surface.report_error(exc.kind, str(exc))
        return PipelineOutcome(ok=False, error_kind=exc.kind, error_message=str(exc))
    return process_text(resolved.name, resolved.text, surface, diagnostics)
