from __future__ import annotations

from dataclasses import dataclass

from loyalty_dashboard.data.pipeline import PipelineOutcome
from loyalty_dashboard.diagnostics import DiagnosticsCollector
from loyalty_dashboard.ui.components.tables import FrameTableSurface


@dataclass
class PageContext:
    outcome: PipelineOutcome
    surface: FrameTableSurface
    diagnostics: DiagnosticsCollector
    debug_mode: bool = False
