import loyalty_dashboard.bootstrap_env  # must be first to set env/secrets
import streamlit as st

from loyalty_dashboard.config import SECTIONS, Settings, load_settings
from loyalty_dashboard.data.loader import clear_cache, load_csv
from loyalty_dashboard.data.pipeline import PipelineOutcome, process_text
from loyalty_dashboard.diagnostics import DiagnosticsCollector
from loyalty_dashboard.errors import DashboardError
from loyalty_dashboard.ui.components.tables import FrameTableSurface
from loyalty_dashboard.ui.layout import render_failure, setup_page, sidebar_controls
from loyalty_dashboard.ui.pages import calculations, data_table, debug_log
from loyalty_dashboard.ui.pages.context import PageContext


SECTION_RENDERERS = {
    "table": data_table.render,
    "calculations": calculations.render,
}


def _run(settings: Settings, diagnostics: DiagnosticsCollector, surface: FrameTableSurface) -> PipelineOutcome:
    try:
        resolved = load_csv(settings, diagnostics)
    except DashboardError as exc:
        diagnostics.error(f"Error: {exc}")
        surface.report_error(exc.kind, str(exc))
        return PipelineOutcome(ok=False, error_kind=exc.kind, error_message=str(exc))
    return process_text(resolved.name, resolved.text, surface, diagnostics)


def main() -> None:
    setup_page()
    st.title("Simple Loyalty Assessment")

    settings = load_settings()
    sidebar = sidebar_controls(debug_default=settings.debug_mode)
    if sidebar.refresh:
        clear_cache()

    diagnostics = DiagnosticsCollector()
    surface = FrameTableSurface()
    with st.spinner("Loading CSV data..."):
        outcome = _run(settings, diagnostics, surface)

    context = PageContext(
        outcome=outcome,
        surface=surface,
        diagnostics=diagnostics,
        debug_mode=sidebar.debug_mode,
    )

    if not outcome.ok:
        render_failure(outcome)
    else:
        for section in SECTIONS:
            renderer = SECTION_RENDERERS.get(section.key)
            if renderer is None:
                continue
            renderer(context, section)

    debug_log.render(context)


if __name__ == "__main__":
    main()
