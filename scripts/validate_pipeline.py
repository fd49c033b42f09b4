"""Quick validation script for the embedded-dataset pipeline.

Run with `python scripts/validate_pipeline.py` to ensure the fallback data
parses, renders with the expected highlights and yields the known values.
"""

from __future__ import annotations

from loyalty_dashboard.data.pipeline import run_pipeline
from loyalty_dashboard.data.sources import embedded_provider
from loyalty_dashboard.diagnostics import DiagnosticsCollector
from loyalty_dashboard.ui.components.tables import FrameTableSurface


def main() -> None:
    diagnostics = DiagnosticsCollector()
    surface = FrameTableSurface()
    outcome = run_pipeline([embedded_provider()], surface, diagnostics)

    if not outcome.ok:
        raise SystemExit(f"Pipeline failed: {outcome.error_kind}: {outcome.error_message}")

    expected = {"alpha": 30, "beta": 16, "charlie": 270}
    assert outcome.result is not None
    assert outcome.result.as_dict() == expected, f"Unexpected results: {outcome.result.as_dict()}"
    flagged = [row["Index #"] for row in surface.flagged_rows]
    assert flagged == ["A5", "A7", "A12", "A13", "A15", "A20"], f"Unexpected highlights: {flagged}"

    print("Pipeline validation passed. Rows:", len(surface.rows))
    print(diagnostics.as_text())


if __name__ == "__main__":
    main()
