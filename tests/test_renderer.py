from __future__ import annotations

import pytest

from loyalty_dashboard.data.parser import parse_csv
from loyalty_dashboard.data.renderer import HIGHLIGHT_SET, is_flagged, render_table
from loyalty_dashboard.errors import EmptyDataset, RenderTargetMissing
from tests.conftest import RecordingSurface


def test_header_then_one_row_per_record(embedded_dataset, surface):
    count = render_table(embedded_dataset, surface)
    assert count == 20
    assert surface.headers == [["Index #", "Value"]]
    assert [record["Index #"] for record, _ in surface.rows] == [f"A{i}" for i in range(1, 21)]


def test_flagged_iff_in_highlight_set(embedded_dataset, surface):
    render_table(embedded_dataset, surface)
    for record, flagged in surface.rows:
        assert flagged == (record["Index #"] in HIGHLIGHT_SET)
    assert sorted(r["Index #"] for r, flagged in surface.rows if flagged) == sorted(HIGHLIGHT_SET)


def test_flag_uses_first_column_only():
    columns = ["Value", "Index #"]
    assert not is_flagged({"Value": "2", "Index #": "A5"}, columns)
    assert is_flagged({"Value": "A5", "Index #": "x"}, columns)


def test_header_only_raises_empty_dataset(surface):
    dataset = parse_csv("Index #,Value")
    with pytest.raises(EmptyDataset):
        render_table(dataset, surface)
    assert surface.headers == []
    assert surface.rows == []


def test_missing_targets_raise(embedded_dataset):
    surface = RecordingSurface(ready=False)
    with pytest.raises(RenderTargetMissing):
        render_table(embedded_dataset, surface)
    assert surface.rows == []


def test_render_logs_row_count(embedded_dataset, surface, diagnostics):
    render_table(embedded_dataset, surface, diagnostics)
    assert "Table 1 populated with 20 rows" in diagnostics.as_text()
