from __future__ import annotations

from typing import List, Sequence, Tuple

import pytest

from loyalty_dashboard.data.model import Dataset, Record
from loyalty_dashboard.data.parser import parse_csv
from loyalty_dashboard.data.sources import EMBEDDED_CSV
from loyalty_dashboard.diagnostics import DiagnosticsCollector


class RecordingSurface:
    def __init__(self, ready: bool = True) -> None:
        self.ready = ready
        self.headers: List[List[str]] = []
        self.rows: List[Tuple[Record, bool]] = []
        self.errors: List[Tuple[str, str]] = []

    def has_targets(self) -> bool:
        return self.ready

    def render_header(self, columns: Sequence[str]) -> None:
        self.headers.append(list(columns))

    def render_row(self, record: Record, flagged: bool) -> None:
        self.rows.append((record, flagged))

    def report_error(self, kind: str, message: str) -> None:
        self.errors.append((kind, message))


def csv_without(identifier: str) -> str:
    lines = EMBEDDED_CSV.splitlines()
    return "\n".join(line for line in lines if line.split(",")[0] != identifier)


def csv_with_value(identifier: str, value: str) -> str:
    lines = []
    for line in EMBEDDED_CSV.splitlines():
        key = line.split(",")[0]
        lines.append(f"{key},{value}" if key == identifier else line)
    return "\n".join(lines)


@pytest.fixture
def diagnostics() -> DiagnosticsCollector:
    return DiagnosticsCollector()


@pytest.fixture
def embedded_dataset() -> Dataset:
    return parse_csv(EMBEDDED_CSV)


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()
