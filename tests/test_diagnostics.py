from __future__ import annotations

import logging
import re

from loyalty_dashboard.diagnostics import DiagnosticsCollector, ensure_collector


def test_entries_are_timestamped():
    collector = DiagnosticsCollector()
    line = collector.log("hello")
    assert re.fullmatch(r"\[\d{2}:\d{2}:\d{2}\] hello", line)
    assert collector.entries == [line]


def test_data_is_json_encoded():
    collector = DiagnosticsCollector()
    line = collector.log("Headers:", ["Index #", "Value"])
    assert '"Index #"' in line


def test_entries_forwarded_to_logging(caplog):
    collector = DiagnosticsCollector()
    with caplog.at_level(logging.WARNING, logger="loyalty_dashboard.diagnostics"):
        collector.warning("careful")
    assert "careful" in caplog.text


def test_collectors_are_independent():
    first, second = DiagnosticsCollector(), DiagnosticsCollector()
    first.log("one")
    assert len(second) == 0
    first.clear()
    assert first.as_text() == ""


def test_ensure_collector_reuses_given():
    collector = DiagnosticsCollector()
    assert ensure_collector(collector) is collector
    assert isinstance(ensure_collector(None), DiagnosticsCollector)
