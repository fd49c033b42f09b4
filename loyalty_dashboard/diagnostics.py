"""
Per-run diagnostics log.

Each pipeline run owns one collector; stages append timestamped lines that
the debug panel shows verbatim. Every line is also forwarded to `logging`.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, List, Optional

logger = logging.getLogger(__name__)


class DiagnosticsCollector:
    def __init__(self) -> None:
        self._entries: List[str] = []

    def log(self, message: str, data: Any = None, level: int = logging.INFO) -> str:
        timestamp = datetime.now().strftime("%H:%M:%S")
        line = f"[{timestamp}] {message}"
        if data is not None:
            line = f"{line} {json.dumps(data, indent=2, default=str)}"
        logger.log(level, line)
        self._entries.append(line)
        return line

    def warning(self, message: str, data: Any = None) -> str:
        return self.log(message, data, level=logging.WARNING)

    def error(self, message: str, data: Any = None) -> str:
        return self.log(message, data, level=logging.ERROR)

    @property
    def entries(self) -> List[str]:
        return list(self._entries)

    def as_text(self) -> str:
        return "\n".join(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


def ensure_collector(diagnostics: Optional[DiagnosticsCollector]) -> DiagnosticsCollector:
    return diagnostics if diagnostics is not None else DiagnosticsCollector()
