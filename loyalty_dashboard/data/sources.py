"""
Ordered CSV source providers and the resolver that walks them.

Providers are tried strictly in sequence, each at most once. The first one
that returns text wins and the remaining providers are never called.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

import requests

from loyalty_dashboard.diagnostics import DiagnosticsCollector, ensure_collector
from loyalty_dashboard.errors import SourceUnavailable

logger = logging.getLogger(__name__)

EMBEDDED_CSV = """Index #,Value
A1,41
A2,18
A3,21
A4,63
A5,2
A6,53
A7,5
A8,57
A9,60
A10,93
A11,28
A12,3
A13,90
A14,39
A15,80
A16,88
A17,49
A18,60
A19,26
A20,28"""


@dataclass(frozen=True)
class SourceProvider:
    name: str
    fetch: Callable[[], str]


@dataclass(frozen=True)
class SourceAttempt:
    name: str
    ok: bool
    detail: str = ""


@dataclass(frozen=True)
class ResolvedSource:
    name: str
    text: str
    attempts: Tuple[SourceAttempt, ...] = field(default_factory=tuple)


def remote_endpoint_provider(url: str, timeout: float = 5.0) -> SourceProvider:
    def _fetch() -> str:
        try:
            resp = requests.get(url, timeout=timeout)
        except requests.exceptions.RequestException as exc:
            raise SourceUnavailable(f"Server API not available: {exc}") from exc
        if not resp.ok:
            raise SourceUnavailable(f"Server API not available: HTTP {resp.status_code}")
        return resp.text

    return SourceProvider("server_api", _fetch)


def static_file_provider(path: Path | str) -> SourceProvider:
    csv_path = Path(path)

    def _fetch() -> str:
        try:
            return csv_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceUnavailable(f"CSV file not found: {csv_path}") from exc

    return SourceProvider("static_file", _fetch)


def embedded_provider() -> SourceProvider:
    return SourceProvider("embedded", lambda: EMBEDDED_CSV)


def default_providers(api_url: str, static_path: Path | str, timeout: float = 5.0) -> List[SourceProvider]:
    return [
        remote_endpoint_provider(api_url, timeout=timeout),
        static_file_provider(static_path),
        embedded_provider(),
    ]


SOURCE_MESSAGES = {
    "server_api": "✅ CSV loaded from server API",
    "static_file": "✅ CSV loaded from file",
    "embedded": "⚠️ Using fallback CSV data",
}


def resolve_csv(
    providers: Sequence[SourceProvider],
    diagnostics: Optional[DiagnosticsCollector] = None,
) -> ResolvedSource:
    """Return the text of the first provider that succeeds.

    Raises:
        SourceUnavailable: every provider failed (impossible when the
            embedded provider is in the list).
    """
    diagnostics = ensure_collector(diagnostics)
    attempts: List[SourceAttempt] = []
    for provider in providers:
        try:
            text = provider.fetch()
        except SourceUnavailable as exc:
            logger.debug("Source %s unavailable: %s", provider.name, exc)
            attempts.append(SourceAttempt(provider.name, ok=False, detail=str(exc)))
            continue
        attempts.append(SourceAttempt(provider.name, ok=True))
        diagnostics.log(SOURCE_MESSAGES.get(provider.name, f"✅ CSV loaded from {provider.name}"))
        return ResolvedSource(name=provider.name, text=text, attempts=tuple(attempts))

    tried = ", ".join(a.name for a in attempts) or "none"
    raise SourceUnavailable(f"All CSV sources failed (tried: {tried})")
