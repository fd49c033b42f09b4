"""
Header-driven CSV parsing into a `Dataset`.

Values are kept exactly as written in the file: no NA sentinels, no type
inference and no whitespace trimming. Lines with more fields than the header
are kept (truncated to the header width) and reported as warnings, the first
data line included.

The header line is read as an ordinary row so its width fixes the column
count and pandas never promotes a data column to the index. Header names are
kept verbatim; a repeated name gets a `.N` suffix (`Value`, `Value.1`) so each
record holds one key per column.
"""

from __future__ import annotations

import io
import logging
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd

from loyalty_dashboard.data.model import Dataset
from loyalty_dashboard.diagnostics import DiagnosticsCollector, ensure_collector
from loyalty_dashboard.errors import ParseFailure

logger = logging.getLogger(__name__)


def _read_frame(text: str, warnings: List[str]) -> pd.DataFrame:
    def _on_bad_line(bad_line: List[str]) -> List[str]:
        warnings.append(f"Too many fields ({len(bad_line)}): {','.join(bad_line)}")
        return bad_line

    return pd.read_csv(
        io.StringIO(text),
        header=None,
        dtype=str,
        keep_default_na=False,
        na_filter=False,
        skip_blank_lines=True,
        engine="python",
        on_bad_lines=_on_bad_line,
    )


def unique_columns(header: Sequence[str]) -> Tuple[str, ...]:
    seen: Dict[str, int] = {}
    taken = set(header)
    columns = []
    for name in header:
        count = seen.get(name, 0)
        column = name
        if count:
            column = f"{name}.{count}"
            # Skip suffixes that collide with a literal header name
            while column in taken:
                count += 1
                column = f"{name}.{count}"
            taken.add(column)
        columns.append(column)
        seen[name] = count + 1
    return tuple(columns)


def parse_csv(text: str, diagnostics: Optional[DiagnosticsCollector] = None) -> Dataset:
    """Parse CSV text whose first line is the header.

    Raises:
        ParseFailure: the text has no header or cannot be tokenized.
    """
    diagnostics = ensure_collector(diagnostics)
    warnings: List[str] = []
    try:
        df = _read_frame(text, warnings)
    except pd.errors.EmptyDataError as exc:
        raise ParseFailure("CSV text is empty or has no header line") from exc
    except pd.errors.ParserError as exc:
        raise ParseFailure(f"CSV text could not be parsed: {exc}") from exc

    if warnings:
        diagnostics.warning("CSV parsing warnings:", warnings)

    # Short rows are padded with NaN regardless of na_filter
    df = df.astype(object).where(df.notna(), "")
    rows = [[str(val) for val in row] for row in df.itertuples(index=False, name=None)]
    if not rows:
        raise ParseFailure("CSV text is empty or has no header line")

    columns = unique_columns(rows[0])
    records = tuple(dict(zip(columns, row)) for row in rows[1:])
    dataset = Dataset(columns=columns, records=records)

    diagnostics.log(f"📊 Parsed {len(dataset)} rows")
    diagnostics.log("Headers:", list(columns))
    return dataset
