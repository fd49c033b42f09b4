from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

import pandas as pd

Record = Dict[str, str]
ValueIndex = Dict[str, Optional[int]]


@dataclass(frozen=True)
class Dataset:
    """Ordered, read-only rows from a single parse.

    `columns` holds the header names in file order; every record has exactly
    these keys in the same order.
    """

    columns: Tuple[str, ...]
    records: Tuple[Record, ...]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    @property
    def is_empty(self) -> bool:
        return not self.records

    @property
    def index_column(self) -> Optional[str]:
        return self.columns[0] if self.columns else None

    @property
    def value_column(self) -> Optional[str]:
        return self.columns[1] if len(self.columns) > 1 else None

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(list(self.records), columns=list(self.columns), dtype=object)


@dataclass(frozen=True)
class CalculationResult:
    alpha: int
    beta: int
    charlie: int
    operands: Tuple[Tuple[str, int], ...] = ()

    def as_dict(self) -> Dict[str, int]:
        return {"alpha": self.alpha, "beta": self.beta, "charlie": self.charlie}

    def operand(self, identifier: str) -> Optional[int]:
        return dict(self.operands).get(identifier)
