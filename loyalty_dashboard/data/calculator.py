"""
Fixed-formula calculations over the value column.

    alpha   = A5 + A20
    beta    = floor(A15 / A7)
    charlie = A13 * A12

Every referenced identifier must be present with an integer value; anything
else raises instead of producing a null result.
"""

from __future__ import annotations

import logging
import operator
import re
from dataclasses import dataclass
from typing import Callable, List, Optional

from loyalty_dashboard.data.model import CalculationResult, Dataset, ValueIndex
from loyalty_dashboard.diagnostics import DiagnosticsCollector, ensure_collector
from loyalty_dashboard.errors import EmptyDataset, FormulaArithmeticError, MissingIdentifier

logger = logging.getLogger(__name__)

# Plain decimal integers only; no underscores, no non-ASCII digits
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Formula:
    name: str
    left: str
    right: str
    symbol: str
    op: Callable[[int, int], int]

    @property
    def label(self) -> str:
        return f"{self.name.title()} ({self.left} {self.symbol} {self.right})"

    @property
    def expression(self) -> str:
        return f"{self.left} {self.symbol} {self.right}"


FORMULAS: List[Formula] = [
    Formula("alpha", "A5", "A20", "+", operator.add),
    Formula("beta", "A15", "A7", "/", operator.floordiv),
    Formula("charlie", "A13", "A12", "*", operator.mul),
]


def parse_int(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    text = raw.strip()
    if not INTEGER_PATTERN.fullmatch(text):
        return None
    return int(text)


def build_value_index(dataset: Dataset) -> ValueIndex:
    """Map first-column identifiers to second-column integers.

    Later rows overwrite earlier ones with the same identifier. Values that are
    not integers map to None so a lookup can report them.
    """
    if dataset.is_empty:
        raise EmptyDataset("Cannot calculate - dataset has no rows")
    index_col, value_col = dataset.index_column, dataset.value_column
    if index_col is None or value_col is None:
        raise MissingIdentifier(
            "value column", f"missing: dataset has {len(dataset.columns)} column(s), need 2"
        )
    return {record[index_col]: parse_int(record[value_col]) for record in dataset}


def _lookup(index: ValueIndex, identifier: str) -> int:
    if identifier not in index:
        raise MissingIdentifier(identifier)
    value = index[identifier]
    if value is None:
        raise MissingIdentifier(identifier, "does not have an integer value")
    return value


def calculate(index: ValueIndex, diagnostics: Optional[DiagnosticsCollector] = None) -> CalculationResult:
    """Evaluate every formula against the value index.

    Raises:
        MissingIdentifier: a referenced identifier is absent or non-integer.
        FormulaArithmeticError: division by zero in beta.
    """
    diagnostics = ensure_collector(diagnostics)
    values = {}
    operands = {}
    for formula in FORMULAS:
        left = _lookup(index, formula.left)
        right = _lookup(index, formula.right)
        operands[formula.left] = left
        operands[formula.right] = right
        try:
            values[formula.name] = formula.op(left, right)
        except ZeroDivisionError as exc:
            raise FormulaArithmeticError(
                f"{formula.label}: division by zero ({formula.right} is 0)"
            ) from exc

    diagnostics.log("📊 Table 2 Calculations:")
    for formula in FORMULAS:
        diagnostics.log(
            f"{formula.label}: {operands[formula.left]} {formula.symbol} "
            f"{operands[formula.right]} = {values[formula.name]}"
        )
    return CalculationResult(
        alpha=values["alpha"],
        beta=values["beta"],
        charlie=values["charlie"],
        operands=tuple(sorted(operands.items())),
    )


def calculate_dataset(dataset: Dataset, diagnostics: Optional[DiagnosticsCollector] = None) -> CalculationResult:
    return calculate(build_value_index(dataset), diagnostics)


def lookup_value(dataset: Dataset, identifier: str) -> Optional[int]:
    """First record whose index column equals `identifier`, as an int."""
    index_col, value_col = dataset.index_column, dataset.value_column
    if index_col is None or value_col is None:
        return None
    for record in dataset:
        if record[index_col] == identifier:
            return parse_int(record[value_col])
    return None
