from __future__ import annotations

import pytest

from loyalty_dashboard.data.calculator import (
    FORMULAS,
    build_value_index,
    calculate,
    calculate_dataset,
    lookup_value,
)
from loyalty_dashboard.data.parser import parse_csv
from loyalty_dashboard.errors import EmptyDataset, FormulaArithmeticError, MissingIdentifier
from tests.conftest import csv_with_value, csv_without


def test_embedded_values(embedded_dataset):
    result = calculate_dataset(embedded_dataset)
    assert (result.alpha, result.beta, result.charlie) == (30, 16, 270)
    assert result.as_dict() == {"alpha": 30, "beta": 16, "charlie": 270}


def test_operands_recorded(embedded_dataset):
    result = calculate_dataset(embedded_dataset)
    assert result.operand("A15") == 80
    assert result.operand("A7") == 5
    assert result.operand("A1") is None


def test_idempotent(embedded_dataset):
    assert calculate_dataset(embedded_dataset) == calculate_dataset(embedded_dataset)


def test_value_index_from_first_two_columns(embedded_dataset):
    index = build_value_index(embedded_dataset)
    assert len(index) == 20
    assert index["A13"] == 90


def test_duplicate_identifier_last_wins():
    dataset = parse_csv("Index #,Value\nA1,1\nA1,2")
    assert build_value_index(dataset) == {"A1": 2}


def test_missing_a7_raises_missing_identifier():
    dataset = parse_csv(csv_without("A7"))
    with pytest.raises(MissingIdentifier) as excinfo:
        calculate_dataset(dataset)
    assert excinfo.value.identifier == "A7"


def test_non_integer_value_raises_missing_identifier():
    dataset = parse_csv(csv_with_value("A20", "twenty"))
    with pytest.raises(MissingIdentifier, match="integer"):
        calculate_dataset(dataset)


def test_zero_divisor_raises_arithmetic_error():
    dataset = parse_csv(csv_with_value("A7", "0"))
    with pytest.raises(ArithmeticError):
        calculate_dataset(dataset)
    with pytest.raises(FormulaArithmeticError):
        calculate_dataset(dataset)


def test_beta_rounds_down():
    index = {"A5": 1, "A20": 1, "A15": 7, "A7": 2, "A13": 1, "A12": 1}
    assert calculate(index).beta == 3
    index["A15"] = -7
    assert calculate(index).beta == -4


def test_single_column_dataset_raises():
    dataset = parse_csv("Index #\nA5\nA7")
    with pytest.raises(MissingIdentifier):
        build_value_index(dataset)


def test_empty_dataset_raises():
    with pytest.raises(EmptyDataset):
        build_value_index(parse_csv("Index #,Value"))


def test_lookup_value(embedded_dataset):
    assert lookup_value(embedded_dataset, "A12") == 3
    assert lookup_value(embedded_dataset, "A99") is None


def test_formula_labels():
    assert [f.label for f in FORMULAS] == [
        "Alpha (A5 + A20)",
        "Beta (A15 / A7)",
        "Charlie (A13 * A12)",
    ]


def test_calculation_breakdown_logged(embedded_dataset, diagnostics):
    calculate_dataset(embedded_dataset, diagnostics)
    text = diagnostics.as_text()
    assert "Alpha (A5 + A20): 2 + 28 = 30" in text
    assert "Beta (A15 / A7): 80 / 5 = 16" in text
    assert "Charlie (A13 * A12): 90 * 3 = 270" in text


@pytest.mark.parametrize("raw", ["1_000", "1e3", "0x10", "12abc", " ", "٣"])
def test_non_decimal_integer_forms_rejected(raw):
    dataset = parse_csv(csv_with_value("A5", raw))
    with pytest.raises(MissingIdentifier) as excinfo:
        calculate_dataset(dataset)
    assert excinfo.value.identifier == "A5"


def test_signed_and_padded_integers_accepted():
    dataset = parse_csv(csv_with_value("A5", " -2 "))
    assert calculate_dataset(dataset).alpha == 26
    dataset = parse_csv(csv_with_value("A5", "+2"))
    assert calculate_dataset(dataset).alpha == 30
