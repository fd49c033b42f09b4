"""
Error taxonomy for the CSV pipeline.

`SourceUnavailable` is always recovered by the resolver falling back to the
next source. Every other error propagates to the pipeline controller, which
turns it into a single failure state.
"""

from __future__ import annotations


class DashboardError(Exception):
    kind = "dashboard_error"


class SourceUnavailable(DashboardError):
    kind = "source_unavailable"


class ParseFailure(DashboardError):
    kind = "parse_failure"


class EmptyDataset(DashboardError):
    kind = "empty_dataset"


class MissingIdentifier(DashboardError):
    kind = "missing_identifier"

    def __init__(self, identifier: str, reason: str = "not present in the dataset") -> None:
        self.identifier = identifier
        super().__init__(f"Identifier {identifier!r} {reason}")


class FormulaArithmeticError(DashboardError, ArithmeticError):
    kind = "arithmetic_error"


class RenderTargetMissing(DashboardError):
    kind = "render_target_missing"
