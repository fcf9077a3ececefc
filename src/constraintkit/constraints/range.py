"""Relational constraints: ``<``, ``<=``, ``>`` and ``>=``."""

from typing import Literal, Optional

from ..querydsl.artifacts import AnyOf, Bound, FilterArtifact, Missing, QueryArtifact, Range
from .base import BaseConstraint

__all__ = ("Bound", "RangeConstraint", "less_than", "greater_than")

# Bound names as they appear in descriptions and logs
_BOUND_LABELS = {Bound.LT: "LT", Bound.LTE: "LT_EQ", Bound.GT: "GT", Bound.GTE: "GT_EQ"}


class RangeConstraint(BaseConstraint):
    """Compares a field against a single bound.

    The bound starts strict and can only be widened via `including()`.
    `or_empty()` turns the constraint into a filter which also accepts
    documents without any value for the field.
    """

    kind: Literal["range"] = "range"
    bound: Bound
    match_if_absent: bool = False

    def including(self) -> "RangeConstraint":
        """Make the bound inclusive: ``<`` becomes ``<=`` and ``>`` becomes ``>=``."""
        return self.model_copy(update={"bound": self.bound.widened()})

    def or_empty(self) -> "RangeConstraint":
        """Also accept documents where the field is empty. Implies `as_filter()`."""
        return self.as_filter().model_copy(update={"match_if_absent": True})

    def _range(self) -> Range:
        return Range(field=self.field, bound=self.bound, value=self.value)

    def _build_query(self) -> Optional[QueryArtifact]:
        if self.as_filter_mode or self.match_if_absent or not self.has_value:
            return None
        return self._range()

    def _build_filter(self) -> Optional[FilterArtifact]:
        if not self.as_filter_mode or not self.has_value:
            return None
        if self.match_if_absent:
            return AnyOf(branches=(self._range(), Missing(field=self.field)))
        return self._range()

    def describe(self, redact_values: bool = False) -> str:
        return f"{self.field} {_BOUND_LABELS[self.bound]} '{self._display_value(redact_values)}'"


def less_than(field: str, value: object) -> RangeConstraint:
    """Create a constraint representing ``field < value``."""
    return RangeConstraint(field=field, bound=Bound.LT, value=value)


def greater_than(field: str, value: object) -> RangeConstraint:
    """Create a constraint representing ``field > value``."""
    return RangeConstraint(field=field, bound=Bound.GT, value=value)
