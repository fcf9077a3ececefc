"""Artifacts rendered by constraints.

Artifacts are inert, frozen value objects describing one search predicate.
They know nothing about a concrete engine: each exposes `to_dict()`, the
universal dict form which the compilers translate into engine syntax.

- `Term`:   field equals value              -> ``{field: {"$eq": value}}``
- `Range`:  field compared against a bound  -> ``{field: {"$lt": value}}``
- `Missing`: field has no value             -> ``{field: {"$exists": False}}``
- `AnyOf`:  disjunction of filter branches  -> ``{"$or": [...]}``

Only `Term` and `Range` can be scored queries; all four can be filters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict

from ..constants import Operator

__all__ = (
    "Bound",
    "Artifact",
    "Term",
    "Range",
    "Missing",
    "AnyOf",
    "QueryArtifact",
    "FilterArtifact",
)


class Bound(str, Enum):
    """Comparison applied by a range artifact."""

    LT = "lt"
    LTE = "lte"
    GT = "gt"
    GTE = "gte"

    @property
    def operator(self) -> str:
        return f"${self.value}"

    @property
    def inclusive(self) -> bool:
        return self in (Bound.LTE, Bound.GTE)

    def widened(self) -> "Bound":
        """Return the inclusive counterpart of a strict bound."""
        if self is Bound.LT:
            return Bound.LTE
        if self is Bound.GT:
            return Bound.GTE
        return self


class Artifact(BaseModel, ABC):
    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Return the universal dict representation of this artifact."""
        raise NotImplementedError

    def __str__(self) -> str:
        return str(self.to_dict())

    def __hash__(self) -> int:
        return hash((self.__class__, repr(self.to_dict())))


class Term(Artifact):
    kind: Literal["term"] = "term"
    field: str
    value: Any

    def to_dict(self) -> Dict[str, Any]:
        return {self.field: {Operator.EQ: self.value}}


class Range(Artifact):
    kind: Literal["range"] = "range"
    field: str
    bound: Bound
    value: Any

    def to_dict(self) -> Dict[str, Any]:
        return {self.field: {self.bound.operator: self.value}}


class Missing(Artifact):
    kind: Literal["missing"] = "missing"
    field: str

    def to_dict(self) -> Dict[str, Any]:
        return {self.field: {Operator.EXISTS: False}}


class AnyOf(Artifact):
    """Matches when at least one branch matches."""

    kind: Literal["any_of"] = "any_of"
    branches: Tuple[Artifact, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {Operator.OR: [branch.to_dict() for branch in self.branches]}


QueryArtifact = Union[Term, Range]
FilterArtifact = Union[Term, Range, Missing, AnyOf]
