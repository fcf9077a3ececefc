"""Composite of rendered constraints.

`combine()` renders each constraint once and keeps the non-empty artifacts:
query artifacts contribute to relevance, filter artifacts only restrict the
result set. Constraints which render nothing are skipped silently, which is
the expected outcome for e.g. an optional value with `ignore_absent_values()`.

Typical usage:

- Build: ``combine(equal("type", Kind.BOOK), less_than("price", 10).including())``
- Extend: ``composite & greater_than("stock", 0).as_filter()``
- Compile: ``composite.to_search("elasticsearch")`` or ``composite.to_where("sql")``
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Literal, Optional, Sequence, Union

from ..logger import get_logger
from .artifacts import Artifact
from .compilers.utils import merge_nodes

if TYPE_CHECKING:
    from ..constraints.base import BaseConstraint
    from .compilers.base import BaseWhere

__all__ = ("BackendType", "Composite", "combine")

BackendType = Literal["generic", "elasticsearch", "sql"]

logger = get_logger(__name__)


class Composite:
    """Rendered artifacts of a set of constraints.

    The composite is built once from its constraints; `&` returns a new
    composite and leaves both operands untouched.
    """

    def __init__(self, constraints: Sequence["BaseConstraint"] = ()):
        self.constraints: List["BaseConstraint"] = list(constraints)
        self.queries: List[Artifact] = []
        self.filters: List[Artifact] = []
        for constraint in self.constraints:
            query = constraint.render_as_query()
            filter_ = constraint.render_as_filter()
            if query is not None:
                self.queries.append(query)
            if filter_ is not None:
                self.filters.append(filter_)
            if query is None and filter_ is None:
                logger.debug("Skipping constraint without artifacts: %s", constraint.describe(redact_values=True))

    def __and__(self, other: Union["Composite", "BaseConstraint"]) -> "Composite":
        """Return a new composite containing the constraints of both operands."""
        others = other.constraints if isinstance(other, Composite) else [other]
        return Composite([*self.constraints, *others])

    def __len__(self) -> int:
        return len(self.queries) + len(self.filters)

    def __bool__(self) -> bool:
        return len(self) > 0

    def __str__(self) -> str:
        return str(self.to_dict())

    def __repr__(self) -> str:
        return f"<Composite: {self.describe(redact_values=True)}>"

    def describe(self, redact_values: bool = False) -> str:
        return " AND ".join(c.describe(redact_values=redact_values) for c in self.constraints)

    def to_dict(self) -> Dict[str, Any]:
        """Return the universal dict AND-combining all artifacts."""
        return merge_nodes([a.to_dict() for a in (*self.queries, *self.filters)])

    def _get_where_compiler(self, backend: BackendType) -> Optional[BaseWhere]:
        """Return the backend-specific compiler, if any."""
        if backend == "elasticsearch":
            from .compilers.elasticsearch import elasticsearch_where

            return elasticsearch_where
        elif backend == "sql":
            from .compilers.sql import sql_where

            return sql_where
        else:
            return None

    def to_where(self, backend: BackendType = "generic") -> Any:
        """Compile all artifacts into one AND-combined backend expression.

        For `generic`, returns the universal dict.
        """
        where_compiler = self._get_where_compiler(backend)
        if where_compiler:
            return where_compiler.to_where(self)
        return self.to_dict()

    def to_search(self, backend: BackendType = "generic") -> Any:
        """Compile into a search keeping queries scored and filters unscored.

        For `generic`, returns ``{"queries": [...], "filters": [...]}``.
        """
        where_compiler = self._get_where_compiler(backend)
        if where_compiler:
            return where_compiler.to_search(self.queries, self.filters)
        return {
            "queries": [q.to_dict() for q in self.queries],
            "filters": [f.to_dict() for f in self.filters],
        }


def combine(*constraints: "BaseConstraint") -> Composite:
    """Render `constraints` and collect their non-empty artifacts."""
    return Composite(constraints)
