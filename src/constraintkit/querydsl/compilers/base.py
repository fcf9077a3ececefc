"""Base compiler interface.

Defines the abstract contract all engine-specific compilers must follow.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Sequence

from .utils import merge_nodes, normalize_where_input

__all__ = ("BaseWhere",)


class BaseWhere(ABC):
    """Abstract base class for artifact compilers.

    Subclasses implement `to_where` and `to_expr` to produce engine-specific
    structures. `to_search` assembles rendered query and filter artifacts
    into one search; engines without a scoring notion simply AND everything.
    """

    @abstractmethod
    def to_where(self, node: Any) -> Any:
        """
        Convert an artifact, composite or universal dict into engine-native syntax.
        - dict for JSON query DSL engines (Elasticsearch)
        - string for expression engines (SQL)
        """
        raise NotImplementedError

    @abstractmethod
    def to_expr(self, node: Dict[str, Any]) -> str:
        """Convert a universal dict into a string expression."""
        raise NotImplementedError

    def to_search(self, queries: Sequence[Any], filters: Sequence[Any]) -> Any:
        """Combine scored query and unscored filter artifacts into one search."""
        nodes = [normalize_where_input(a) for a in (*queries, *filters)]
        return self.to_where(merge_nodes(nodes))
