"""Elasticsearch query DSL compiler.

Transforms universal artifact dicts into Elasticsearch JSON query DSL.

Mapping:
- ``$eq``                 -> ``term``
- ``$lt/$lte/$gt/$gte``   -> ``range`` (all bounds of one field merged)
- ``$exists: True``       -> ``exists``
- ``$exists: False``      -> ``bool.must_not[exists]``
- ``$or``                 -> ``bool.should`` with ``minimum_should_match: 1``
- ``$and``                -> ``bool.must``
- ``{}``                  -> ``match_all``

`to_search` keeps scored queries in ``bool.must`` and unscored filters in
``bool.filter`` so filters never influence relevance.
"""

import json
from typing import Any, Dict, List, Sequence

from ...constants import RANGE_OPERATORS, Operator
from ...exceptions import InvalidFieldError
from .base import BaseWhere
from .utils import normalize_where_input

__all__ = (
    "ElasticsearchWhereCompiler",
    "elasticsearch_where",
)


class ElasticsearchWhereCompiler(BaseWhere):
    """Compile universal artifact dicts into Elasticsearch query DSL dicts."""

    _SUPPORTED_OPS = {Operator.EQ, Operator.EXISTS, *RANGE_OPERATORS}

    def to_where(self, where: Any) -> Dict[str, Any]:
        """Convert an artifact or universal dict to an Elasticsearch query.

        Args:
            where: artifact, composite or universal dict format

        Returns:
            Elasticsearch query DSL dict
        """
        node = normalize_where_input(where)
        return self._node_to_dict(node)

    def to_expr(self, node: Dict[str, Any]) -> str:
        """Convert universal node to a JSON string."""
        return json.dumps(self._node_to_dict(node), sort_keys=True, default=str)

    def to_search(self, queries: Sequence[Any], filters: Sequence[Any]) -> Dict[str, Any]:
        must = [self.to_where(q) for q in queries]
        filter_ = [self.to_where(f) for f in filters]
        if not must and not filter_:
            return {"match_all": {}}
        bool_query: Dict[str, Any] = {}
        if must:
            bool_query["must"] = must
        if filter_:
            bool_query["filter"] = filter_
        return {"bool": bool_query}

    def _node_to_dict(self, node: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively transform node into Elasticsearch query DSL.

        Raises:
            InvalidFieldError: If unsupported operators are used
        """
        if not node:
            return {"match_all": {}}
        if Operator.AND in node:
            return {"bool": {"must": [self._node_to_dict(n) for n in node[Operator.AND]]}}
        if Operator.OR in node:
            return {
                "bool": {
                    "should": [self._node_to_dict(n) for n in node[Operator.OR]],
                    "minimum_should_match": 1,
                }
            }

        clauses: List[Dict[str, Any]] = []
        for field, expr in node.items():
            if not isinstance(expr, dict):
                expr = {Operator.EQ: expr}
            bounds: Dict[str, Any] = {}
            for op, val in expr.items():
                if op not in self._SUPPORTED_OPS:
                    raise InvalidFieldError(
                        field=field,
                        operation="compile",
                        message=f"Operator {op} is not supported. Supported: {', '.join(sorted(self._SUPPORTED_OPS))}",
                    )
                if op == Operator.EQ:
                    clauses.append({"term": {field: val}})
                elif op == Operator.EXISTS:
                    exists = {"exists": {"field": field}}
                    clauses.append(exists if val else {"bool": {"must_not": [exists]}})
                else:
                    bounds[op.lstrip("$")] = val
            if bounds:
                clauses.append({"range": {field: bounds}})

        if len(clauses) == 1:
            return clauses[0]
        return {"bool": {"must": clauses}}


elasticsearch_where = ElasticsearchWhereCompiler()
