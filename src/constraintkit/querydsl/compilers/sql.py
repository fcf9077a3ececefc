"""SQL where compiler.

Transforms universal artifact dicts into SQL WHERE clauses, for engines
which expose a SQL surface over their documents.

Mapping:
- ``$eq``               -> ``=``
- ``$lt/$lte/$gt/$gte`` -> ``<``, ``<=``, ``>``, ``>=``
- ``$exists``           -> ``IS NOT NULL`` / ``IS NULL``
- ``$or``               -> parenthesized ``OR``
- ``$and``              -> ``AND``
- ``{}``                -> ``TRUE``
"""

from typing import Any, Dict, List

from ...constants import Operator
from ...exceptions import InvalidFieldError
from .base import BaseWhere
from .utils import format_value_sql, normalize_where_input, quote_identifier

__all__ = (
    "SqlWhereCompiler",
    "sql_where",
)


class SqlWhereCompiler(BaseWhere):
    """Compile universal artifact dicts into SQL WHERE clauses."""

    _OP_MAP = {
        Operator.EQ: "=",
        Operator.GT: ">",
        Operator.GTE: ">=",
        Operator.LT: "<",
        Operator.LTE: "<=",
    }

    def to_where(self, where: Any) -> str:
        """Convert an artifact or universal dict to SQL WHERE clause.

        Args:
            where: artifact, composite or universal dict format

        Returns:
            SQL WHERE clause string
        """
        node = normalize_where_input(where)
        return self._node_to_expr(node)

    def to_expr(self, node: Dict[str, Any]) -> str:
        """Convert universal node to SQL WHERE clause (same as to_where)."""
        return self._node_to_expr(node)

    def _node_to_expr(self, node: Dict[str, Any]) -> str:
        """Recursively transform node into SQL WHERE clause."""
        if not node:
            return "TRUE"
        if Operator.AND in node:
            return " AND ".join(self._node_to_expr(x) for x in node[Operator.AND])
        if Operator.OR in node:
            return "(" + " OR ".join(self._node_to_expr(x) for x in node[Operator.OR]) + ")"
        parts: List[str] = []
        for field, expr in node.items():
            if not isinstance(expr, dict):
                expr = {Operator.EQ: expr}
            ident = quote_identifier(field)
            for op, val in expr.items():
                if op == Operator.EXISTS:
                    parts.append(f"{ident} IS NOT NULL" if val else f"{ident} IS NULL")
                    continue
                if op not in self._OP_MAP:
                    raise InvalidFieldError(
                        field=field,
                        operation="compile",
                        message=f"Operator {op} is not supported. Supported: {', '.join(sorted(self._OP_MAP.keys()))}",
                    )
                parts.append(f"{ident} {self._OP_MAP[op]} {format_value_sql(val)}")
        return " AND ".join(parts)


sql_where = SqlWhereCompiler()
