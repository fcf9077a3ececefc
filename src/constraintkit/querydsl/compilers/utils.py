"""Compiler utility functions.

Provides helpers for normalizing compiler input, merging universal dict
nodes, quoting identifiers and formatting SQL values.
"""

import numbers
from typing import Any, Dict, List, Sequence, Tuple, Union

from ...constants import Operator


def normalize_where_input(where: Any) -> Dict[str, Any]:
    """Normalize an artifact, composite or dict to universal dict format.

    Args:
        where: object with a `.to_dict()` method, or dict

    Returns:
        Universal dict format ready for compilation

    Raises:
        TypeError: If input is neither an artifact nor a dict
    """
    if hasattr(where, "to_dict") and callable(where.to_dict):
        return where.to_dict()
    elif isinstance(where, dict):
        return where
    else:
        raise TypeError(f"where parameter must be an artifact or dict, got {type(where).__name__}")


def merge_nodes(nodes: Sequence[Dict[str, Any]]) -> Dict[str, Any]:
    """AND-combine universal dict nodes.

    Empty nodes are dropped, a single node is returned unwrapped and no
    nodes at all yield ``{}`` (match everything).
    """
    non_empty = [n for n in nodes if n]
    if not non_empty:
        return {}
    if len(non_empty) == 1:
        return non_empty[0]
    return {Operator.AND: list(non_empty)}


def quote_identifier(name: str) -> str:
    """Quote SQL identifier with double quotes.

    Handles dotted field paths by quoting each segment separately.
    """
    if "." in name:
        return ".".join(quote_identifier(p) for p in name.split("."))
    return '"' + name.replace('"', '""') + '"'


def format_value_sql(v: Union[None, bool, str, int, float, List[Any], Tuple[Any, ...]]) -> str:
    """Format Python value for SQL literal embedding (basic approach).

    Use parameterized queries in production for safety.
    """
    if v is None:
        return "NULL"
    # bool is a subclass of int
    if isinstance(v, bool):
        return "TRUE" if v else "FALSE"
    if isinstance(v, str):
        return "'" + v.replace("'", "''") + "'"
    if isinstance(v, (list, tuple)):
        inner = ", ".join(format_value_sql(x) for x in v)
        return f"({inner})"
    if isinstance(v, numbers.Number):
        return str(v)
    return format_value_sql(str(v))
