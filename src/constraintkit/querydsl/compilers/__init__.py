from .base import BaseWhere
from .elasticsearch import ElasticsearchWhereCompiler, elasticsearch_where
from .sql import SqlWhereCompiler, sql_where

__all__ = (
    "BaseWhere",
    "ElasticsearchWhereCompiler",
    "elasticsearch_where",
    "SqlWhereCompiler",
    "sql_where",
)
