"""
Tests for engine compilers: artifacts and universal dicts compile to engine syntax.
"""

import json
from decimal import Decimal

import pytest

from constraintkit import greater_than, less_than
from constraintkit.exceptions import InvalidFieldError
from constraintkit.querydsl.artifacts import Bound, Missing, Range, Term
from constraintkit.querydsl.compilers.elasticsearch import ElasticsearchWhereCompiler
from constraintkit.querydsl.compilers.sql import SqlWhereCompiler
from constraintkit.querydsl.compilers.utils import (
    format_value_sql,
    merge_nodes,
    normalize_where_input,
    quote_identifier,
)

es = ElasticsearchWhereCompiler()
sql = SqlWhereCompiler()

BACKENDS = [("elasticsearch", es), ("sql", sql)]


class TestElasticsearch:
    def test_term(self):
        assert es.to_where(Term(field="category", value="tech")) == {"term": {"category": "tech"}}

    def test_range(self):
        artifact = less_than("price", 5).including().render_as_query()
        assert es.to_where(artifact) == {"range": {"price": {"lte": 5}}}

    def test_range_bounds_merged(self):
        node = {"price": {"$gt": 1, "$lt": 9}}
        assert es.to_where(node) == {"range": {"price": {"gt": 1, "lt": 9}}}

    def test_missing(self):
        assert es.to_where(Missing(field="color")) == {
            "bool": {"must_not": [{"exists": {"field": "color"}}]}
        }

    def test_exists(self):
        assert es.to_where({"color": {"$exists": True}}) == {"exists": {"field": "color"}}

    def test_or_empty(self):
        artifact = greater_than("stock", 0).or_empty().render_as_filter()
        assert es.to_where(artifact) == {
            "bool": {
                "should": [
                    {"range": {"stock": {"gt": 0}}},
                    {"bool": {"must_not": [{"exists": {"field": "stock"}}]}},
                ],
                "minimum_should_match": 1,
            }
        }

    def test_and(self):
        node = {"$and": [{"a": {"$eq": 1}}, {"b": {"$gte": 2}}]}
        assert es.to_where(node) == {"bool": {"must": [{"term": {"a": 1}}, {"range": {"b": {"gte": 2}}}]}}

    def test_several_fields(self):
        assert es.to_where({"a": 1, "b": {"$eq": 2}}) == {"bool": {"must": [{"term": {"a": 1}}, {"term": {"b": 2}}]}}

    def test_empty(self):
        assert es.to_where({}) == {"match_all": {}}

    def test_to_expr_is_json(self):
        assert json.loads(es.to_expr({"a": {"$eq": 1}})) == {"term": {"a": 1}}

    def test_to_search_separates_queries_and_filters(self):
        search = es.to_search([Term(field="a", value=1)], [Missing(field="b")])
        assert search == {
            "bool": {
                "must": [{"term": {"a": 1}}],
                "filter": [{"bool": {"must_not": [{"exists": {"field": "b"}}]}}],
            }
        }

    def test_to_search_empty(self):
        assert es.to_search([], []) == {"match_all": {}}

    def test_unknown_operator(self):
        with pytest.raises(InvalidFieldError):
            es.to_where({"a": {"$regex": "x"}})


class TestSql:
    def test_term(self):
        assert sql.to_where(Term(field="category", value="tech")) == "\"category\" = 'tech'"

    def test_range(self):
        assert sql.to_where(Range(field="price", bound=Bound.GTE, value=10)) == '"price" >= 10'

    def test_decimal_is_numeric(self):
        artifact = less_than("d", Decimal("1.5")).as_filter().render_as_filter()
        assert sql.to_where(artifact) == '"d" < 1.5'

    def test_missing(self):
        assert sql.to_where(Missing(field="color")) == '"color" IS NULL'

    def test_exists(self):
        assert sql.to_where({"color": {"$exists": True}}) == '"color" IS NOT NULL'

    def test_or_empty(self):
        artifact = less_than("price", 5).or_empty().render_as_filter()
        assert sql.to_where(artifact) == '("price" < 5 OR "price" IS NULL)'

    def test_and_with_or(self):
        node = {"$and": [{"a": {"$eq": 1}}, {"$or": [{"b": {"$lt": 2}}, {"b": {"$exists": False}}]}]}
        assert sql.to_where(node) == '"a" = 1 AND ("b" < 2 OR "b" IS NULL)'

    def test_empty(self):
        assert sql.to_where({}) == "TRUE"

    def test_to_search_ands_everything(self):
        assert sql.to_search([Term(field="a", value=1)], [Missing(field="b")]) == '"a" = 1 AND "b" IS NULL'

    def test_unknown_operator(self):
        with pytest.raises(InvalidFieldError):
            sql.to_where({"a": {"$in": [1]}})


@pytest.mark.parametrize("name,compiler", BACKENDS)
def test_compiler_accepts_artifact_and_dict(name, compiler):
    artifact = Term(field="category", value="tech")
    assert compiler.to_where(artifact) == compiler.to_where(artifact.to_dict())


@pytest.mark.parametrize("name,compiler", BACKENDS)
def test_compiler_rejects_invalid(name, compiler):
    with pytest.raises(TypeError):
        compiler.to_where(["invalid"])


class TestUtils:
    def test_normalize_where_input(self):
        assert normalize_where_input(Missing(field="a")) == {"a": {"$exists": False}}
        assert normalize_where_input({"a": 1}) == {"a": 1}
        with pytest.raises(TypeError):
            normalize_where_input("a = 1")

    def test_merge_nodes(self):
        assert merge_nodes([]) == {}
        assert merge_nodes([{}, {"a": 1}]) == {"a": 1}
        assert merge_nodes([{"a": 1}, {"b": 2}]) == {"$and": [{"a": 1}, {"b": 2}]}

    def test_quote_identifier(self):
        assert quote_identifier("name") == '"name"'
        assert quote_identifier("info.lang") == '"info"."lang"'
        assert quote_identifier('we"ird') == '"we""ird"'

    def test_format_value_sql(self):
        assert format_value_sql(None) == "NULL"
        assert format_value_sql(True) == "TRUE"
        assert format_value_sql(3) == "3"
        assert format_value_sql(Decimal("2.50")) == "2.50"
        assert format_value_sql("O'Brien") == "'O''Brien'"
        assert format_value_sql([1, "a"]) == "(1, 'a')"
