"""End-to-end compilation tests: query document → CQL."""

from __future__ import annotations

from pathlib import Path

import pytest

from cqlbuilder.ast.builder import (
    bind_marker,
    column,
    is_column,
    is_column_component,
    is_token,
    is_tuple,
    literal,
    raw,
    raw_term,
    select_from,
)
from cqlbuilder.compiler.pipeline import CompilationPipeline
from cqlbuilder.errors import IllegalStateError, InvalidArgumentError, QueryDocumentError
from cqlbuilder.models.query import QueryDocument
from tests.conftest import SAMPLE_QUERY_CQL, SAMPLE_QUERY_YAML


class TestEndToEndCompilation:
    def test_sample_document(self, pipeline: CompilationPipeline) -> None:
        result = pipeline.compile_string(SAMPLE_QUERY_YAML)
        assert result.cql == SAMPLE_QUERY_CQL
        assert result.pretty is False

    def test_document_matches_fluent_calls(self, pipeline: CompilationPipeline) -> None:
        expected = (
            select_from("shop", "orders")
            .selectors(column("order_id"), column("Total").as_("amount"), raw("writetime(status)"))
            .where(
                is_token("customer_id").gt(bind_marker("start")),
                is_column_component("tags", raw_term("'gift'")).eq(literal(True)),
                is_tuple("region", "status").in_(bind_marker(), bind_marker()),
                is_column("email").is_not_null(),
            )
            .limit(bind_marker("page_size"))
            .allow_filtering()
        )
        assert pipeline.compile_string(SAMPLE_QUERY_YAML).statement == expected

    def test_pretty(self, pipeline: CompilationPipeline) -> None:
        result = pipeline.compile_string(SAMPLE_QUERY_YAML, pretty=True)
        assert result.cql.startswith("SELECT order_id, total AS amount, writetime(status)")
        assert "FROM shop.orders" in result.cql
        assert "token(customer_id) > :start" in result.cql
        assert result.pretty is True

    def test_compile_file(self, pipeline: CompilationPipeline, tmp_path: Path) -> None:
        path = tmp_path / "q.yaml"
        path.write_text(SAMPLE_QUERY_YAML, encoding="utf-8")
        assert pipeline.compile_file(path).cql == SAMPLE_QUERY_CQL

    def test_star_and_count(self, pipeline: CompilationPipeline) -> None:
        assert pipeline.compile_raw({"table": "foo", "select": "*"}).cql == 'SELECT * FROM "foo"'
        result = pipeline.compile_raw({"table": "foo", "select": "count(*)"})
        assert result.cql == 'SELECT count(*) FROM "foo"'

    def test_aliased_count(self, pipeline: CompilationPipeline) -> None:
        result = pipeline.compile_raw(
            {"table": "foo", "select": [{"count_all": True, "alias": "total"}]}
        )
        assert result.cql == 'SELECT count(*) AS "total" FROM "foo"'

    def test_mixed_selector_list(self, pipeline: CompilationPipeline) -> None:
        yaml = (
            "keyspace: ks\n"
            "table: foo\n"
            "select:\n"
            "  - column: bar\n"
            "    alias: b\n"
            '  - raw: "a,b"\n'
            '  - raw: "writetime(bar)"\n'
            "    alias: written\n"
            "limit: 10\n"
        )
        result = pipeline.compile_string(yaml)
        assert result.cql == (
            'SELECT "bar" AS "b", a,b, writetime(bar) AS "written" FROM "ks"."foo" LIMIT 10'
        )

    def test_integer_limit(self, pipeline: CompilationPipeline) -> None:
        doc = QueryDocument(table="foo", select="*", limit=25)
        assert pipeline.compile(doc).cql == 'SELECT * FROM "foo" LIMIT 25'

    def test_anonymous_limit_marker(self, pipeline: CompilationPipeline) -> None:
        result = pipeline.compile_raw({"table": "foo", "select": "*", "limit": {"bind": None}})
        assert result.cql == 'SELECT * FROM "foo" LIMIT ?'

    def test_single_in_value(self, pipeline: CompilationPipeline) -> None:
        result = pipeline.compile_raw(
            {
                "table": "foo",
                "select": "*",
                "where": [{"column": "k", "op": "IN", "value": {"bind": "ks"}}],
            }
        )
        assert result.cql == 'SELECT * FROM "foo" WHERE "k" IN :"ks"'


class TestCompilationErrors:
    def test_invalid_document_lists_errors(self, pipeline: CompilationPipeline) -> None:
        with pytest.raises(QueryDocumentError) as exc_info:
            pipeline.compile_raw({"select": "nope"})
        errors = exc_info.value.errors
        assert any(e.startswith("table") for e in errors)
        assert any(e.startswith("select") for e in errors)

    def test_star_mixed_with_count(self, pipeline: CompilationPipeline) -> None:
        with pytest.raises(InvalidArgumentError):
            pipeline.compile_raw(
                {"table": "foo", "select": [{"column": "a"}, {"count_all": True}]}
            )

    def test_negative_limit(self, pipeline: CompilationPipeline) -> None:
        with pytest.raises(InvalidArgumentError):
            pipeline.compile_raw({"table": "foo", "select": "*", "limit": -5})

    def test_empty_token(self, pipeline: CompilationPipeline) -> None:
        with pytest.raises(InvalidArgumentError):
            pipeline.compile_raw(
                {
                    "table": "foo",
                    "select": "*",
                    "where": [{"token": [], "op": "=", "value": {"bind": None}}],
                }
            )

    def test_render_without_selectors_unreachable_from_documents(self) -> None:
        with pytest.raises(IllegalStateError):
            select_from("foo").as_cql()
