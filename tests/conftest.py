"""Shared test fixtures for cqlbuilder."""

from __future__ import annotations

import pytest

from cqlbuilder.ast.builder import select_from
from cqlbuilder.ast.select import Select
from cqlbuilder.compiler.pipeline import CompilationPipeline
from cqlbuilder.parser.loader import QueryLoader
from cqlbuilder.renderer import CqlRenderer


@pytest.fixture
def foo() -> Select:
    """A fresh statement on table ``foo`` with no selectors yet."""
    return select_from("foo")


@pytest.fixture
def renderer() -> CqlRenderer:
    return CqlRenderer()


@pytest.fixture
def pretty_renderer() -> CqlRenderer:
    return CqlRenderer(pretty=True)


@pytest.fixture
def loader() -> QueryLoader:
    return QueryLoader()


@pytest.fixture
def pipeline(loader: QueryLoader) -> CompilationPipeline:
    return CompilationPipeline(loader)


SAMPLE_QUERY_YAML = """\
keyspace: shop
table: orders
select:
  - column: order_id
  - column: Total
    alias: amount
  - raw: "writetime(status)"
where:
  - token: [customer_id]
    op: ">"
    value: {bind: start}
  - column: tags
    key: {raw: "'gift'"}
    op: "="
    value: {literal: true}
  - columns: [region, status]
    op: in
    values:
      - {bind: null}
      - {bind: null}
  - column: email
    op: is not null
limit: {bind: page_size}
allow_filtering: true
"""

SAMPLE_QUERY_CQL = (
    'SELECT "order_id", "total" AS "amount", writetime(status) '
    'FROM "shop"."orders" '
    'WHERE token("customer_id") > :"start" '
    "AND \"tags\"['gift'] = true "
    'AND ("region","status") IN (?,?) '
    'AND "email" IS NOT NULL '
    'LIMIT :"page_size" '
    "ALLOW FILTERING"
)
