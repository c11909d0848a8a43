"""Orchestrates document compilation: YAML → QueryDocument → Select → CQL."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from cqlbuilder.ast.builder import (
    bind_marker,
    column,
    count_all,
    is_column,
    is_column_component,
    is_token,
    is_tuple,
    literal,
    raw,
    raw_term,
    select_from,
)
from cqlbuilder.ast.nodes import BindMarker, LeftHandSide, Relation, Selector, Term
from cqlbuilder.ast.select import Select
from cqlbuilder.errors import QueryDocumentError
from cqlbuilder.models.query import (
    COUNT_ALL,
    STAR,
    QueryDocument,
    RelationSpec,
    SelectorSpec,
    TermSpec,
)
from cqlbuilder.parser.loader import QueryLoader
from cqlbuilder.renderer import CqlRenderer

logger = logging.getLogger("cqlbuilder.compiler")


@dataclass
class CompilationResult:
    """The result of compiling a query document."""

    cql: str
    statement: Select
    pretty: bool = False


class CompilationPipeline:
    """Orchestrates: raw document → validation → statement → CQL text."""

    def __init__(self, loader: QueryLoader | None = None) -> None:
        self._loader = loader or QueryLoader()

    def compile_file(self, path: Path, pretty: bool = False) -> CompilationResult:
        logger.info("Compiling query document %s", path)
        return self.compile_raw(self._loader.load(path), pretty=pretty)

    def compile_string(self, content: str, pretty: bool = False) -> CompilationResult:
        return self.compile_raw(self._loader.load_string(content), pretty=pretty)

    def compile_raw(self, raw_document: dict[str, Any], pretty: bool = False) -> CompilationResult:
        """Validate a plain mapping and compile it."""
        try:
            document = QueryDocument.model_validate(raw_document)
        except ValidationError as exc:
            errors = [
                f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
                for err in exc.errors()
            ]
            logger.warning("Query document validation failed: %s", errors)
            raise QueryDocumentError("Query document is invalid", errors=errors) from exc
        return self.compile(document, pretty=pretty)

    def compile(self, document: QueryDocument, pretty: bool = False) -> CompilationResult:
        """Build the statement for ``document`` and render it."""
        statement = self.build_statement(document)
        cql = CqlRenderer(pretty=pretty).render(statement)
        logger.debug("Compiled %s to: %s", document.table, cql)
        return CompilationResult(cql=cql, statement=statement, pretty=pretty)

    def build_statement(self, document: QueryDocument) -> Select:
        if document.keyspace is not None:
            statement = select_from(document.keyspace, document.table)
        else:
            statement = select_from(document.table)

        if document.select == STAR:
            statement = statement.all()
        elif document.select == COUNT_ALL:
            statement = statement.count_all()
        else:
            statement = statement.selectors(*(_to_selector(s) for s in document.select))

        statement = statement.where(*(_to_relation(r) for r in document.where))

        if document.limit is not None:
            if isinstance(document.limit, TermSpec):
                limit: int | BindMarker = bind_marker(document.limit.bind)
            else:
                limit = document.limit
            statement = statement.limit(limit)

        if document.allow_filtering:
            statement = statement.allow_filtering()
        return statement


def _to_term(spec: TermSpec) -> Term:
    match spec.kind:
        case "bind":
            return bind_marker(spec.bind)
        case "raw":
            return raw_term(spec.raw or "")
        case _:
            return literal(spec.literal)


def _to_selector(spec: SelectorSpec) -> Selector:
    selector: Selector
    if spec.column is not None:
        selector = column(spec.column)
    elif spec.raw is not None:
        selector = raw(spec.raw)
    else:
        selector = count_all()
    if spec.alias is not None:
        selector = selector.as_(spec.alias)
    return selector


def _to_relation(spec: RelationSpec) -> Relation:
    lhs: LeftHandSide
    if spec.column is not None:
        if spec.key is not None:
            lhs = is_column_component(spec.column, _to_term(spec.key))
        else:
            column_lhs = is_column(spec.column)
            if spec.op == "IS NOT NULL":
                return column_lhs.is_not_null()
            lhs = column_lhs
    elif spec.columns is not None:
        lhs = is_tuple(*spec.columns)
    else:
        lhs = is_token(*(spec.token or []))

    if spec.values is not None:
        return lhs.in_(*(_to_term(v) for v in spec.values))
    if spec.value is None:
        raise QueryDocumentError(f"Relation with operator {spec.op} is missing a value")
    return lhs.build(spec.op, _to_term(spec.value))
