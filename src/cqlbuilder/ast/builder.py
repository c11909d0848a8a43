"""Convenience constructors for statements, selectors, relations and terms."""

from __future__ import annotations

from cqlbuilder.ast.nodes import (
    AllSelector,
    BindMarker,
    ColumnComponentLhs,
    ColumnLhs,
    ColumnSelector,
    CountAllSelector,
    Literal,
    MultiColumnLhs,
    RawSelector,
    RawTerm,
    Term,
    TokenLhs,
    TupleTerm,
)
from cqlbuilder.ast.select import Select
from cqlbuilder.identifier import CqlIdentifier, to_identifier

Name = str | CqlIdentifier


def select_from(keyspace_or_table: Name, table: Name | None = None) -> Select:
    """Start a SELECT on ``table`` or on ``keyspace.table``.

    String names are parsed as CQL: ``"foo"`` and ``"FOO"`` both mean ``foo``,
    while ``'"Foo"'`` keeps its case.
    """
    if table is None:
        return Select(table=to_identifier(keyspace_or_table))
    return Select(table=to_identifier(table), keyspace=to_identifier(keyspace_or_table))


# Selectors


def all_() -> AllSelector:
    return AllSelector()


def count_all() -> CountAllSelector:
    return CountAllSelector()


def column(name: Name) -> ColumnSelector:
    return ColumnSelector(column=to_identifier(name))


def raw(text: str) -> RawSelector:
    return RawSelector(text=text)


# Relations


def is_column(name: Name) -> ColumnLhs:
    """Start a relation on a single column."""
    return ColumnLhs(column=to_identifier(name))


def is_column_component(name: Name, component: Term) -> ColumnComponentLhs:
    """Start a relation on an element of a collection column, ``col[component]``."""
    return ColumnComponentLhs(column=to_identifier(name), component=component)


def is_tuple(*names: Name) -> MultiColumnLhs:
    """Start a relation on a tuple of columns, ``(c1,c2)``."""
    return MultiColumnLhs(columns=tuple(to_identifier(n) for n in names))


def is_token(*names: Name) -> TokenLhs:
    """Start a relation on the token of the given columns, ``token(k1,k2)``."""
    return TokenLhs(columns=tuple(to_identifier(n) for n in names))


# Terms


def bind_marker(name: Name | None = None) -> BindMarker:
    """An anonymous (``?``) or named (``:name``) bind marker."""
    if name is None:
        return BindMarker()
    return BindMarker(name=to_identifier(name))


def raw_term(text: str) -> RawTerm:
    return RawTerm(text=text)


def literal(value: str | int | float | bool | None) -> Literal:
    return Literal(value=value)


def tuple_of(*terms: Term) -> TupleTerm:
    return TupleTerm(terms=tuple(terms))
