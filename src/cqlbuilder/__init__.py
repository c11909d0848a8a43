"""cqlbuilder: an immutable, fluent builder for CQL SELECT statements.

Public API
----------
``select_from``
    Start a statement; every builder call returns a new immutable ``Select``.

``is_column`` / ``is_column_component`` / ``is_tuple`` / ``is_token``
    Left-hand sides of WHERE relations.

``bind_marker`` / ``raw_term`` / ``literal``
    Right-hand-side terms.

Example::

    from cqlbuilder import bind_marker, is_token, select_from

    stmt = select_from("foo").all().where(is_token("k1", "k2").eq(bind_marker("t")))
    stmt.as_cql()  # SELECT * FROM "foo" WHERE token("k1","k2") = :"t"
"""

from __future__ import annotations

from cqlbuilder.ast.builder import (
    all_,
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
    tuple_of,
)
from cqlbuilder.ast.joiners import join_with_comma
from cqlbuilder.ast.nodes import (
    AllSelector,
    BindMarker,
    ColumnComponentLhs,
    ColumnLhs,
    ColumnSelector,
    CountAllSelector,
    LeftHandSide,
    Literal,
    MultiColumnLhs,
    RawSelector,
    RawTerm,
    Relation,
    Selector,
    Term,
    TokenLhs,
    TupleTerm,
)
from cqlbuilder.ast.select import Select
from cqlbuilder.errors import (
    CqlBuilderError,
    IllegalStateError,
    InvalidArgumentError,
    QueryDocumentError,
    YAMLSafetyError,
)
from cqlbuilder.identifier import CqlIdentifier
from cqlbuilder.renderer import CqlRenderer

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Entry points
    "select_from",
    "all_",
    "count_all",
    "column",
    "raw",
    "is_column",
    "is_column_component",
    "is_tuple",
    "is_token",
    "bind_marker",
    "raw_term",
    "literal",
    "tuple_of",
    "join_with_comma",
    # Nodes
    "Select",
    "Selector",
    "AllSelector",
    "CountAllSelector",
    "ColumnSelector",
    "RawSelector",
    "Relation",
    "LeftHandSide",
    "ColumnLhs",
    "ColumnComponentLhs",
    "MultiColumnLhs",
    "TokenLhs",
    "Term",
    "BindMarker",
    "RawTerm",
    "Literal",
    "TupleTerm",
    "CqlIdentifier",
    # Rendering
    "CqlRenderer",
    # Errors
    "CqlBuilderError",
    "InvalidArgumentError",
    "IllegalStateError",
    "QueryDocumentError",
    "YAMLSafetyError",
]
