"""Render a CQL AST to query text."""

from __future__ import annotations

import math

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
from cqlbuilder.errors import IllegalStateError
from cqlbuilder.identifier import CqlIdentifier


class CqlRenderer:
    """Renders statements to CQL.

    ``pretty=False`` (the default) produces the canonical form with every
    identifier double-quoted. ``pretty=True`` drops quotes where they are not
    needed; clause order, operators and spacing are identical in both modes.
    """

    def __init__(self, pretty: bool = False) -> None:
        self._pretty = pretty

    @property
    def pretty(self) -> bool:
        return self._pretty

    def render(self, node: Select) -> str:
        """Render a complete SELECT statement."""
        if not node.selector_list:
            raise IllegalStateError("Tried to render a SELECT with no selectors")

        parts: list[str] = []

        selectors = ", ".join(self.render_selector(s) for s in node.selector_list)
        parts.append(f"SELECT {selectors}")

        parts.append(f"FROM {self.render_table(node)}")

        if node.relations:
            relations = " AND ".join(self.render_relation(r) for r in node.relations)
            parts.append(f"WHERE {relations}")

        if node.row_limit is not None:
            parts.append(f"LIMIT {self.render_limit(node.row_limit)}")

        if node.filtering_allowed:
            parts.append("ALLOW FILTERING")

        return " ".join(parts)

    def render_table(self, node: Select) -> str:
        table = self.render_identifier(node.table)
        if node.keyspace is not None:
            return f"{self.render_identifier(node.keyspace)}.{table}"
        return table

    def render_limit(self, limit: int | BindMarker) -> str:
        if isinstance(limit, BindMarker):
            return self.render_term(limit)
        return str(limit)

    def render_identifier(self, identifier: CqlIdentifier) -> str:
        return identifier.as_cql(self._pretty)

    def render_selector(self, selector: Selector) -> str:
        match selector:
            case AllSelector():
                return "*"
            case CountAllSelector(alias=alias):
                return self._with_alias("count(*)", alias)
            case ColumnSelector(column=column, alias=alias):
                return self._with_alias(self.render_identifier(column), alias)
            case RawSelector(text=text, alias=alias):
                return self._with_alias(text, alias)
            case _:
                raise ValueError(f"Unknown selector type: {type(selector).__name__}")

    def _with_alias(self, sql: str, alias: CqlIdentifier | None) -> str:
        if alias is None:
            return sql
        return f"{sql} AS {self.render_identifier(alias)}"

    def render_relation(self, relation: Relation) -> str:
        left = self.render_left_hand_side(relation.left)
        if relation.right is None:
            return f"{left} {relation.operator}"
        return f"{left} {relation.operator} {self.render_term(relation.right)}"

    def render_left_hand_side(self, lhs: LeftHandSide) -> str:
        match lhs:
            case ColumnLhs(column=column):
                return self.render_identifier(column)
            case ColumnComponentLhs(column=column, component=component):
                return f"{self.render_identifier(column)}[{self.render_term(component)}]"
            case MultiColumnLhs(columns=columns):
                return f"({join_with_comma(columns, self._pretty)})"
            case TokenLhs(columns=columns):
                return f"token({join_with_comma(columns, self._pretty)})"
            case _:
                raise ValueError(f"Unknown left-hand side type: {type(lhs).__name__}")

    def render_term(self, term: Term) -> str:
        match term:
            case BindMarker(name=None):
                return "?"
            case BindMarker(name=name) if name is not None:
                return f":{self.render_identifier(name)}"
            case RawTerm(text=text):
                return text
            case Literal(value=None):
                return "NULL"
            case Literal(value=True):
                return "true"
            case Literal(value=False):
                return "false"
            case Literal(value=v) if isinstance(v, str):
                escaped = v.replace("'", "''")
                return f"'{escaped}'"
            case Literal(value=float() as v) if math.isnan(v):
                return "NaN"
            case Literal(value=float() as v) if math.isinf(v):
                return "Infinity" if v > 0 else "-Infinity"
            case Literal(value=v):
                return str(v)
            case TupleTerm(terms=terms):
                return "(" + ",".join(self.render_term(t) for t in terms) + ")"
            case _:
                raise ValueError(f"Unknown term type: {type(term).__name__}")
