"""Immutable CQL AST nodes. All CQL text is produced from these by the renderer."""

from __future__ import annotations

from dataclasses import dataclass, replace

from cqlbuilder.errors import IllegalStateError, InvalidArgumentError
from cqlbuilder.identifier import CqlIdentifier, to_identifier

# ---------------------------------------------------------------------------
# Terms (right-hand sides)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BindMarker:
    """A placeholder filled in at execution time: ``?`` or ``:name``."""

    name: CqlIdentifier | None = None


@dataclass(frozen=True)
class RawTerm:
    """Escape hatch for a CQL fragment emitted verbatim.

    Use sparingly, the text is not validated or escaped.
    """

    text: str


@dataclass(frozen=True)
class Literal:
    """A literal value: number, string, boolean, or NULL."""

    value: str | int | float | bool | None

    @classmethod
    def string(cls, v: str) -> Literal:
        return cls(value=v)

    @classmethod
    def number(cls, v: int | float) -> Literal:
        return cls(value=v)

    @classmethod
    def null(cls) -> Literal:
        return cls(value=None)

    @classmethod
    def boolean(cls, v: bool) -> Literal:
        return cls(value=v)


@dataclass(frozen=True)
class TupleTerm:
    """Parenthesized list of terms, e.g. the right side of ``IN (?,?)``."""

    terms: tuple[Term, ...] = ()


Term = BindMarker | RawTerm | Literal | TupleTerm


# ---------------------------------------------------------------------------
# Relations and their left-hand sides
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Relation:
    """A single WHERE predicate: ``left operator right``.

    ``right`` is only ``None`` for postfix operators such as ``IS NOT NULL``.
    """

    left: LeftHandSide
    operator: str
    right: Term | None = None


class _RelationBuilder:
    """Comparison shortcuts shared by every left-hand side.

    Subclasses implement :meth:`build`, the single place a Relation is made.
    """

    def build(self, operator: str, right: Term) -> Relation:
        raise NotImplementedError

    def eq(self, right: Term) -> Relation:
        return self.build("=", right)

    def ne(self, right: Term) -> Relation:
        return self.build("!=", right)

    def lt(self, right: Term) -> Relation:
        return self.build("<", right)

    def lte(self, right: Term) -> Relation:
        return self.build("<=", right)

    def gt(self, right: Term) -> Relation:
        return self.build(">", right)

    def gte(self, right: Term) -> Relation:
        return self.build(">=", right)

    def in_(self, *terms: Term) -> Relation:
        """``IN ?`` for a single term, ``IN (?,?)`` for several."""
        if not terms:
            raise InvalidArgumentError("IN relation requires at least one term")
        if len(terms) == 1:
            return self.build("IN", terms[0])
        return self.build("IN", TupleTerm(terms=tuple(terms)))


@dataclass(frozen=True)
class ColumnLhs(_RelationBuilder):
    """A bare column: ``"k" = ?``."""

    column: CqlIdentifier

    def build(self, operator: str, right: Term) -> Relation:
        return Relation(left=self, operator=operator, right=right)

    def like(self, right: Term) -> Relation:
        return self.build("LIKE", right)

    def contains(self, right: Term) -> Relation:
        return self.build("CONTAINS", right)

    def contains_key(self, right: Term) -> Relation:
        return self.build("CONTAINS KEY", right)

    def is_not_null(self) -> Relation:
        return Relation(left=self, operator="IS NOT NULL")


@dataclass(frozen=True)
class ColumnComponentLhs(_RelationBuilder):
    """A collection element or map entry: ``"user"['name'] = ?``."""

    column: CqlIdentifier
    component: Term

    def build(self, operator: str, right: Term) -> Relation:
        return Relation(left=self, operator=operator, right=right)


@dataclass(frozen=True)
class MultiColumnLhs(_RelationBuilder):
    """A tuple of columns: ``("c1","c2") IN ?``."""

    columns: tuple[CqlIdentifier, ...]

    def build(self, operator: str, right: Term) -> Relation:
        if not self.columns:
            raise InvalidArgumentError("Tuple relation requires at least one column")
        return Relation(left=self, operator=operator, right=right)


@dataclass(frozen=True)
class TokenLhs(_RelationBuilder):
    """The partition token of columns: ``token("k1","k2") > ?``."""

    columns: tuple[CqlIdentifier, ...]

    def build(self, operator: str, right: Term) -> Relation:
        if not self.columns:
            raise InvalidArgumentError("token() relation requires at least one column")
        return Relation(left=self, operator=operator, right=right)


LeftHandSide = ColumnLhs | ColumnComponentLhs | MultiColumnLhs | TokenLhs


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


class _Aliasable:
    def as_(self, alias: str | CqlIdentifier) -> Selector:
        """Return a copy of this selector with ``alias``; the last alias wins."""
        return replace(self, alias=to_identifier(alias))  # type: ignore[type-var]


@dataclass(frozen=True)
class AllSelector:
    """SELECT *. Cannot be aliased."""

    def as_(self, alias: str | CqlIdentifier) -> Selector:
        raise IllegalStateError("Can't alias the * selector")


@dataclass(frozen=True)
class CountAllSelector(_Aliasable):
    """SELECT count(*)."""

    alias: CqlIdentifier | None = None


@dataclass(frozen=True)
class ColumnSelector(_Aliasable):
    """A named column."""

    column: CqlIdentifier
    alias: CqlIdentifier | None = None


@dataclass(frozen=True)
class RawSelector(_Aliasable):
    """A raw CQL fragment, emitted verbatim."""

    text: str
    alias: CqlIdentifier | None = None


Selector = AllSelector | CountAllSelector | ColumnSelector | RawSelector


def is_star_like(selector: Selector) -> bool:
    """True for the selectors that must be the only entry of a selector list."""
    return isinstance(selector, (AllSelector, CountAllSelector))
