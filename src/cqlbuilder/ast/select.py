"""The immutable SELECT statement and its fluent builder methods.

Every builder call returns a new :class:`Select`; earlier snapshots are never
modified, so partially built statements can be shared and extended freely::

    base = select_from("foo").all()
    by_key = base.where(is_column("k").eq(bind_marker()))
    base.as_cql()    # SELECT * FROM "foo"
    by_key.as_cql()  # SELECT * FROM "foo" WHERE "k" = ?
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Self

from cqlbuilder.ast.nodes import (
    AllSelector,
    BindMarker,
    ColumnSelector,
    CountAllSelector,
    RawSelector,
    Relation,
    Selector,
    is_star_like,
)
from cqlbuilder.errors import IllegalStateError, InvalidArgumentError
from cqlbuilder.identifier import CqlIdentifier, to_identifier


@dataclass(frozen=True)
class Select:
    """A SELECT statement snapshot."""

    table: CqlIdentifier
    keyspace: CqlIdentifier | None = None
    selector_list: tuple[Selector, ...] = ()
    relations: tuple[Relation, ...] = ()
    row_limit: int | BindMarker | None = None
    filtering_allowed: bool = False

    # -- selectors -----------------------------------------------------------

    def all(self) -> Self:
        """Select every column, discarding any selector added so far."""
        return replace(self, selector_list=(AllSelector(),))

    def count_all(self) -> Self:
        """Select ``count(*)``, discarding any selector added so far."""
        return replace(self, selector_list=(CountAllSelector(),))

    def column(self, name: str | CqlIdentifier) -> Self:
        return self.selector(ColumnSelector(column=to_identifier(name)))

    def raw(self, text: str) -> Self:
        return self.selector(RawSelector(text=text))

    def selector(self, selector: Selector) -> Self:
        """Add a single selector; ``*`` and ``count(*)`` replace the whole list."""
        if is_star_like(selector):
            return replace(self, selector_list=(selector,))
        return replace(self, selector_list=self._named_selectors() + (selector,))

    def selectors(self, *selectors: Selector) -> Self:
        """Add several selectors at once.

        Raises:
            InvalidArgumentError: If ``*`` or ``count(*)`` is mixed with other
                selectors in the same call.
        """
        if not selectors:
            return self
        if len(selectors) == 1:
            return self.selector(selectors[0])
        for selector in selectors:
            if is_star_like(selector):
                raise InvalidArgumentError(
                    f"Can't mix {type(selector).__name__} with other selectors"
                )
        return replace(self, selector_list=self._named_selectors() + tuple(selectors))

    def as_(self, alias: str | CqlIdentifier) -> Self:
        """Alias the most recently added selector.

        Calling it again replaces the previous alias.

        Raises:
            IllegalStateError: If there is no selector yet, or the last one is ``*``.
        """
        if not self.selector_list:
            raise IllegalStateError("Can't alias, no selectors have been added yet")
        last = self.selector_list[-1].as_(alias)
        return replace(self, selector_list=self.selector_list[:-1] + (last,))

    def _named_selectors(self) -> tuple[Selector, ...]:
        if len(self.selector_list) == 1 and is_star_like(self.selector_list[0]):
            return ()
        return self.selector_list

    # -- relations -----------------------------------------------------------

    def where(self, *relations: Relation) -> Self:
        """Append relations; all relations of a statement are ANDed in order."""
        return replace(self, relations=self.relations + tuple(relations))

    # -- modifiers -----------------------------------------------------------

    def limit(self, value: int | BindMarker) -> Self:
        """Set the row limit, replacing any previous one."""
        if not isinstance(value, BindMarker):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgumentError(
                    f"Limit must be an int or a bind marker, got {type(value).__name__}"
                )
            if value < 0:
                raise InvalidArgumentError(f"Limit must be >= 0, got {value}")
        return replace(self, row_limit=value)

    def allow_filtering(self) -> Self:
        return replace(self, filtering_allowed=True)

    # -- rendering -----------------------------------------------------------

    def as_cql(self, pretty: bool = False) -> str:
        """Render this statement, see :class:`cqlbuilder.renderer.CqlRenderer`."""
        from cqlbuilder.renderer import CqlRenderer

        return CqlRenderer(pretty=pretty).render(self)

    def __str__(self) -> str:
        # A statement without selectors is valid while building but has no CQL form
        if not self.selector_list:
            return repr(self)
        return self.as_cql()
