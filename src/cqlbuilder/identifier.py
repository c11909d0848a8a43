"""CQL identifiers: keyspace, table, column and alias names."""

from __future__ import annotations

import re
from dataclasses import dataclass

# Names that may be emitted unquoted in pretty mode.
_UNQUOTED_RE = re.compile(r"[a-z][a-z0-9_]*")

# Reserved CQL keywords; these always need quoting.
RESERVED_KEYWORDS: frozenset[str] = frozenset(
    {
        "add",
        "allow",
        "alter",
        "and",
        "apply",
        "asc",
        "authorize",
        "batch",
        "begin",
        "by",
        "columnfamily",
        "create",
        "delete",
        "desc",
        "describe",
        "drop",
        "entries",
        "execute",
        "from",
        "full",
        "grant",
        "if",
        "in",
        "index",
        "infinity",
        "insert",
        "into",
        "is",
        "keyspace",
        "limit",
        "materialized",
        "mbean",
        "mbeans",
        "modify",
        "nan",
        "norecursive",
        "not",
        "null",
        "of",
        "on",
        "or",
        "order",
        "primary",
        "rename",
        "replace",
        "revoke",
        "schema",
        "select",
        "set",
        "table",
        "to",
        "token",
        "truncate",
        "unlogged",
        "unset",
        "update",
        "use",
        "using",
        "view",
        "where",
        "with",
    }
)


@dataclass(frozen=True)
class CqlIdentifier:
    """An identifier in its internal (case-sensitive) form.

    Build one with :meth:`from_cql` when the text comes from a CQL source
    (unquoted names are case-insensitive and folded to lower case), or with
    :meth:`from_internal` when the exact name is already known.
    """

    internal: str

    @classmethod
    def from_cql(cls, cql: str) -> CqlIdentifier:
        """Parse a name as it would appear in a CQL query string."""
        if len(cql) >= 2 and cql.startswith('"') and cql.endswith('"'):
            return cls(internal=cql[1:-1].replace('""', '"'))
        return cls(internal=cql.lower())

    @classmethod
    def from_internal(cls, internal: str) -> CqlIdentifier:
        return cls(internal=internal)

    def as_internal(self) -> str:
        return self.internal

    def as_cql(self, pretty: bool = False) -> str:
        """Render the identifier for inclusion in a query string.

        Ugly form is always double-quoted. Pretty form drops the quotes when
        the name would parse back to itself unquoted.
        """
        if pretty and self._needs_no_quotes():
            return self.internal
        escaped = self.internal.replace('"', '""')
        return f'"{escaped}"'

    def _needs_no_quotes(self) -> bool:
        return (
            _UNQUOTED_RE.fullmatch(self.internal) is not None
            and self.internal not in RESERVED_KEYWORDS
        )

    def __str__(self) -> str:
        return self.as_cql(pretty=True)


def to_identifier(name: str | CqlIdentifier) -> CqlIdentifier:
    """Coerce a builder argument into an identifier (strings parse as CQL)."""
    if isinstance(name, CqlIdentifier):
        return name
    return CqlIdentifier.from_cql(name)
