"""Helpers for joining rendered identifiers."""

from __future__ import annotations

from collections.abc import Iterable

from cqlbuilder.identifier import CqlIdentifier


def join_with_comma(identifiers: Iterable[CqlIdentifier], pretty: bool) -> str:
    """Render each identifier and join them with a bare comma.

    The separator never carries spaces; ``pretty`` only affects how each
    identifier is quoted.
    """
    return ",".join(identifier.as_cql(pretty) for identifier in identifiers)
