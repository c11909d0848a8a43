"""Exception hierarchy for cqlbuilder.

All public errors inherit from ``CqlBuilderError`` so callers can catch the
base class for any builder-specific failure.
"""

from __future__ import annotations


class CqlBuilderError(Exception):
    """Base exception for all cqlbuilder errors."""


class InvalidArgumentError(CqlBuilderError, ValueError):
    """Raised when a builder call violates a structural precondition.

    Examples: an empty column list for ``token()`` or a tuple relation, or
    mixing the ``*`` selector with other selectors in one call.
    """


class IllegalStateError(CqlBuilderError, RuntimeError):
    """Raised when an operation makes no sense for the current statement.

    Examples: aliasing when no selector was added yet, or aliasing ``*``.
    """


class QueryDocumentError(CqlBuilderError):
    """Raised when a declarative query document cannot be turned into a statement.

    Args:
        message: Human-readable description.
        errors: Individual problems found in the document.
    """

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors: list[str] = errors or []


class YAMLSafetyError(QueryDocumentError):
    """Raised when YAML input violates safety constraints.

    Distinct from parse errors: these indicate potentially malicious input
    (billion-laughs anchors, oversized documents).
    """
