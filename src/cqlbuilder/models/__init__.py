"""Pydantic models for declarative query documents."""

from cqlbuilder.models.query import QueryDocument, RelationSpec, SelectorSpec, TermSpec

__all__ = [
    "QueryDocument",
    "RelationSpec",
    "SelectorSpec",
    "TermSpec",
]
