"""Declarative query documents (YAML/JSON) describing a SELECT statement."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

STAR = "*"
COUNT_ALL = "count(*)"

# Operators that take no right-hand side.
POSTFIX_OPERATORS = frozenset({"IS NOT NULL"})


class TermSpec(BaseModel):
    """A right-hand-side value.

    Exactly one key is set: ``bind`` (``null`` for an anonymous ``?``),
    ``raw`` for a verbatim fragment, or ``literal``.
    """

    bind: str | None = None
    raw: str | None = None
    literal: str | int | float | bool | None = None

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def _exactly_one_kind(self) -> TermSpec:
        if len(self.model_fields_set) != 1:
            raise ValueError("a term needs exactly one of 'bind', 'raw' or 'literal'")
        return self

    @property
    def kind(self) -> str:
        return next(iter(self.model_fields_set))


class SelectorSpec(BaseModel):
    """One entry of the ``select`` list."""

    column: str | None = None
    raw: str | None = None
    count_all: bool = Field(False, alias="countAll")
    alias: str | None = None

    model_config = {"populate_by_name": True, "extra": "forbid"}

    @model_validator(mode="after")
    def _exactly_one_kind(self) -> SelectorSpec:
        kinds = [self.column is not None, self.raw is not None, self.count_all]
        if sum(kinds) != 1:
            raise ValueError("a selector needs exactly one of 'column', 'raw' or 'count_all'")
        return self


class RelationSpec(BaseModel):
    """One WHERE predicate.

    The subject is one of ``column`` (optionally with a collection ``key``),
    ``columns`` (a tuple) or ``token``.
    """

    column: str | None = None
    key: TermSpec | None = None
    columns: list[str] | None = None
    token: list[str] | None = None
    op: str
    value: TermSpec | None = None
    values: list[TermSpec] | None = None

    model_config = {"extra": "forbid"}

    @field_validator("op")
    @classmethod
    def _normalize_op(cls, v: str) -> str:
        return " ".join(v.split()).upper()

    @model_validator(mode="after")
    def _check_shape(self) -> RelationSpec:
        subjects = [self.column is not None, self.columns is not None, self.token is not None]
        if sum(subjects) != 1:
            raise ValueError("a relation needs exactly one of 'column', 'columns' or 'token'")
        if self.key is not None and self.column is None:
            raise ValueError("'key' is only allowed together with 'column'")
        if self.op in POSTFIX_OPERATORS:
            if self.column is None or self.key is not None:
                raise ValueError(f"'{self.op}' only applies to a plain 'column'")
            if self.value is not None or self.values is not None:
                raise ValueError(f"'{self.op}' takes no value")
            return self
        if (self.value is None) == (self.values is None):
            raise ValueError("a relation needs exactly one of 'value' or 'values'")
        if self.values is not None and self.op != "IN":
            raise ValueError("'values' is only allowed with the IN operator")
        return self


class QueryDocument(BaseModel):
    """A complete SELECT statement description."""

    keyspace: str | None = None
    table: str
    select: str | list[SelectorSpec]
    where: list[RelationSpec] = []
    limit: int | TermSpec | None = None
    allow_filtering: bool = Field(False, alias="allowFiltering")

    model_config = {"populate_by_name": True, "extra": "forbid"}

    @field_validator("select")
    @classmethod
    def _check_select(cls, v: Any) -> Any:
        if isinstance(v, str) and v not in (STAR, COUNT_ALL):
            raise ValueError(f"select must be '{STAR}', '{COUNT_ALL}' or a list of selectors")
        if isinstance(v, list) and not v:
            raise ValueError("select list must not be empty")
        return v

    @field_validator("limit")
    @classmethod
    def _check_limit(cls, v: Any) -> Any:
        if isinstance(v, TermSpec) and v.kind != "bind":
            raise ValueError("limit must be an integer or a bind marker")
        return v
