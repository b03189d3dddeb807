"""
ⒸAngelaMos | 2025
query.py
"""

import operator
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID

from sqlalchemy import Column, Select

from socialhub.config import settings
from socialhub.core.constants import SENSITIVE_FIELDS
from socialhub.core.exceptions import ValidationError


RESERVED_PARAMS = frozenset({"page", "limit", "sort", "q"})

FILTER_OPERATORS: dict[str,
                       Callable[[Any,
                                 Any],
                                Any]] = {
                                    "eq": operator.eq,
                                    "gte": operator.ge,
                                    "gt": operator.gt,
                                    "lte": operator.le,
                                    "lt": operator.lt,
                                }

_FILTER_KEY = re.compile(r"^(?P<field>[a-z_]+)(?:\[(?P<op>gte|gt|lte|lt)\])?$")

DEFAULT_SORT = ("-created_at", )


@dataclass(frozen = True)
class FilterClause:
    """
    One field comparison taken from the query string
    """
    field: str
    op: str
    value: str


def _positive_int(raw: str | None, default: int) -> int:
    try:
        value = int(raw) if raw is not None else default
    except ValueError:
        return default
    return value if value > 0 else default


def _coerce(column: Column, raw: str) -> Any:
    try:
        python_type = column.type.python_type
    except NotImplementedError:
        return raw

    try:
        if python_type is bool:
            lowered = raw.lower()
            if lowered not in {"true", "false", "1", "0"}:
                raise ValueError(raw)
            return lowered in {"true", "1"}
        if python_type is datetime:
            return datetime.fromisoformat(raw)
        if python_type is UUID:
            return UUID(raw)
        if issubclass(python_type, Enum):
            return python_type(raw)
        return python_type(raw)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid {column.name}: {raw}.") from e


@dataclass(frozen = True)
class ListQuery:
    """
    Filtering, sorting and pagination parsed from a query string

    Only fields a model lists in FILTERABLE_FIELDS are honoured
    """
    page: int = 1
    size: int = 20
    sort: tuple[str, ...] = DEFAULT_SORT
    filters: tuple[FilterClause, ...] = field(default_factory = tuple)

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "ListQuery":
        page = _positive_int(params.get("page"), 1)
        size = min(
            _positive_int(params.get("limit"),
                          settings.PAGINATION_DEFAULT_SIZE),
            settings.PAGINATION_MAX_SIZE,
        )
        sort = tuple(
            part.strip() for part in (params.get("sort") or "").split(",")
            if part.strip()
        ) or DEFAULT_SORT

        filters = []
        for key, value in params.items():
            if key in RESERVED_PARAMS:
                continue
            match = _FILTER_KEY.match(key)
            if match is None:
                continue
            filters.append(
                FilterClause(
                    field = match["field"],
                    op = match["op"] or "eq",
                    value = value,
                )
            )

        return cls(
            page = page,
            size = size,
            sort = sort,
            filters = tuple(filters),
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    @staticmethod
    def _column(model: Any, name: str) -> Column | None:
        if name in SENSITIVE_FIELDS:
            return None
        if name not in getattr(model, "FILTERABLE_FIELDS", ()):
            return None
        return model.__table__.columns.get(name)

    def where_clauses(self, model: Any) -> list[Any]:
        """
        SQL conditions for the whitelisted filters
        """
        clauses = []
        for clause in self.filters:
            column = self._column(model, clause.field)
            if column is None:
                continue
            compare = FILTER_OPERATORS[clause.op]
            clauses.append(compare(column, _coerce(column, clause.value)))
        return clauses

    def order_by(self, model: Any) -> list[Any]:
        """
        ORDER BY terms, newest first when nothing usable was given
        """
        terms = []
        for part in self.sort:
            descending = part.startswith("-")
            column = self._column(model, part.lstrip("-"))
            if column is None:
                continue
            terms.append(column.desc() if descending else column.asc())
        if not terms:
            terms.append(model.__table__.columns["created_at"].desc())
        terms.append(model.__table__.columns["id"].asc())
        return terms

    def apply(self, stmt: Select, model: Any) -> Select:
        """
        Add filters, ordering and the page window to a select
        """
        return (
            stmt.where(*self.where_clauses(model)).order_by(
                *self.order_by(model)
            ).offset(self.offset).limit(self.size)
        )
