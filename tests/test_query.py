"""
ⒸAngelaMos | 2025
test_query.py
"""

import pytest

from socialhub.config import settings
from socialhub.core.exceptions import ValidationError
from socialhub.core.query import (
    DEFAULT_SORT,
    FilterClause,
    ListQuery,
)
from socialhub.models import Post, User


def test_defaults():
    query = ListQuery.from_params({})

    assert query.page == 1
    assert query.size == settings.PAGINATION_DEFAULT_SIZE
    assert query.sort == DEFAULT_SORT
    assert query.filters == ()
    assert query.offset == 0


def test_page_and_limit_are_sanitised():
    query = ListQuery.from_params({"page": "3", "limit": "100000"})
    assert query.page == 3
    assert query.size == settings.PAGINATION_MAX_SIZE
    assert query.offset == 2 * settings.PAGINATION_MAX_SIZE

    bad = ListQuery.from_params({"page": "-1", "limit": "abc"})
    assert bad.page == 1
    assert bad.size == settings.PAGINATION_DEFAULT_SIZE


def test_filters_parsed_with_operators():
    query = ListQuery.from_params(
        {
            "created_at[gte]": "2024-01-01T00:00:00",
            "role": "admin",
            "sort": "-username,name",
            "q": "ignored",
        }
    )

    assert FilterClause("created_at", "gte", "2024-01-01T00:00:00") in query.filters
    assert FilterClause("role", "eq", "admin") in query.filters
    assert len(query.filters) == 2
    assert query.sort == ("-username", "name")


def test_only_whitelisted_fields_reach_sql():
    query = ListQuery.from_params(
        {
            "username": "alice",
            "hashed_password": "x",
            "email": "alice@example.com",
            "password_reset_token_hash": "abc",
            "nonsense": "1",
        }
    )

    clauses = query.where_clauses(User)
    assert len(clauses) == 1
    assert "username" in str(clauses[0])


def test_values_are_coerced_to_column_types():
    query = ListQuery.from_params({"is_active": "false", "role": "admin"})
    assert len(query.where_clauses(User)) == 2

    with pytest.raises(ValidationError):
        ListQuery.from_params({"is_active": "maybe"}).where_clauses(User)
    with pytest.raises(ValidationError):
        ListQuery.from_params({"user_id": "nope"}).where_clauses(Post)


def test_order_by_falls_back_to_newest_first():
    terms = ListQuery.from_params({"sort": "hashed_password,bogus"}).order_by(User)
    rendered = [str(term) for term in terms]

    assert rendered == ["users.created_at DESC", "users.id ASC"]


def test_order_by_honours_direction():
    terms = ListQuery.from_params({"sort": "-username,name"}).order_by(User)
    rendered = [str(term) for term in terms]

    assert rendered == ["users.username DESC", "users.name ASC", "users.id ASC"]


def test_field_selection_is_not_a_filter():
    query = ListQuery.from_params({"fields": "caption,image", "limit": "5"})

    assert query.where_clauses(Post) == []
    assert query.size == 5
