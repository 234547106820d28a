"""Unit tests for the SQL issued by PostgresPostRepository.

Statements are captured by a recording session and compiled for the
PostgreSQL dialect, so no database is needed.
"""

import pytest
from sqlalchemy import select
from sqlalchemy.dialects import postgresql

from blog.domain.service import build_post_query
from blog.persistence.repository.post import (
    PostgresPostRepository,
    _apply_filters,
    search_tsquery,
)
from blog.persistence.tables import posts_table
from tests.conftest import make_post, make_user


class _Rows:
    def __init__(self, row):
        self._row = row

    def first(self):
        return self._row


class _Result:
    def __init__(self, existing: bool):
        self._existing = existing

    def first(self):
        return ("id",) if self._existing else None

    def mappings(self):
        return _Rows(None)


class RecordingSession:
    """Stands in for AsyncSession and keeps every executed statement."""

    def __init__(self, existing: bool = False):
        self.existing = existing
        self.statements = []

    async def execute(self, stmt):
        self.statements.append(stmt)
        return _Result(self.existing)

    async def flush(self):
        pass


def _compile(stmt):
    return stmt.compile(dialect=postgresql.dialect())


class TestSearchTsquery:
    """Tests for search_tsquery."""

    def test_terms_are_or_joined(self):
        assert search_tsquery("Python  Rust") == "python | rust"

    def test_operators_are_dropped(self):
        assert search_tsquery("a&b | !c:*") == "a | b | c"

    def test_no_words(self):
        assert search_tsquery("!!! &|") is None


class TestFilters:
    """Tests for the WHERE clause built from a PostQuery."""

    def _where(self, **params):
        stmt = _apply_filters(select(posts_table.c.id), build_post_query(**params))
        return _compile(stmt)

    def test_no_filters(self):
        assert "WHERE" not in str(self._where())

    def test_tag_uses_array_containment(self):
        compiled = self._where(tag="python")
        assert "posts.tags @> " in str(compiled)
        assert ["python"] in compiled.params.values()

    def test_category(self):
        compiled = self._where(category="Design")
        assert "posts.category = " in str(compiled)
        assert "Design" in compiled.params.values()

    def test_search_matches_any_term(self):
        compiled = self._where(search="python rust")
        sql = str(compiled)
        assert "posts.search_vector @@ to_tsquery(" in sql
        assert "plainto_tsquery" not in sql
        assert "python | rust" in compiled.params.values()

    def test_search_without_words_matches_nothing(self):
        sql = str(self._where(search="???"))
        assert "to_tsquery" not in sql
        assert "false" in sql.lower()


class TestWrites:
    """Tests for increment_views and save."""

    @pytest.mark.asyncio
    async def test_increment_views_is_one_update_statement(self):
        session = RecordingSession()
        repository = PostgresPostRepository(session)
        post = make_post(make_user())

        assert await repository.increment_views(post.id) is None

        [stmt] = session.statements
        sql = str(_compile(stmt))
        assert sql.startswith("UPDATE posts SET views=(posts.views + ")
        assert "RETURNING" in sql

    @pytest.mark.asyncio
    async def test_saving_existing_post_leaves_views_alone(self):
        session = RecordingSession(existing=True)
        repository = PostgresPostRepository(session)
        post = make_post(make_user()).model_copy(update={"views": 0})

        await repository.save(post)

        update_stmt = session.statements[1]
        compiled = _compile(update_stmt)
        assert str(compiled).startswith("UPDATE posts SET")
        assert "views" not in compiled.params
        assert "views=" not in str(compiled)
        assert "search_vector=to_tsvector(" in str(compiled)

    @pytest.mark.asyncio
    async def test_saving_new_post_inserts(self):
        session = RecordingSession(existing=False)
        repository = PostgresPostRepository(session)

        await repository.save(make_post(make_user()))

        assert str(_compile(session.statements[1])).startswith("INSERT INTO posts")
