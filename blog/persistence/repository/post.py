"""PostgreSQL implementation of Post repository."""

import re
from typing import List, Optional

import logfire
from sqlalchemy import Select, asc, desc, false, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Post
from blog.domain.repository import PostRepository
from blog.domain.value import PostId, PostQuery, SortDirection
from blog.persistence.mappers import post_search_document, post_to_dict, row_to_post
from blog.persistence.tables import POST_COLUMNS, posts_table, users_table

SEARCH_CONFIG = "english"

_SEARCH_TERM = re.compile(r"\w+")


def search_tsquery(search: str) -> Optional[str]:
    """tsquery text matching any of the search terms, or None if there are none.

    Terms are reduced to word characters so none of the tsquery operators
    can reach ``to_tsquery``.
    """
    terms = _SEARCH_TERM.findall(search.lower())
    return " | ".join(terms) if terms else None


def _apply_filters(stmt: Select, query: PostQuery) -> Select:
    """Add the category, tag and text filters of the query."""
    if query.category is not None:
        stmt = stmt.where(posts_table.c.category == query.category.value)
    if query.tag is not None:
        stmt = stmt.where(posts_table.c.tags.contains([query.tag]))
    if query.search is not None:
        tsquery = search_tsquery(query.search)
        if tsquery is None:
            return stmt.where(false())
        stmt = stmt.where(
            posts_table.c.search_vector.op("@@")(
                func.to_tsquery(SEARCH_CONFIG, tsquery)
            )
        )
    return stmt


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _select_posts() -> Select:
        """Post columns with the author's username joined in."""
        return select(
            *POST_COLUMNS, users_table.c.username.label("author_username")
        ).select_from(
            posts_table.outerjoin(users_table, posts_table.c.author_id == users_table.c.id)
        )

    async def _author_username(self, post_dict: dict) -> dict:
        stmt = select(users_table.c.username).where(
            users_table.c.id == post_dict["author_id"]
        )
        result = await self.session.execute(stmt)
        return {**post_dict, "author_username": result.scalar()}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = self._select_posts().where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()

            if not row:
                return None

            return row_to_post(dict(row))

    async def find_all(self, query: PostQuery) -> List[Post]:
        """Find one page of posts matching the query."""
        with logfire.span(
            "post_repository.find_all",
            sort=query.sort.field.value,
            direction=query.sort.direction.value,
            limit=query.page.limit,
            offset=query.page.offset,
        ):
            stmt = _apply_filters(self._select_posts(), query)

            order = asc if query.sort.direction == SortDirection.ASC else desc
            sort_column = posts_table.c[query.sort.field.attribute]
            # Ties broken by id so pages never overlap
            stmt = stmt.order_by(order(sort_column), order(posts_table.c.id))

            stmt = stmt.limit(query.page.limit).offset(query.page.offset)

            result = await self.session.execute(stmt)
            posts = [row_to_post(dict(row)) for row in result.mappings().all()]

            logfire.info("Found posts", count=len(posts))
            return posts

    async def count(self, query: PostQuery) -> int:
        """Count posts matching the query filters."""
        with logfire.span("post_repository.count"):
            stmt = _apply_filters(select(func.count()).select_from(posts_table), query)
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span(
            "post_repository.save", post_id=str(post.id), tags=post.tags
        ):
            existing = await self.session.execute(
                select(posts_table.c.id).where(posts_table.c.id == post.id)
            )

            post_dict = post_to_dict(post)
            post_dict["search_vector"] = func.to_tsvector(
                SEARCH_CONFIG, post_search_document(post)
            )

            if existing.first():
                logfire.info("Updating existing post", post_id=str(post.id))
                # Views are only ever changed by increment_views
                post_dict.pop("views")
                stmt = (
                    posts_table.update()
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
            else:
                logfire.info("Inserting new post", post_id=str(post.id))
                stmt = posts_table.insert().values(**post_dict)

            await self.session.execute(stmt)
            await self.session.flush()

            saved = await self.find_by_id(post.id)
            return saved if saved else post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete)."""
        stmt = posts_table.delete().where(posts_table.c.id == post_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_views(self, post_id: PostId) -> Optional[Post]:
        """Atomically increment views by 1."""
        with logfire.span("post_repository.increment_views", post_id=str(post_id)):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .values(views=posts_table.c.views + 1)
                .returning(*POST_COLUMNS)
            )
            result = await self.session.execute(stmt)
            row = result.mappings().first()

            if row is None:
                return None

            await self.session.flush()
            return row_to_post(await self._author_username(dict(row)))
