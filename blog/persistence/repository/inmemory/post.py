"""In-memory post repository for testing."""

import re
from typing import Optional

from blog.domain.model.post import Post
from blog.domain.repository import PostRepository
from blog.domain.value import PostId, PostQuery, SortDirection

from .store import InMemoryStore

_WORD = re.compile(r"\w+")


def _words(text: str) -> set[str]:
    return {word.lower() for word in _WORD.findall(text)}


def _matches(post: Post, query: PostQuery) -> bool:
    if query.category is not None and post.category != query.category:
        return False
    if query.tag is not None and query.tag not in post.tags:
        return False
    if query.search is not None:
        # Any search term appearing as a word in title, body or tags matches
        document = _words(" ".join([post.title, post.body, *post.tags]))
        if not _words(query.search) & document:
            return False
    return True


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    def _with_author(self, post: Post) -> Post:
        return post.model_copy(
            update={"author_username": self._store.username_of(post.author_id)}
        )

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        post = self._store.posts.get(post_id)
        return self._with_author(post) if post else None

    async def find_all(self, query: PostQuery) -> list[Post]:
        """Find one page of posts matching the query."""
        posts = [p for p in self._store.posts.values() if _matches(p, query)]

        attribute = query.sort.field.attribute
        posts.sort(
            key=lambda p: (getattr(p, attribute), str(p.id)),
            reverse=query.sort.direction == SortDirection.DESC,
        )

        offset = query.page.offset
        return [self._with_author(p) for p in posts[offset : offset + query.page.limit]]

    async def count(self, query: PostQuery) -> int:
        return sum(1 for p in self._store.posts.values() if _matches(p, query))

    async def save(self, post: Post) -> Post:
        """Save or update a post. Stored views are kept on update."""
        existing = self._store.posts.get(post.id)
        if existing is not None:
            post = post.model_copy(update={"views": existing.views})
        self._store.posts[post.id] = post.model_copy(update={"author_username": None})
        return self._with_author(post)

    async def delete(self, post_id: PostId) -> None:
        self._store.posts.pop(post_id, None)

    async def increment_views(self, post_id: PostId) -> Optional[Post]:
        """Increment views by 1.

        Read and write happen without an await in between, so concurrent
        callers on one event loop never lose an increment.
        """
        post = self._store.posts.get(post_id)
        if post is None:
            return None
        updated = post.model_copy(update={"views": post.views + 1})
        self._store.posts[post_id] = updated
        return self._with_author(updated)
