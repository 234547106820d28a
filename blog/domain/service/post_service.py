"""Post domain service."""

import logfire

from blog.domain.error import NotFoundError
from blog.domain.model.post import Post
from blog.domain.repository import PostRepository
from blog.domain.value import PostId, PostQuery


class PostService:
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def save_post(self, post: Post) -> Post:
        """Save a post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        with logfire.span(
            "post_service.save_post", post_id=str(post.id), title=post.title
        ):
            saved = await self.post_repository.save(post)
            logfire.info("Post saved", post_id=str(saved.id))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("post", str(post_id))
            return post

    async def record_view(self, post_id: PostId) -> Post:
        """Atomically increment a post's views.

        Args:
            post_id: Post ID

        Returns:
            The post including this view

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.record_view", post_id=str(post_id)):
            post = await self.post_repository.increment_views(post_id)
            if not post:
                logfire.warn("Post not found for view", post_id=str(post_id))
                raise NotFoundError("post", str(post_id))
            return post

    async def list_posts(self, query: PostQuery) -> tuple[list[Post], int]:
        """List one page of posts.

        Args:
            query: Filters, sort and page window

        Returns:
            The page of posts and the total number of matches
        """
        with logfire.span(
            "post_service.list_posts",
            category=query.category.value if query.category else None,
            tag=query.tag,
            search=query.search,
            page=query.page.page,
            limit=query.page.limit,
        ):
            posts = await self.post_repository.find_all(query)
            total = await self.post_repository.count(query)
            logfire.info("Posts listed", returned=len(posts), total=total)
            return posts, total

    async def delete_post(self, post_id: PostId) -> None:
        """Delete a post. Its comments are kept."""
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))
