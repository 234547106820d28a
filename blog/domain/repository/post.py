"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.post import Post
from blog.domain.value import PostId, PostQuery


class PostRepository(ABC):
    """Repository for Post aggregate.

    Reads return posts with ``author_username`` filled in.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, query: PostQuery) -> List[Post]:
        """Find one page of posts matching the query.

        Args:
            query: Filters, sort and page window

        Returns:
            Posts on the requested page, in the requested order
        """
        pass

    @abstractmethod
    async def count(self, query: PostQuery) -> int:
        """Count posts matching the query filters (page window ignored).

        Args:
            query: Filters to apply

        Returns:
            Total number of matching posts
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post, with author username
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete).

        Comments on the post are left in place.

        Args:
            post_id: The post ID to delete
        """
        pass

    @abstractmethod
    async def increment_views(self, post_id: PostId) -> Optional[Post]:
        """Atomically increment views by 1 and return the updated post.

        Args:
            post_id: The post ID

        Returns:
            The post after the increment, or None if it does not exist
        """
        pass
