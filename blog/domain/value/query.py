"""Listing query values.

These are produced by the query builder from raw request parameters and
consumed by the post and comment repositories.
"""

import math
from enum import Enum
from typing import Optional

from pydantic import Field

from blog.domain.value.common import ValueObject
from blog.domain.value.types import Category


class SortField(str, Enum):
    """Post attribute a listing can be ordered by.

    Values are the public query parameter names.
    """

    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    TITLE = "title"
    VIEWS = "views"
    CATEGORY = "category"

    @property
    def attribute(self) -> str:
        """Name of the matching Post attribute / column."""
        return _SORT_ATTRIBUTES[self]


_SORT_ATTRIBUTES: dict[SortField, str] = {
    SortField.CREATED_AT: "created_at",
    SortField.UPDATED_AT: "updated_at",
    SortField.TITLE: "title",
    SortField.VIEWS: "views",
    SortField.CATEGORY: "category",
}


class SortDirection(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class PageRequest(ValueObject):
    """1-based page window."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class PostSort(ValueObject):
    """Ordering for post listings."""

    field: SortField = SortField.CREATED_AT
    direction: SortDirection = SortDirection.DESC


class PostQuery(ValueObject):
    """Filters, ordering and page window of a post listing.

    A ``None`` filter means "do not filter on this attribute".
    """

    category: Optional[Category] = None
    tag: Optional[str] = None
    search: Optional[str] = None
    page: PageRequest = PageRequest()
    sort: PostSort = PostSort()


class Pagination(ValueObject):
    """Pagination metadata returned alongside a page of results."""

    current_page: int
    total_pages: int
    total: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def from_total(cls, page: int, limit: int, total: int) -> "Pagination":
        """Compute metadata for ``page`` given ``total`` matching items.

        Args:
            page: Current 1-based page
            limit: Page size
            total: Number of items matching the filters, across all pages

        Returns:
            Pagination metadata
        """
        total_pages = math.ceil(total / limit) if total > 0 else 0
        return cls(
            current_page=page,
            total_pages=total_pages,
            total=total,
            has_next_page=page < total_pages,
            has_prev_page=page > 1,
        )
