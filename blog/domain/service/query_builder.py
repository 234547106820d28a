"""Translate raw listing parameters into a PostQuery."""

from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from blog.domain.error import ValidationError
from blog.domain.value import (
    Category,
    PageRequest,
    PostQuery,
    PostSort,
    SortDirection,
    SortField,
)

ALL_CATEGORIES = "all"


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def build_page_request(page: int = 1, limit: int = 10) -> PageRequest:
    """Validate a page window.

    Raises:
        ValidationError: If page < 1 or limit is outside 1..100
    """
    try:
        return PageRequest(page=page, limit=limit)
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e)


def build_post_query(
    category: Optional[str] = None,
    tag: Optional[str] = None,
    search: Optional[str] = None,
    page: int = 1,
    limit: int = 10,
    sort_by: Optional[str] = None,
    sort_order: Optional[str] = None,
) -> PostQuery:
    """Build a post listing query from request parameters.

    Args:
        category: Category name, or ``all`` (any case) for no filter
        tag: Tag that listed posts must carry
        search: Free text matched against title, body and tags
        page: 1-based page number
        limit: Page size
        sort_by: One of the SortField values (default createdAt)
        sort_order: ``asc`` or ``desc`` (default desc)

    Returns:
        The query

    Raises:
        ValidationError: Listing every parameter that is out of range
    """
    errors: list[str] = []

    category_value: Optional[Category] = None
    category = _blank_to_none(category)
    if category is not None and category.lower() != ALL_CATEGORIES:
        try:
            category_value = Category(category)
        except ValueError:
            allowed = ", ".join(c.value for c in Category)
            errors.append(f"category: must be one of {allowed}")

    sort_field = SortField.CREATED_AT
    if _blank_to_none(sort_by) is not None:
        try:
            sort_field = SortField(sort_by.strip())
        except ValueError:
            allowed = ", ".join(f.value for f in SortField)
            errors.append(f"sortBy: must be one of {allowed}")

    direction = SortDirection.DESC
    if _blank_to_none(sort_order) is not None:
        try:
            direction = SortDirection(sort_order.strip().lower())
        except ValueError:
            errors.append("sortOrder: must be asc or desc")

    page_request: Optional[PageRequest] = None
    try:
        page_request = build_page_request(page, limit)
    except ValidationError as e:
        errors.extend(e.errors)

    if errors or page_request is None:
        raise ValidationError(errors)

    return PostQuery(
        category=category_value,
        tag=_blank_to_none(tag),
        search=_blank_to_none(search),
        page=page_request,
        sort=PostSort(field=sort_field, direction=direction),
    )
