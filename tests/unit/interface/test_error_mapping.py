"""Unit tests for the error to status mapping."""

import json

import pytest
from fastapi.exceptions import RequestValidationError

from blog.domain.error import (
    DomainError,
    ForbiddenError,
    InvalidIdentifierError,
    InvalidTokenError,
    NotFoundError,
    UnauthenticatedError,
    UnknownUserError,
    ValidationError,
)
from blog.interface.api.errors import (
    error_response,
    handle_request_validation_error,
    status_for,
)


@pytest.mark.parametrize(
    "error, status_code",
    [
        (UnauthenticatedError(), 401),
        (InvalidTokenError(), 401),
        (UnknownUserError("u1"), 401),
        (ForbiddenError(), 403),
        (NotFoundError("post", "p1"), 404),
        (InvalidIdentifierError("post", "x"), 400),
        (ValidationError(["title: Title is required"]), 400),
        (DomainError("unclassified"), 500),
    ],
)
def test_status_for(error, status_code):
    assert status_for(error) == status_code


def test_error_response_omits_empty_errors():
    response = error_response(404, "Post not found")

    assert response.status_code == 404
    assert response.body == b'{"success":false,"message":"Post not found"}'


@pytest.mark.asyncio
async def test_request_validation_keeps_field_named_body():
    exc = RequestValidationError(
        [
            {"loc": ("body", "body"), "msg": "Field required", "type": "missing"},
            {"loc": ("query", "page"), "msg": "Input should be a valid integer"},
            {"loc": ("body",), "msg": "Field required", "type": "missing"},
        ]
    )

    response = await handle_request_validation_error(None, exc)

    assert response.status_code == 400
    assert json.loads(response.body)["errors"] == [
        "body: Field required",
        "page: Input should be a valid integer",
        "Field required",
    ]
