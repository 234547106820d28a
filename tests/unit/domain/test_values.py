"""Unit tests for domain value objects and identifiers."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from blog.domain.error import InvalidIdentifierError
from blog.domain.value import Email, Username, parse_post_id


class TestUsername:
    def test_valid(self):
        assert Username(" alice_01 ").root == "alice_01"

    @pytest.mark.parametrize("raw", ["ab", "a" * 31, "alice!", "al ice"])
    def test_invalid(self, raw):
        with pytest.raises(PydanticValidationError):
            Username(raw)


class TestEmail:
    def test_lower_cased(self):
        assert Email("Alice@Example.COM").root == "alice@example.com"

    def test_invalid(self):
        with pytest.raises(PydanticValidationError):
            Email("not-an-email")


class TestParseIdentifier:
    def test_malformed_post_id(self):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            parse_post_id("not-a-uuid")
        assert str(exc_info.value) == "Invalid post ID"
