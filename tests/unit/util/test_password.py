"""Unit tests for password hashing."""

from blog.util.password import PasswordHasher


def test_hash_is_not_the_password():
    hashed = PasswordHasher.hash("secret123")

    assert hashed != "secret123"
    assert PasswordHasher.verify("secret123", hashed)


def test_wrong_password():
    assert not PasswordHasher.verify("wrong", PasswordHasher.hash("secret123"))
