"""Tests for the default credential validator."""

from __future__ import annotations

import pytest

from folio import ValidationError
from folio.core.validation import CredentialValidator


@pytest.fixture
def validator() -> CredentialValidator:
    return CredentialValidator()


class TestUsername:
    @pytest.mark.parametrize("username", ["abc", "reader", "_hidden", "some-user_2", "A" * 64])
    def test_valid(self, validator: CredentialValidator, username: str) -> None:
        validator.validate_username(username)

    @pytest.mark.parametrize("username", ["", "ab", "A" * 65, "1abc", "-abc", "with space", "naïve", "a/b"])
    def test_invalid(self, validator: CredentialValidator, username: str) -> None:
        with pytest.raises(ValidationError):
            validator.validate_username(username)

    def test_message_is_readable(self, validator: CredentialValidator) -> None:
        with pytest.raises(ValidationError, match="letters, digits, underscores and hyphens"):
            validator.validate_username("bad name")


class TestPassword:
    @pytest.mark.parametrize("password", ["secret", "with spaces ok", "!@#$%^&*()", "p" * 72])
    def test_valid(self, validator: CredentialValidator, password: str) -> None:
        validator.validate_password(password)

    @pytest.mark.parametrize("password", ["", "short", "p" * 73, "tab\tinside", "pässword"])
    def test_invalid(self, validator: CredentialValidator, password: str) -> None:
        with pytest.raises(ValidationError):
            validator.validate_password(password)


def test_validation_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        CredentialValidator().validate_password("x")
