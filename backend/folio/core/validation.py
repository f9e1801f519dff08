"""
Default username/password validation.

The storage layer calls ``validate_username`` and ``validate_password`` on
whatever validator it was given before touching the database. Any object
with those two methods raising ``ValidationError`` can be plugged in.
"""

import re

import pydantic
from pydantic import BaseModel, Field, field_validator

from .exceptions import ValidationError

USERNAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_\-]*$")


class UsernameCheck(BaseModel):
    """Constraints on usernames"""
    username: str = Field(..., min_length=3, max_length=64)

    @field_validator('username')
    @classmethod
    def validate_characters(cls, v):
        if not USERNAME_PATTERN.match(v):
            raise ValueError(
                'Username can only contain letters, digits, underscores and hyphens, '
                'and cannot start with a digit or hyphen'
            )
        return v


class PasswordCheck(BaseModel):
    """Constraints on passwords"""
    # bcrypt only looks at the first 72 bytes
    password: str = Field(..., min_length=6, max_length=72)

    @field_validator('password')
    @classmethod
    def validate_characters(cls, v):
        if not all(' ' <= c <= '~' for c in v):
            raise ValueError('Password can only contain printable ASCII characters')
        return v


def _first_message(exc: pydantic.ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    message = errors[0]['msg']
    return message.removeprefix('Value error, ')


class CredentialValidator:
    """Validates credentials with pydantic and raises ValidationError on rejection"""

    def validate_username(self, username: str) -> None:
        try:
            UsernameCheck(username=username)
        except pydantic.ValidationError as e:
            raise ValidationError(_first_message(e)) from e

    def validate_password(self, password: str) -> None:
        try:
            PasswordCheck(password=password)
        except pydantic.ValidationError as e:
            raise ValidationError(_first_message(e)) from e
