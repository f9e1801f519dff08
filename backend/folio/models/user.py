from enum import Enum
from typing import NamedTuple


class AuthOutcome(str, Enum):
    """Result of checking a username/password pair"""
    OK = "ok"
    NOT_FOUND = "not_found"
    MISMATCH = "mismatch"


class UserSummary(NamedTuple):
    """Row of the user listing"""
    username: str
    is_admin: bool
