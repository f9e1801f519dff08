"""Persistent storage core: users and session tokens, path IDs and thumbnails."""

from .core.exceptions import (
    StorageError,
    SchemaInitError,
    UniquenessViolation,
    TransactionFailure,
    StorageClosedError,
    ValidationError
)
from .models import AuthOutcome, OptimizeReport, PathIdentity, Thumbnail, UserSummary
from .storage import Storage, get_storage, reset_storage

__version__ = "0.1.0"

__all__ = [
    "Storage",
    "get_storage",
    "reset_storage",
    "AuthOutcome",
    "OptimizeReport",
    "PathIdentity",
    "Thumbnail",
    "UserSummary",
    "StorageError",
    "SchemaInitError",
    "UniquenessViolation",
    "TransactionFailure",
    "StorageClosedError",
    "ValidationError"
]
