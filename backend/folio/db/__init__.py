from .database import Database, init_admin, init_schema
from .executor import AccessSerializer
from .repositories import (
    UserRepository,
    IdRepository,
    ThumbnailRepository
)

__all__ = [
    "Database",
    "init_admin",
    "init_schema",
    "AccessSerializer",
    "UserRepository",
    "IdRepository",
    "ThumbnailRepository"
]
