from .user_repository import UserRepository
from .id_repository import IdRepository
from .thumbnail_repository import ThumbnailRepository

__all__ = [
    "UserRepository",
    "IdRepository",
    "ThumbnailRepository"
]
