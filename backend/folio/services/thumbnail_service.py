import logging
from typing import Optional

from folio.db.database import Database
from folio.db.repositories import ThumbnailRepository
from folio.models.thumbnail import Thumbnail

logger = logging.getLogger(__name__)


class ThumbnailService:
    """Blob cache of generated thumbnails keyed by ID"""

    def __init__(self, db: Database):
        self.db = db

    async def save(self, id: str, thumbnail: Thumbnail):
        async with self.db.connection() as conn:
            await ThumbnailRepository.create(conn, id, thumbnail)
        logger.debug(f"Saved thumbnail {thumbnail.filename} for {id}")

    async def get(self, id: str) -> Optional[Thumbnail]:
        async with self.db.connection() as conn:
            return await ThumbnailRepository.get(conn, id)
