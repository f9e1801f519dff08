from typing import Optional

import aiosqlite

from folio.db.database import fetch_one, unique_constraint
from folio.models.thumbnail import Thumbnail

ORPHAN_CONDITION = "id NOT IN (SELECT id FROM ids)"


class ThumbnailRepository:
    """Repository for thumbnails table operations"""

    @staticmethod
    async def create(conn: aiosqlite.Connection, id: str, thumbnail: Thumbnail):
        """Insert a thumbnail; an existing one for the same ID is not replaced"""
        async with unique_constraint(conn):
            await conn.execute(
                "INSERT INTO thumbnails (id, data, filename, mime, size) VALUES (?, ?, ?, ?, ?)",
                (id, thumbnail.data, thumbnail.filename, thumbnail.mime, thumbnail.size)
            )
        await conn.commit()

    @staticmethod
    async def get(conn: aiosqlite.Connection, id: str) -> Optional[Thumbnail]:
        row = await fetch_one(
            conn, "SELECT data, filename, mime, size FROM thumbnails WHERE id = ?", (id,)
        )
        return Thumbnail.from_dict(row) if row else None

    @staticmethod
    async def count_orphans(conn: aiosqlite.Connection) -> int:
        """Count thumbnails whose ID is no longer mapped to a path"""
        row = await fetch_one(
            conn, f"SELECT COUNT(*) AS count FROM thumbnails WHERE {ORPHAN_CONDITION}"
        )
        return row["count"]

    @staticmethod
    async def delete_orphans(conn: aiosqlite.Connection):
        await conn.execute(f"DELETE FROM thumbnails WHERE {ORPHAN_CONDITION}")
