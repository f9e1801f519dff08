from typing import Iterable, List, Optional, Sequence, Tuple

import aiosqlite

from folio.db.database import fetch_all, fetch_one
from folio.models.path_identity import PathIdentity

# Stay well below SQLITE_MAX_VARIABLE_NUMBER (999 on older builds)
DELETE_CHUNK_SIZE = 500


class IdRepository:
    """Repository for the path to ID mapping.

    Writes here do not commit; callers own the transaction.
    """

    @staticmethod
    async def get_id(conn: aiosqlite.Connection, path: str) -> Optional[str]:
        row = await fetch_one(conn, "SELECT id FROM ids WHERE path = ?", (path,))
        return row["id"] if row else None

    @staticmethod
    async def list_paths(conn: aiosqlite.Connection) -> List[Tuple[str, str]]:
        """Return every (path, id) pair"""
        rows = await fetch_all(conn, "SELECT path, id FROM ids")
        return [(row["path"], row["id"]) for row in rows]

    @staticmethod
    async def insert_many(conn: aiosqlite.Connection, entries: Iterable[PathIdentity]):
        await conn.executemany(
            "INSERT INTO ids (path, id, is_title) VALUES (?, ?, ?)",
            [entry.to_row() for entry in entries]
        )

    @staticmethod
    async def delete_ids(conn: aiosqlite.Connection, ids: Sequence[str]) -> int:
        """Delete rows by ID and return how many were removed"""
        deleted = 0
        for start in range(0, len(ids), DELETE_CHUNK_SIZE):
            chunk = ids[start:start + DELETE_CHUNK_SIZE]
            placeholders = ", ".join("?" for _ in chunk)
            cursor = await conn.execute(
                f"DELETE FROM ids WHERE id IN ({placeholders})", tuple(chunk)
            )
            deleted += cursor.rowcount
            await cursor.close()
        return deleted
