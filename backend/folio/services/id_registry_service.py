import logging
from typing import List, Optional

from folio.core.exceptions import TransactionFailure
from folio.db.database import Database
from folio.db.repositories import IdRepository
from folio.models.path_identity import PathIdentity

logger = logging.getLogger(__name__)


class IdRegistryService:
    """Path to ID lookups plus a buffer of pending inserts.

    The buffer is only touched from coroutines run by the access
    serializer, which is what keeps ``enqueue`` and ``flush`` from
    interleaving.
    """

    def __init__(self, db: Database):
        self.db = db
        self._pending: List[PathIdentity] = []

    async def get_id(self, path: str) -> Optional[str]:
        async with self.db.connection() as conn:
            return await IdRepository.get_id(conn, path)

    async def enqueue(self, path: str, id: str, is_title: bool):
        self._pending.append(PathIdentity(path=path, id=id, is_title=is_title))

    async def pending_count(self) -> int:
        return len(self._pending)

    async def discard_pending(self) -> int:
        """Drop every buffered entry and return how many there were"""
        dropped = len(self._pending)
        self._pending.clear()
        if dropped:
            logger.info(f"Discarded {dropped} pending ID inserts")
        return dropped

    async def flush(self) -> int:
        """Insert all buffered entries in one transaction.

        The buffer is cleared only after the commit. When the insert fails
        the transaction is rolled back and the entries stay buffered.
        """
        if not self._pending:
            return 0

        entries = list(self._pending)
        async with self.db.connection() as conn:
            try:
                await IdRepository.insert_many(conn, entries)
                await conn.commit()
            except Exception as e:
                await conn.rollback()
                logger.error(f"Bulk insert of {len(entries)} IDs rolled back: {e}")
                raise TransactionFailure(
                    f"Failed to insert {len(entries)} IDs: {e}"
                ) from e

        self._pending.clear()
        logger.debug(f"Inserted {len(entries)} IDs")
        return len(entries)
