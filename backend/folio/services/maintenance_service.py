import logging
import os

from folio.db.database import Database
from folio.db.repositories import IdRepository, ThumbnailRepository
from folio.models.maintenance import OptimizeReport

logger = logging.getLogger(__name__)


class MaintenanceService:
    """Removes records whose backing file or ID has disappeared"""

    def __init__(self, db: Database):
        self.db = db

    async def optimize(self) -> OptimizeReport:
        """Delete dangling IDs, then thumbnails no longer mapped to any ID"""
        logger.info("Starting DB optimization")
        report = OptimizeReport()

        async with self.db.connection() as conn:
            trash_ids = [
                id for path, id in await IdRepository.list_paths(conn)
                if not os.path.exists(path)
            ]

            if trash_ids:
                try:
                    report.dangling_ids = await IdRepository.delete_ids(conn, trash_ids)
                    await conn.commit()
                except Exception:
                    await conn.rollback()
                    raise
                logger.debug(f"{report.dangling_ids} dangling IDs deleted")

            report.orphaned_thumbnails = await ThumbnailRepository.count_orphans(conn)
            if report.orphaned_thumbnails > 0:
                try:
                    await ThumbnailRepository.delete_orphans(conn)
                    await conn.commit()
                except Exception:
                    await conn.rollback()
                    raise
                logger.info(f"{report.orphaned_thumbnails} dangling thumbnails deleted")

        logger.debug("DB optimization finished")
        return report
