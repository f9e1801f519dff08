"""
Storage component owning the database file.

All public methods are synchronous. Each one submits a coroutine to the
``AccessSerializer`` and blocks until it completes, so callers on any number
of threads never run two statements against the connection at once.
"""

import logging
import os
import threading
from typing import List, Optional, Tuple, Union

import aiosqlite

from folio.core.config import Settings, settings as default_settings
from folio.core.exceptions import SchemaInitError, StorageClosedError
from folio.core.validation import CredentialValidator
from folio.db.database import Database, init_schema
from folio.db.executor import AccessSerializer
from folio.models import AuthOutcome, OptimizeReport, Thumbnail, UserSummary
from folio.services import (
    AuthService,
    IdRegistryService,
    MaintenanceService,
    ThumbnailService
)

logger = logging.getLogger(__name__)


class Storage:
    """Users, path IDs and thumbnails stored in one SQLite file"""

    def __init__(
        self,
        db_path: Optional[Union[str, os.PathLike]] = None,
        init_user: bool = True,
        *,
        persistent: bool = False,
        validator=None,
        settings: Optional[Settings] = None
    ):
        self.settings = settings or default_settings
        self.path = os.path.expanduser(os.fspath(db_path or self.settings.DB_PATH))

        directory = os.path.dirname(os.path.abspath(self.path))
        if not os.path.isdir(directory):
            logger.info(f"The DB directory {directory} does not exist. Attempting to create it")
            os.makedirs(directory, exist_ok=True)

        self._db = Database(self.path, persistent=persistent)
        self._serializer = AccessSerializer()
        try:
            self._serializer.run(self._initialize, init_user)
        except BaseException:
            self._serializer.shutdown()
            raise

        self._auth = AuthService(
            self._db,
            validator or CredentialValidator(),
            self.settings.BCRYPT_ROUNDS
        )
        self._ids = IdRegistryService(self._db)
        self._thumbnails = ThumbnailService(self._db)
        self._maintenance = MaintenanceService(self._db)

    async def _initialize(self, init_user: bool):
        try:
            # Schema checks always run on a transient connection
            async with self._db.connection() as conn:
                await init_schema(
                    conn,
                    init_user=init_user,
                    admin_username=self.settings.ADMIN_USERNAME,
                    rounds=self.settings.BCRYPT_ROUNDS
                )
            await self._db.connect()
        except aiosqlite.Error as e:
            logger.critical(f"Unable to initialize DB at {self.path}: {e}")
            raise SchemaInitError(str(e)) from e

    @property
    def persistent(self) -> bool:
        return self._db.persistent

    @property
    def closed(self) -> bool:
        return self._serializer.closed

    # Users

    def authenticate(self, username: str, password: str) -> Tuple[AuthOutcome, Optional[str]]:
        """Verify credentials, telling apart unknown users and wrong passwords"""
        return self._serializer.run(self._auth.authenticate, username, password)

    def verify(self, username: str, password: str) -> Optional[str]:
        """Return the user's token, or None when the credentials are not valid"""
        _, token = self.authenticate(username, password)
        return token

    def verify_token(self, token: str) -> Optional[str]:
        return self._serializer.run(self._auth.verify_token, token)

    def verify_admin(self, token: str) -> bool:
        return self._serializer.run(self._auth.verify_admin, token)

    def list_users(self) -> List[UserSummary]:
        return self._serializer.run(self._auth.list_users)

    def create_user(self, username: str, password: str, is_admin: bool = False):
        self._serializer.run(self._auth.create_user, username, password, is_admin)

    def update_user(self, original_username: str, username: str, password: str, is_admin: bool):
        self._serializer.run(
            self._auth.update_user, original_username, username, password, is_admin
        )

    def delete_user(self, username: str):
        self._serializer.run(self._auth.delete_user, username)

    def logout(self, token: str):
        self._serializer.run(self._auth.logout, token)

    # Path IDs

    def get_id(self, path: str) -> Optional[str]:
        return self._serializer.run(self._ids.get_id, path)

    def enqueue(self, path: str, id: str, is_title: bool = False):
        """Buffer a path/ID pair until the next ``flush``"""
        self._serializer.run(self._ids.enqueue, path, id, is_title)

    def flush(self) -> int:
        """Insert all buffered pairs atomically; returns the number inserted"""
        return self._serializer.run(self._ids.flush)

    def pending_count(self) -> int:
        return self._serializer.run(self._ids.pending_count)

    def discard_pending(self) -> int:
        return self._serializer.run(self._ids.discard_pending)

    # Thumbnails

    def save_thumbnail(self, id: str, data: bytes, filename: str, mime: str, size: int):
        thumbnail = Thumbnail(data=data, filename=filename, mime=mime, size=size)
        self._serializer.run(self._thumbnails.save, id, thumbnail)

    def get_thumbnail(self, id: str) -> Optional[Thumbnail]:
        return self._serializer.run(self._thumbnails.get, id)

    # Maintenance

    def optimize(self) -> OptimizeReport:
        return self._serializer.run(self._maintenance.optimize)

    def close(self):
        """Close the persistent connection and stop the executor"""
        if self._serializer.closed:
            return
        try:
            self._serializer.run(self._db.disconnect)
        except StorageClosedError:
            return
        finally:
            self._serializer.shutdown()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __repr__(self):
        mode = "persistent" if self.persistent else "transient"
        return f"<Storage path={self.path!r} mode={mode}>"


# Default instance
_storage = None
_storage_lock = threading.Lock()


def get_storage() -> Storage:
    """Get the default Storage built from settings"""
    global _storage
    with _storage_lock:
        if _storage is None:
            _storage = Storage(
                default_settings.DB_PATH,
                default_settings.BOOTSTRAP_ADMIN,
                persistent=default_settings.DB_PERSISTENT_CONNECTION
            )
        return _storage


def reset_storage():
    """Close and forget the default Storage"""
    global _storage
    with _storage_lock:
        if _storage is not None:
            _storage.close()
            _storage = None
