import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional

import aiosqlite

from folio.core.exceptions import SchemaInitError, UniquenessViolation
from folio.core.security import hash_password, random_str
from folio.db.schema import SCHEMA, USER_INDEXES

logger = logging.getLogger(__name__)


class Database:
    """Connection handle for one SQLite file.

    In persistent mode a single connection is opened by ``connect()`` and
    reused until ``disconnect()``. Otherwise ``connection()`` opens a new
    connection for every operation and closes it afterwards.
    """

    def __init__(self, db_path: str, persistent: bool = False):
        self.db_path = db_path
        self.persistent = persistent
        self._connection: Optional[aiosqlite.Connection] = None

    async def _open(self) -> aiosqlite.Connection:
        conn = await aiosqlite.connect(self.db_path)
        conn.row_factory = aiosqlite.Row
        return conn

    async def connect(self):
        """Open the long-lived connection when running in persistent mode"""
        if self.persistent and self._connection is None:
            self._connection = await self._open()
            logger.debug(f"Opened persistent connection to {self.db_path}")

    async def disconnect(self):
        """Close the long-lived connection"""
        if self._connection is not None:
            await self._connection.close()
            self._connection = None
            logger.debug(f"Closed persistent connection to {self.db_path}")

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[aiosqlite.Connection]:
        """Yield the persistent connection, or a transient one"""
        if self._connection is not None:
            yield self._connection
            return

        conn = await self._open()
        try:
            yield conn
        finally:
            await conn.close()


async def fetch_one(conn: aiosqlite.Connection, query: str, params: tuple = ()) -> Optional[Dict[str, Any]]:
    """Fetch one row"""
    async with conn.execute(query, params) as cursor:
        row = await cursor.fetchone()
    return dict(row) if row else None


async def fetch_all(conn: aiosqlite.Connection, query: str, params: tuple = ()) -> List[Dict[str, Any]]:
    """Fetch all rows"""
    async with conn.execute(query, params) as cursor:
        rows = await cursor.fetchall()
    return [dict(row) for row in rows]


@asynccontextmanager
async def unique_constraint(conn: aiosqlite.Connection) -> AsyncIterator[None]:
    """Translate SQLite integrity errors into UniquenessViolation.

    The failed statement's transaction is rolled back first, so a
    persistent connection does not keep holding the write lock.
    """
    try:
        yield
    except aiosqlite.IntegrityError as e:
        await conn.rollback()
        raise UniquenessViolation(str(e)) from e


async def init_admin(conn: aiosqlite.Connection, username: str = "admin", rounds: int = 12) -> str:
    """Create the initial administrator with a random password.

    The plaintext password is logged once and returned; only its hash is
    stored.
    """
    random_pw = random_str()
    hashed = hash_password(random_pw, rounds)
    await conn.execute(
        "INSERT INTO users (username, password, token, admin) VALUES (?, ?, ?, ?)",
        (username, hashed, None, 1)
    )
    await conn.commit()
    logger.warning(
        f"Initial user created. You can log in with username: {username}, password: {random_pw}"
    )
    return random_pw


async def init_schema(
    conn: aiosqlite.Connection,
    init_user: bool = True,
    admin_username: str = "admin",
    rounds: int = 12
) -> bool:
    """Create all tables and indexes, bootstrapping an admin when needed.

    Returns True when the schema was created by this call, False when it
    already existed.
    """
    try:
        for statement in SCHEMA:
            await conn.execute(statement)
    except aiosqlite.OperationalError as e:
        if not str(e).endswith("already exists"):
            logger.critical(f"Error when checking tables in DB: {e}")
            raise SchemaInitError(str(e)) from e

        # The DB may have been created without any user (e.g. by a previous
        # run with bootstrapping disabled)
        row = await fetch_one(conn, "SELECT COUNT(*) AS count FROM users")
        if init_user and row["count"] == 0:
            await init_admin(conn, admin_username, rounds)
        return False
    except aiosqlite.Error as e:
        logger.critical(f"Error when checking tables in DB: {e}")
        raise SchemaInitError(str(e)) from e

    try:
        for statement in USER_INDEXES:
            await conn.execute(statement)
        await conn.commit()
    except aiosqlite.Error as e:
        logger.critical(f"Error when creating user indexes: {e}")
        raise SchemaInitError(str(e)) from e

    logger.debug("Created database schema")
    if init_user:
        await init_admin(conn, admin_username, rounds)
    return True
