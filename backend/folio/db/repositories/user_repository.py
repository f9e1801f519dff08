from typing import Any, Dict, List, Optional

import aiosqlite

from folio.db.database import fetch_all, fetch_one, unique_constraint
from folio.models.user import UserSummary


class UserRepository:
    """Repository for users table operations"""

    @staticmethod
    async def get_credentials(conn: aiosqlite.Connection, username: str) -> Optional[Dict[str, Any]]:
        """Get password hash and current token of a user"""
        return await fetch_one(
            conn, "SELECT password, token FROM users WHERE username = ?", (username,)
        )

    @staticmethod
    async def get_username_by_token(conn: aiosqlite.Connection, token: str) -> Optional[str]:
        row = await fetch_one(conn, "SELECT username FROM users WHERE token = ?", (token,))
        return row["username"] if row else None

    @staticmethod
    async def get_admin_by_token(conn: aiosqlite.Connection, token: str) -> Optional[bool]:
        row = await fetch_one(conn, "SELECT admin FROM users WHERE token = ?", (token,))
        return bool(row["admin"]) if row else None

    @staticmethod
    async def list_all(conn: aiosqlite.Connection) -> List[UserSummary]:
        """List all users in storage order"""
        rows = await fetch_all(conn, "SELECT username, admin FROM users")
        return [UserSummary(row["username"], bool(row["admin"])) for row in rows]

    @staticmethod
    async def create(conn: aiosqlite.Connection, username: str, password_hash: str, is_admin: bool):
        """Insert a new user without a token"""
        async with unique_constraint(conn):
            await conn.execute(
                "INSERT INTO users (username, password, token, admin) VALUES (?, ?, ?, ?)",
                (username, password_hash, None, 1 if is_admin else 0)
            )
        await conn.commit()

    @staticmethod
    async def update(
        conn: aiosqlite.Connection,
        original_username: str,
        username: str,
        is_admin: bool,
        password_hash: Optional[str] = None
    ):
        """Update username and admin flag, and the password hash when given"""
        admin = 1 if is_admin else 0
        async with unique_constraint(conn):
            if password_hash is None:
                await conn.execute(
                    "UPDATE users SET username = ?, admin = ? WHERE username = ?",
                    (username, admin, original_username)
                )
            else:
                await conn.execute(
                    "UPDATE users SET username = ?, admin = ?, password = ? WHERE username = ?",
                    (username, admin, password_hash, original_username)
                )
        await conn.commit()

    @staticmethod
    async def set_token(conn: aiosqlite.Connection, username: str, token: str):
        async with unique_constraint(conn):
            await conn.execute(
                "UPDATE users SET token = ? WHERE username = ?", (token, username)
            )
        await conn.commit()

    @staticmethod
    async def clear_token(conn: aiosqlite.Connection, token: str):
        await conn.execute("UPDATE users SET token = NULL WHERE token = ?", (token,))
        await conn.commit()

    @staticmethod
    async def delete(conn: aiosqlite.Connection, username: str):
        await conn.execute("DELETE FROM users WHERE username = ?", (username,))
        await conn.commit()
