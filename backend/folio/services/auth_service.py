import logging
from typing import List, Optional, Tuple

from folio.core.security import hash_password, random_str, verify_password
from folio.core.validation import CredentialValidator
from folio.db.database import Database
from folio.db.repositories import UserRepository
from folio.models.user import AuthOutcome, UserSummary

logger = logging.getLogger(__name__)


class AuthService:
    """User accounts, password checks and session tokens"""

    def __init__(self, db: Database, validator=None, rounds: int = 12):
        self.db = db
        self.validator = validator or CredentialValidator()
        self.rounds = rounds

    async def authenticate(self, username: str, password: str) -> Tuple[AuthOutcome, Optional[str]]:
        """Check credentials and return the user's token, issuing one if needed"""
        async with self.db.connection() as conn:
            credentials = await UserRepository.get_credentials(conn, username)
            if not credentials:
                logger.debug(f"User {username} not found")
                return AuthOutcome.NOT_FOUND, None

            if not verify_password(password, credentials["password"]):
                logger.debug("Password does not match the hash")
                return AuthOutcome.MISMATCH, None

            logger.debug(f"User {username} verified")
            token = credentials["token"]
            if token:
                return AuthOutcome.OK, token

            token = random_str()
            logger.debug(f"Updating token for {username}")
            await UserRepository.set_token(conn, username, token)
            return AuthOutcome.OK, token

    async def verify_token(self, token: str) -> Optional[str]:
        async with self.db.connection() as conn:
            username = await UserRepository.get_username_by_token(conn, token)
        if username is None:
            logger.debug("Unable to verify token")
        return username

    async def verify_admin(self, token: str) -> bool:
        async with self.db.connection() as conn:
            is_admin = await UserRepository.get_admin_by_token(conn, token)
        if is_admin is None:
            logger.debug("Unable to verify user as admin")
            return False
        return is_admin

    async def list_users(self) -> List[UserSummary]:
        async with self.db.connection() as conn:
            return await UserRepository.list_all(conn)

    async def create_user(self, username: str, password: str, is_admin: bool):
        """Validate, hash and insert a new user"""
        self.validator.validate_username(username)
        self.validator.validate_password(password)
        password_hash = hash_password(password, self.rounds)
        async with self.db.connection() as conn:
            await UserRepository.create(conn, username, password_hash, is_admin)
        logger.info(f"Created user {username}")

    async def update_user(self, original_username: str, username: str, password: str, is_admin: bool):
        """Update a user; an empty password keeps the current one"""
        self.validator.validate_username(username)
        password_hash = None
        if password:
            self.validator.validate_password(password)
            password_hash = hash_password(password, self.rounds)
        async with self.db.connection() as conn:
            await UserRepository.update(conn, original_username, username, is_admin, password_hash)
        logger.info(f"Updated user {original_username}")

    async def delete_user(self, username: str):
        async with self.db.connection() as conn:
            await UserRepository.delete(conn, username)
        logger.info(f"Deleted user {username}")

    async def logout(self, token: str):
        async with self.db.connection() as conn:
            await UserRepository.clear_token(conn, token)
