"""
UserService - identifier normalization and user lookup.

Users are identified by a free-form identifier (email, username, names
with æøå...) stored normalized in the `email` field.
"""

import logging
import unicodedata
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.repositories.user_repository import UserRepository
from app.models.user import User

logger = logging.getLogger(__name__)


class UserServiceError(Exception):
    """Base exception for user service errors."""
    pass


class InvalidIdentifierError(UserServiceError):
    """Raised when neither a user ID nor a usable identifier is given."""
    pass


class UserNotFoundError(UserServiceError):
    """Raised when no user matches the ID or identifier."""
    pass


def normalize_identifier(raw: str) -> str:
    """Trim, NFC-normalize and case-fold an identifier."""
    return unicodedata.normalize("NFC", raw.strip()).casefold()


def display_name_for(identifier: str) -> str:
    """Local part of an email, otherwise the identifier itself."""
    if "@" in identifier:
        return identifier.split("@")[0]
    return identifier


class UserService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.user_repo = UserRepository(db)

    async def get_by_identifier(self, raw_identifier: Optional[str]) -> User:
        """
        Find a user by identifier.

        Raises: InvalidIdentifierError, UserNotFoundError
        """
        identifier = normalize_identifier(raw_identifier or "")
        if not identifier:
            raise InvalidIdentifierError("Missing email/identifier")

        user = await self.user_repo.get_by_email(identifier)
        if not user:
            raise UserNotFoundError("User not found for email/identifier")
        return user

    async def resolve_user_id(
        self,
        user_id: Optional[str] = None,
        email: Optional[str] = None
    ) -> str:
        """
        Resolve the user a read query is about.

        An explicit user_id is trusted as-is; otherwise the identifier must
        match an existing user.
        """
        if user_id:
            return user_id

        user = await self.get_by_identifier(email)
        return user.id

    async def get_or_create(
        self,
        user_id: Optional[str] = None,
        email: Optional[str] = None
    ) -> User:
        """
        Resolve the user a write is for, creating it on first write.

        1. user_id given and found -> that user
        2. identifier given -> existing user for it, or a new one
        3. otherwise -> error
        """
        identifier = normalize_identifier(email) if email else ""

        if user_id:
            user = await self.user_repo.get_by_id(user_id)
            if user:
                return user
            if not identifier:
                raise UserNotFoundError(f"User {user_id} not found")

        if not identifier:
            raise InvalidIdentifierError("user_id or email/identifier is required")

        user = await self.user_repo.get_by_email(identifier)
        if user:
            return user

        user = await self.user_repo.create(identifier, display_name_for(identifier))
        logger.info(f"👤 Created user {user.id} for identifier {identifier}")
        return user
