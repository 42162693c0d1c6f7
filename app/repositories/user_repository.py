"""
UserRepository - MongoDB access for users collection.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.models.user import User


class UserRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db["users"]

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        doc = await self.collection.find_one({"_id": user_id})
        return User(**doc) if doc else None

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by (already normalized) email/identifier."""
        doc = await self.collection.find_one({"email": email})
        return User(**doc) if doc else None

    async def get_many(self, user_ids: list[str]) -> dict[str, User]:
        """Get several users at once, keyed by ID."""
        if not user_ids:
            return {}
        cursor = self.collection.find({"_id": {"$in": user_ids}})
        docs = await cursor.to_list(length=None)
        return {doc["_id"]: User(**doc) for doc in docs}

    async def create(self, email: str, name: Optional[str] = None) -> User:
        """Create a new user for a normalized identifier."""
        user_doc = {
            "_id": str(uuid.uuid4()),
            "email": email,
            "name": name,
            "created_at": datetime.now(timezone.utc),
        }

        await self.collection.insert_one(user_doc)
        return User(**user_doc)

    async def upsert_by_email(self, email: str, name: Optional[str] = None) -> User:
        """Get the user for an identifier, creating it if missing (used by seed)."""
        existing = await self.get_by_email(email)
        if existing:
            return existing
        return await self.create(email, name)
