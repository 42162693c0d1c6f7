"""
🎯 ResultRepository - resultados de usuarios por workout

IDs compuestos: user_id:workout_id
Un usuario tiene como mucho un resultado por workout (upsert).
"""

from datetime import datetime, timezone
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from app.models.score import Score
from app.models.result import UserResult


class ResultRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db["user_results"]

    # ============================================
    # 📌 UPSERT
    # ============================================

    async def upsert(self, user_id: str, workout_id: str, score: Score) -> UserResult:
        """
        Crea o reemplaza el resultado del usuario para el workout.

        Se escriben los cuatro campos del score (también los None), así un
        segundo envío reemplaza al primero en vez de mezclarse con él.
        """
        now = datetime.now(timezone.utc)

        doc = await self.collection.find_one_and_update(
            {"_id": f"{user_id}:{workout_id}"},
            {
                "$set": {**score.score_fields(), "updated_at": now},
                "$setOnInsert": {
                    "user_id": user_id,
                    "workout_id": workout_id,
                    "created_at": now,
                },
            },
            upsert=True,
            return_document=ReturnDocument.AFTER
        )
        return UserResult(**doc)

    # ============================================
    # 📌 READ
    # ============================================

    async def get_user_result(self, user_id: str, workout_id: str) -> Optional[UserResult]:
        """Resultado de un usuario en un workout"""
        doc = await self.collection.find_one({"user_id": user_id, "workout_id": workout_id})
        return UserResult(**doc) if doc else None

    async def get_user_results_for_workouts(
        self,
        user_id: str,
        workout_ids: list[str]
    ) -> dict[str, UserResult]:
        """Resultados del usuario para varios workouts, por workout_id"""
        if not workout_ids:
            return {}

        cursor = self.collection.find({
            "user_id": user_id,
            "workout_id": {"$in": workout_ids}
        })
        docs = await cursor.to_list(length=None)
        return {doc["workout_id"]: UserResult(**doc) for doc in docs}

    async def get_results_for_workout(self, workout_id: str) -> list[UserResult]:
        """
        🔥 TODOS los resultados de usuarios para un workout
        Sin ordenar: el orden depende del tipo de score (ver scoring)
        """
        cursor = self.collection.find({"workout_id": workout_id})
        docs = await cursor.to_list(length=None)
        return [UserResult(**doc) for doc in docs]

    async def get_recent_for_user(self, user_id: str, limit: int = 50) -> list[UserResult]:
        """Últimos resultados de un usuario"""
        cursor = self.collection.find(
            {"user_id": user_id}
        ).sort("created_at", -1).limit(limit)

        docs = await cursor.to_list(length=limit)
        return [UserResult(**doc) for doc in docs]

