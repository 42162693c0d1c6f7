"""
🏋️ WorkoutRepository - seasons + workouts

Los workouts siempre se consultan por temporada, competición y división.
"""

from datetime import datetime, timezone
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from app.models.score import ScoreType
from app.models.workout import Season, Workout, CompetitionType, DivisionType


class WorkoutRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db["workouts"]
        self.seasons = db["seasons"]

    # ============================================
    # 📌 SEASONS
    # ============================================

    async def get_season_by_year(self, year: int) -> Optional[Season]:
        """Obtiene la temporada de un año"""
        doc = await self.seasons.find_one({"year": year})
        return Season(**doc) if doc else None

    async def upsert_season(self, year: int) -> Season:
        """Crea la temporada si no existe"""
        doc = await self.seasons.find_one_and_update(
            {"_id": f"season-{year}"},
            {"$setOnInsert": {"year": year}},
            upsert=True,
            return_document=ReturnDocument.AFTER
        )
        return Season(**doc)

    # ============================================
    # 📌 WORKOUTS
    # ============================================

    async def get_by_id(self, workout_id: str) -> Optional[Workout]:
        """Obtiene un workout por ID"""
        doc = await self.collection.find_one({"_id": workout_id})
        return Workout(**doc) if doc else None

    async def get_for_scope(
        self,
        season_id: str,
        competition: CompetitionType,
        division: DivisionType
    ) -> list[Workout]:
        """Workouts de una temporada/competición/división en orden de creación"""
        cursor = self.collection.find({
            "season_id": season_id,
            "competition": competition.value,
            "division": division.value
        }).sort("created_at", 1)

        docs = await cursor.to_list(length=None)
        return [Workout(**doc) for doc in docs]

    async def upsert(
        self,
        workout_id: str,
        season_id: str,
        competition: CompetitionType,
        division: DivisionType,
        name: str,
        description: str,
        score_type: ScoreType
    ) -> Workout:
        """
        Crea el workout si no existe (no pisa uno existente).

        Usado por el seed.
        """
        doc = await self.collection.find_one_and_update(
            {"_id": workout_id},
            {
                "$setOnInsert": {
                    "season_id": season_id,
                    "competition": competition.value,
                    "division": division.value,
                    "name": name,
                    "description": description,
                    "score_type": score_type.value,
                    "created_at": datetime.now(timezone.utc),
                }
            },
            upsert=True,
            return_document=ReturnDocument.AFTER
        )
        return Workout(**doc)
