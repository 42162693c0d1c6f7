"""
BenchmarkRepository - Top 40 athletes and their results per workout.

Benchmark data is read-only for the API; only the seed writes it.
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from app.models.score import Score
from app.models.workout import CompetitionType, DivisionType
from app.models.benchmark import BenchmarkAthlete, BenchmarkResult, BenchmarkEntry


class BenchmarkRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.athletes = db["benchmark_athletes"]
        self.results = db["benchmark_results"]

    async def get_scores_for_workout(self, workout_id: str) -> list[BenchmarkResult]:
        """All benchmark results for a workout (unordered)."""
        cursor = self.results.find({"workout_id": workout_id})
        docs = await cursor.to_list(length=None)
        return [BenchmarkResult(**doc) for doc in docs]

    async def get_scores_for_workouts(
        self,
        workout_ids: list[str]
    ) -> dict[str, list[BenchmarkResult]]:
        """Benchmark results for several workouts, keyed by workout ID."""
        by_workout: dict[str, list[BenchmarkResult]] = {workout_id: [] for workout_id in workout_ids}
        if not workout_ids:
            return by_workout

        cursor = self.results.find({"workout_id": {"$in": workout_ids}})
        docs = await cursor.to_list(length=None)

        for doc in docs:
            by_workout[doc["workout_id"]].append(BenchmarkResult(**doc))

        return by_workout

    async def get_entries_for_workout(self, workout_id: str) -> list[BenchmarkEntry]:
        """Benchmark results joined with their athlete, sorted by athlete rank."""
        results = await self.get_scores_for_workout(workout_id)

        athlete_ids = [r.athlete_id for r in results]
        cursor = self.athletes.find({"_id": {"$in": athlete_ids}})
        athletes = {doc["_id"]: BenchmarkAthlete(**doc) for doc in await cursor.to_list(length=None)}

        entries = []
        for result in results:
            athlete = athletes.get(result.athlete_id)
            if athlete is None:
                continue
            entries.append(BenchmarkEntry(
                rank=athlete.rank,
                name=athlete.name,
                athlete_id=athlete.id,
                score=Score(**result.score_fields()),
            ))

        entries.sort(key=lambda e: e.rank)
        return entries

    # ============================================
    # 📌 SEED
    # ============================================

    async def upsert_athlete(
        self,
        season_id: str,
        competition: CompetitionType,
        division: DivisionType,
        rank: int,
        name: str
    ) -> BenchmarkAthlete:
        """Create the athlete holding a rank if it doesn't exist yet."""
        athlete_id = f"{season_id}:{competition.value}:{division.value}:{rank}"

        doc = await self.athletes.find_one_and_update(
            {"_id": athlete_id},
            {
                "$setOnInsert": {
                    "season_id": season_id,
                    "competition": competition.value,
                    "division": division.value,
                    "rank": rank,
                    "name": name,
                }
            },
            upsert=True,
            return_document=ReturnDocument.AFTER
        )
        return BenchmarkAthlete(**doc)

    async def upsert_result(
        self,
        workout_id: str,
        athlete_id: str,
        score: Score
    ) -> Optional[BenchmarkResult]:
        """Create or overwrite an athlete's result for a workout."""
        doc = await self.results.find_one_and_update(
            {"_id": f"{workout_id}:{athlete_id}"},
            {
                "$set": score.score_fields(),
                "$setOnInsert": {"workout_id": workout_id, "athlete_id": athlete_id},
            },
            upsert=True,
            return_document=ReturnDocument.AFTER
        )
        return BenchmarkResult(**doc) if doc else None
