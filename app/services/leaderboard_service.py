"""
LeaderboardService - user leaderboard and benchmark listing per workout.

Leaderboards are calculated on-the-fly from user results, sorted with the
same comparator the points use.
"""

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.config import get_settings
from app.repositories.benchmark_repository import BenchmarkRepository
from app.repositories.result_repository import ResultRepository
from app.repositories.user_repository import UserRepository
from app.services.scoring import sort_scores
from app.services.workout_service import WorkoutService
from app.models.score import Score
from app.models.workout import Workout
from app.models.benchmark import BenchmarkEntry
from app.models.leaderboard import LeaderboardEntry


def clamp_limit(limit: int) -> int:
    """Keep a requested limit inside [1, leaderboard_max_limit]."""
    return max(1, min(get_settings().leaderboard_max_limit, limit))


class LeaderboardService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.workout_service = WorkoutService(db)
        self.result_repo = ResultRepository(db)
        self.user_repo = UserRepository(db)
        self.benchmark_repo = BenchmarkRepository(db)

    async def get_workout_leaderboard(
        self,
        workout_id: str,
        limit: int = 50
    ) -> tuple[Workout, list[LeaderboardEntry]]:
        """
        Get the user leaderboard for a workout.

        Ties keep storage order (stable sort); ranks are plain positions.
        """
        workout = await self.workout_service.get_workout(workout_id)
        results = await self.result_repo.get_results_for_workout(workout_id)

        results = sort_scores(workout.score_type, results)[:clamp_limit(limit)]

        users = await self.user_repo.get_many([r.user_id for r in results])

        entries = []
        for idx, result in enumerate(results):
            user = users.get(result.user_id)
            entries.append(LeaderboardEntry(
                rank=idx + 1,
                user_id=result.user_id,
                username=user.name if user else None,
                email=user.email if user else None,
                score=Score(**result.score_fields()),
                updated_at=result.updated_at or result.created_at,
            ))

        return workout, entries

    async def get_benchmark(self, workout_id: str) -> tuple[Workout, list[BenchmarkEntry]]:
        """Get the Top 40 results for a workout, ordered by athlete rank."""
        workout = await self.workout_service.get_workout(workout_id)
        entries = await self.benchmark_repo.get_entries_for_workout(workout_id)
        return workout, entries
