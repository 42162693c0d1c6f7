from motor.motor_asyncio import AsyncIOMotorDatabase

from app.repositories.workout_repository import WorkoutRepository
from app.models.workout import Workout, CompetitionType, DivisionType


class WorkoutServiceError(Exception):
    pass


class WorkoutNotFoundError(WorkoutServiceError):
    pass


class WorkoutService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.workout_repo = WorkoutRepository(db)

    async def get_workout(self, workout_id: str) -> Workout:
        workout = await self.workout_repo.get_by_id(workout_id)
        if not workout:
            raise WorkoutNotFoundError(f"Workout {workout_id} not found")
        return workout

    async def list_workouts(
        self,
        year: int,
        competition: CompetitionType,
        division: DivisionType
    ) -> list[Workout]:
        """Workouts in scope; an unknown season just has none."""
        season = await self.workout_repo.get_season_by_year(year)
        if not season:
            return []
        return await self.workout_repo.get_for_scope(season.id, competition, division)
