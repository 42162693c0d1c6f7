"""
ResultService - Business logic for logging workout results.

Handles validation against the workout's score type, user resolution
and the per (user, workout) upsert.
"""

import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.config import get_settings
from app.repositories.result_repository import ResultRepository
from app.repositories.workout_repository import WorkoutRepository
from app.services.scoring import validate_score, IncompleteScoreError
from app.services.user_service import UserService
from app.services.workout_service import WorkoutNotFoundError
from app.models.score import Score
from app.models.user import User
from app.models.workout import Workout
from app.models.result import UserResult, LogResultCreate

logger = logging.getLogger(__name__)


class ResultService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.result_repo = ResultRepository(db)
        self.workout_repo = WorkoutRepository(db)
        self.user_service = UserService(db)

    async def log_result(self, data: LogResultCreate) -> tuple[User, UserResult]:
        """
        Create or replace a user's result for a workout.

        Validates:
        - Workout exists
        - Score has the field the workout's score type requires

        Nothing is written when validation fails.

        Returns: (user, saved result)
        Raises: WorkoutNotFoundError, IncompleteScoreError,
                InvalidIdentifierError, UserNotFoundError
        """
        workout = await self.workout_repo.get_by_id(data.workout_id)
        if not workout:
            raise WorkoutNotFoundError(f"Workout {data.workout_id} not found")

        score = Score(**data.score_fields())
        try:
            validate_score(workout.score_type, score)
        except IncompleteScoreError as e:
            logger.warning(f"⚠️ Rejected result for workout {workout.id}: {e}")
            raise

        user = await self.user_service.get_or_create(data.user_id, data.email)

        saved = await self.result_repo.upsert(user.id, workout.id, score)
        logger.info(f"✅ Saved result {saved.id}")

        return user, saved

    async def get_user_overview(
        self,
        raw_identifier: str
    ) -> tuple[User, list[tuple[UserResult, Workout]]]:
        """
        User plus their latest results, each with its workout.

        Results whose workout no longer exists are left out.
        """
        user = await self.user_service.get_by_identifier(raw_identifier)

        limit = get_settings().recent_results_limit
        results = await self.result_repo.get_recent_for_user(user.id, limit)

        overview = []
        for result in results:
            workout = await self.workout_repo.get_by_id(result.workout_id)
            if workout:
                overview.append((result, workout))

        return user, overview
