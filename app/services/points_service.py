"""
Servicio de Puntos - compara resultados contra el Top 40 y suma la temporada

Sistema de puntos (ver app.services.scoring):
- Rank 1 entre benchmark + usuario: 40 puntos
- Cada posición peor: 1 punto menos
- Rank 41 o peor: 0 puntos

Total posible: 40 puntos por workout
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.repositories.benchmark_repository import BenchmarkRepository
from app.repositories.result_repository import ResultRepository
from app.repositories.workout_repository import WorkoutRepository
from app.services.scoring import IncompleteScoreError, score_against_benchmark, summarize_season
from app.services.user_service import UserService
from app.services.workout_service import WorkoutNotFoundError
from app.models.score import Score
from app.models.workout import CompetitionType, DivisionType
from app.models.leaderboard import SeasonSummary, WorkoutComparison


logger = logging.getLogger(__name__)


class PointsServiceError(Exception):
    """Base exception for points service errors."""
    pass


class ResultNotFoundError(PointsServiceError):
    """Raised when the user has no result for the workout."""
    pass


class PointsService:
    """
    Servicio para calcular puntos de un usuario.

    No guarda nada: cada consulta recalcula desde los resultados.
    """

    def __init__(self, db: AsyncIOMotorDatabase):
        self.workout_repo = WorkoutRepository(db)
        self.benchmark_repo = BenchmarkRepository(db)
        self.result_repo = ResultRepository(db)
        self.user_service = UserService(db)

    async def compare_workout(
        self,
        workout_id: str,
        user_id: Optional[str] = None,
        email: Optional[str] = None
    ) -> WorkoutComparison:
        """
        Comparar el resultado de un usuario con el benchmark de un workout.

        Raises: InvalidIdentifierError, UserNotFoundError,
                WorkoutNotFoundError, ResultNotFoundError,
                IncompleteScoreError (datos guardados incompletos)
        """
        resolved_user_id = await self.user_service.resolve_user_id(user_id, email)

        workout = await self.workout_repo.get_by_id(workout_id)
        if not workout:
            raise WorkoutNotFoundError(f"Workout {workout_id} not found")

        user_result = await self.result_repo.get_user_result(resolved_user_id, workout_id)
        if not user_result:
            raise ResultNotFoundError("No user result for workout")

        benchmark = await self.benchmark_repo.get_scores_for_workout(workout_id)
        try:
            ranking = score_against_benchmark(workout.score_type, user_result, benchmark)
        except IncompleteScoreError as e:
            logger.warning(f"⚠️ Stored scores for workout {workout_id} are incomplete: {e}")
            raise IncompleteScoreError(e.score_type, e.missing_field, workout_id) from e

        return WorkoutComparison(
            workout_id=workout.id,
            workout_name=workout.name,
            score_type=workout.score_type,
            user_score=Score(**user_result.score_fields()),
            benchmark_total=len(benchmark),
            beaten_count=ranking.beaten_count,
            rank=ranking.rank,
            points=ranking.points,
        )

    async def get_season_summary(
        self,
        year: int,
        competition: CompetitionType,
        division: DivisionType,
        user_id: Optional[str] = None,
        email: Optional[str] = None
    ) -> SeasonSummary:
        """
        Resumen de puntos de un usuario en una temporada/competición/división.

        1. Resuelve el usuario
        2. Busca los workouts del scope (temporada inexistente -> resumen vacío)
        3. Carga resultados del usuario y benchmark de esos workouts
        4. Delega el cálculo en summarize_season
        """
        resolved_user_id = await self.user_service.resolve_user_id(user_id, email)

        season = await self.workout_repo.get_season_by_year(year)
        if not season:
            return SeasonSummary()

        workouts = await self.workout_repo.get_for_scope(season.id, competition, division)
        workout_ids = [w.id for w in workouts]

        user_results = await self.result_repo.get_user_results_for_workouts(
            resolved_user_id, workout_ids
        )
        # Solo hace falta el benchmark de los workouts que el usuario hizo
        benchmark = await self.benchmark_repo.get_scores_for_workouts(list(user_results))

        try:
            return summarize_season(
                [(w.id, w.score_type) for w in workouts],
                user_results,
                benchmark,
            )
        except IncompleteScoreError as e:
            logger.warning(f"⚠️ Season {year} summary hit incomplete stored scores: {e}")
            raise
