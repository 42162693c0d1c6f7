"""
Controlador de leaderboards - Clasificación de usuarios y benchmark por workout

Todo se calcula en cada request a partir de los resultados guardados.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from app.core.dependencies import Database, AppSettings
from app.services.leaderboard_service import LeaderboardService
from app.services.workout_service import WorkoutNotFoundError
from app.models.benchmark import BenchmarkEntry
from app.models.leaderboard import LeaderboardEntry
from app.models.score import ScoreType


router = APIRouter(tags=["leaderboard"])


class WorkoutInfo(BaseModel):
    id: str
    name: str
    score_type: ScoreType


class LeaderboardResponse(BaseModel):
    """Leaderboard de usuarios de un workout."""
    workout: WorkoutInfo
    leaderboard: list[LeaderboardEntry]


class BenchmarkResponse(BaseModel):
    """Top 40 de un workout ordenado por rank."""
    workout: WorkoutInfo
    benchmark: list[BenchmarkEntry]


@router.get("/leaderboard/workout/{workout_id}", response_model=LeaderboardResponse)
async def get_workout_leaderboard(
    workout_id: str,
    db: Database,
    settings: AppSettings,
    limit: Optional[int] = Query(None, description="Clamped to [1, max]")
):
    """
    Obtener el leaderboard de usuarios de un workout.
    """
    leaderboard_service = LeaderboardService(db)

    try:
        workout, entries = await leaderboard_service.get_workout_leaderboard(
            workout_id,
            limit if limit is not None else settings.leaderboard_default_limit
        )
    except WorkoutNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )

    return LeaderboardResponse(
        workout=WorkoutInfo(id=workout.id, name=workout.name, score_type=workout.score_type),
        leaderboard=entries
    )


@router.get("/benchmark/workout/{workout_id}", response_model=BenchmarkResponse)
async def get_workout_benchmark(workout_id: str, db: Database):
    """
    Obtener los resultados del Top 40 de un workout.
    """
    leaderboard_service = LeaderboardService(db)

    try:
        workout, entries = await leaderboard_service.get_benchmark(workout_id)
    except WorkoutNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )

    return BenchmarkResponse(
        workout=WorkoutInfo(id=workout.id, name=workout.name, score_type=workout.score_type),
        benchmark=entries
    )
