"""
Controlador de comparación - Usuario vs Top 40 y resumen de temporada
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from app.core.dependencies import Database
from app.services.points_service import PointsService, ResultNotFoundError
from app.services.scoring import ScoringError
from app.services.user_service import InvalidIdentifierError, UserNotFoundError
from app.services.workout_service import WorkoutNotFoundError
from app.models.leaderboard import WorkoutComparison, WorkoutPoints
from app.models.workout import CompetitionType, DivisionType


router = APIRouter(tags=["compare"])


class SummaryResponse(BaseModel):
    """Resumen de temporada del usuario."""
    season: int
    competition: CompetitionType
    division: DivisionType
    completed_workouts: int
    total_points: int
    per_workout: list[WorkoutPoints]


def _user_error_to_http(e: Exception) -> HTTPException:
    if isinstance(e, InvalidIdentifierError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/compare/workout/{workout_id}", response_model=WorkoutComparison)
async def compare_workout(
    workout_id: str,
    db: Database,
    user_id: Optional[str] = Query(None),
    email: Optional[str] = Query(None, description="Email or identifier")
):
    """
    Comparar el resultado del usuario con el Top 40 de un workout.

    Devuelve cuántos del benchmark supera, su posición y los puntos.
    """
    points_service = PointsService(db)

    try:
        return await points_service.compare_workout(workout_id, user_id, email)
    except (InvalidIdentifierError, UserNotFoundError) as e:
        raise _user_error_to_http(e)
    except (WorkoutNotFoundError, ResultNotFoundError) as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except ScoringError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )


@router.get("/summary", response_model=SummaryResponse)
async def get_summary(
    db: Database,
    season: int = Query(..., description="Season year"),
    competition: CompetitionType = Query(...),
    division: DivisionType = Query(...),
    user_id: Optional[str] = Query(None),
    email: Optional[str] = Query(None, description="Email or identifier")
):
    """
    Obtener el resumen de puntos del usuario en una temporada.

    Los workouts sin resultado no aparecen (no cuentan como 0).
    """
    points_service = PointsService(db)

    try:
        summary = await points_service.get_season_summary(
            season, competition, division, user_id, email
        )
    except (InvalidIdentifierError, UserNotFoundError) as e:
        raise _user_error_to_http(e)
    except ScoringError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )

    return SummaryResponse(
        season=season,
        competition=competition,
        division=division,
        completed_workouts=summary.completed_workouts,
        total_points=summary.total_points,
        per_workout=summary.per_workout
    )
