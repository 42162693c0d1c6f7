"""
Controlador de workouts - Lista de workouts por temporada
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel

from app.core.dependencies import Database
from app.services.workout_service import WorkoutService
from app.models.score import ScoreType
from app.models.workout import CompetitionType, DivisionType


router = APIRouter(prefix="/workouts", tags=["workouts"])


class WorkoutResponse(BaseModel):
    """Datos del workout devueltos por la API."""
    id: str
    name: str
    description: str
    competition: CompetitionType
    division: DivisionType
    score_type: ScoreType
    created_at: Optional[datetime] = None


class WorkoutListResponse(BaseModel):
    workouts: list[WorkoutResponse]


@router.get("", response_model=WorkoutListResponse)
async def get_workouts(
    db: Database,
    season: int = Query(..., description="Season year, e.g. 2026"),
    competition: CompetitionType = Query(...),
    division: DivisionType = Query(...)
):
    """
    Obtener los workouts de una temporada, competición y división.

    Si la temporada no existe devuelve una lista vacía.
    """
    workout_service = WorkoutService(db)
    workouts = await workout_service.list_workouts(season, competition, division)

    return WorkoutListResponse(
        workouts=[
            WorkoutResponse(
                id=w.id,
                name=w.name,
                description=w.description,
                competition=w.competition,
                division=w.division,
                score_type=w.score_type,
                created_at=w.created_at
            )
            for w in workouts
        ]
    )
