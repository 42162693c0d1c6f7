"""
Controlador de resultados - Registrar resultados y ver los propios
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from app.core.dependencies import Database
from app.services.result_service import ResultService
from app.services.scoring import IncompleteScoreError
from app.services.user_service import InvalidIdentifierError, UserNotFoundError
from app.services.workout_service import WorkoutNotFoundError
from app.models.result import LogResultCreate
from app.models.score import Score, ScoreType
from app.models.workout import CompetitionType, DivisionType


router = APIRouter(tags=["results"])


class UserRef(BaseModel):
    id: str
    email: str
    name: Optional[str] = None


class ResultResponse(BaseModel):
    """Resultado guardado de un usuario."""
    id: str
    user_id: str
    workout_id: str
    score: Score
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class LogResultResponse(BaseModel):
    user: UserRef
    result: ResultResponse


class WorkoutRef(BaseModel):
    id: str
    name: str
    competition: CompetitionType
    division: DivisionType
    score_type: ScoreType


class MyResultResponse(ResultResponse):
    workout: WorkoutRef


class MeResponse(BaseModel):
    user: UserRef
    created_at: Optional[datetime] = None
    results: list[MyResultResponse]


@router.post("/results", response_model=LogResultResponse)
async def log_result(data: LogResultCreate, db: Database):
    """
    Registrar (o reemplazar) el resultado de un usuario en un workout.

    Si solo se manda el identificador y el usuario no existe, se crea.
    Un segundo envío para el mismo workout reemplaza el anterior.
    """
    result_service = ResultService(db)

    try:
        user, saved = await result_service.log_result(data)
    except WorkoutNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except UserNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except (IncompleteScoreError, InvalidIdentifierError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return LogResultResponse(
        user=UserRef(id=user.id, email=user.email, name=user.name),
        result=ResultResponse(
            id=saved.id,
            user_id=saved.user_id,
            workout_id=saved.workout_id,
            score=Score(**saved.score_fields()),
            created_at=saved.created_at,
            updated_at=saved.updated_at
        )
    )


@router.get("/me", response_model=MeResponse)
async def get_me(
    db: Database,
    email: str = Query(..., description="Email or identifier")
):
    """
    Obtener el usuario y sus últimos resultados.
    """
    result_service = ResultService(db)

    try:
        user, overview = await result_service.get_user_overview(email)
    except InvalidIdentifierError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except UserNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )

    return MeResponse(
        user=UserRef(id=user.id, email=user.email, name=user.name),
        created_at=user.created_at,
        results=[
            MyResultResponse(
                id=r.id,
                user_id=r.user_id,
                workout_id=r.workout_id,
                score=Score(**r.score_fields()),
                created_at=r.created_at,
                updated_at=r.updated_at,
                workout=WorkoutRef(
                    id=w.id,
                    name=w.name,
                    competition=w.competition,
                    division=w.division,
                    score_type=w.score_type
                )
            )
            for r, w in overview
        ]
    )
