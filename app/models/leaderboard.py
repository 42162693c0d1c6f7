from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from .score import Score, ScoreType


class WorkoutPoints(BaseModel):
    """Puntos de un usuario en un workout de la temporada"""

    workout_id: str
    points: int
    beaten_count: int
    rank: int


class SeasonSummary(BaseModel):
    """Resumen de temporada (resultado agregado, no se guarda)"""

    total_points: int = 0
    completed_workouts: int = 0
    per_workout: list[WorkoutPoints] = []


class WorkoutComparison(BaseModel):
    """Comparación de un usuario contra el benchmark de un workout"""

    workout_id: str
    workout_name: str
    score_type: ScoreType

    user_score: Score
    benchmark_total: int

    beaten_count: int
    rank: int
    points: int


class LeaderboardEntry(BaseModel):
    """Entrada en el leaderboard de usuarios de un workout"""

    rank: int
    user_id: str
    username: Optional[str] = None
    email: Optional[str] = None

    score: Score
    updated_at: Optional[datetime] = None
