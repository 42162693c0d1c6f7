from typing import Optional
from pydantic import BaseModel, Field

from .score import Score
from .workout import CompetitionType, DivisionType


class BenchmarkAthlete(BaseModel):
    """Atleta del Top 40 (rank asignado externamente)"""

    id: str = Field(..., alias="_id")
    season_id: str
    competition: CompetitionType
    division: DivisionType

    rank: int
    name: str

    class Config:
        populate_by_name = True


class BenchmarkResult(Score):
    """Resultado de un atleta benchmark en un workout"""

    id: str = Field(..., alias="_id")  # workout_id:athlete_id
    workout_id: str
    athlete_id: str


class BenchmarkEntry(BaseModel):
    """Fila del benchmark tal y como se muestra (atleta + resultado)"""

    rank: int
    name: str
    score: Score
    athlete_id: Optional[str] = None
