from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class ScoreType(str, Enum):
    """Disciplina de puntuación de un workout"""

    TIME = "TIME"            # menos tiempo gana
    REPS = "REPS"            # más reps gana
    LOAD = "LOAD"            # más carga gana
    TIME_REPS = "TIME_REPS"  # más reps gana, el tiempo desempata


class Score(BaseModel):
    """
    Resultado crudo de un atleta en un workout.

    Un campo ausente (None) NO es lo mismo que cero.
    """

    time_seconds: Optional[int] = Field(None, ge=0)
    reps: Optional[int] = Field(None, ge=0)
    load_kg: Optional[float] = Field(None, gt=0)

    # Se acepta y se guarda, pero el comparador no lo usa
    tiebreak_secs: Optional[int] = Field(None, ge=0)

    class Config:
        populate_by_name = True

    def score_fields(self) -> dict:
        return {
            "time_seconds": self.time_seconds,
            "reps": self.reps,
            "load_kg": self.load_kg,
            "tiebreak_secs": self.tiebreak_secs,
        }


class RankResult(BaseModel):
    """Posición de un usuario frente a la población benchmark (no se guarda)"""

    beaten_count: int
    rank: int
    points: int
