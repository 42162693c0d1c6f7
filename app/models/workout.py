from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from .score import ScoreType


class CompetitionType(str, Enum):
    OPEN = "OPEN"
    GAMES = "GAMES"


class DivisionType(str, Enum):
    MEN = "MEN"
    WOMEN = "WOMEN"


class Season(BaseModel):
    """Temporada (un año)"""

    id: str = Field(..., alias="_id")
    year: int

    class Config:
        populate_by_name = True


class Workout(BaseModel):
    """Workout de una temporada, competición y división"""

    id: str = Field(..., alias="_id")
    season_id: str

    competition: CompetitionType
    division: DivisionType

    name: str
    description: str = ""

    score_type: ScoreType

    created_at: Optional[datetime] = None

    class Config:
        populate_by_name = True
