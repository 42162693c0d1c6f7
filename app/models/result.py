from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, model_validator

from .score import Score


class UserResult(Score):
    """
    Resultado de un usuario para un workout.

    Solo existe uno por (user_id, workout_id): un segundo envío lo reemplaza.
    """

    id: str = Field(..., alias="_id")  # user_id:workout_id

    user_id: str
    workout_id: str

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class LogResultCreate(Score):
    """Body de POST /results"""

    user_id: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, max_length=200)  # email o cualquier identificador
    workout_id: str = Field(..., min_length=1)

    time_seconds: Optional[int] = Field(None, gt=0)

    @model_validator(mode="after")
    def check_user_reference(self) -> "LogResultCreate":
        if not self.user_id and not (self.email or "").strip():
            raise ValueError("user_id or email is required")
        return self
