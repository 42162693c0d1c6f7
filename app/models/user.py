from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class User(BaseModel):
    id: str = Field(..., alias="_id")
    email: str  # identificador normalizado (email, usuario, etc.)
    name: Optional[str] = None

    created_at: Optional[datetime] = None

    class Config:
        populate_by_name = True
