from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime, date

from fittrack.models.base import new_object_id, utcnow

class ProgressEntry(SQLModel, table=True):
    id: str = Field(default_factory=new_object_id, primary_key=True, max_length=24)
    user_id: str = Field(index=True)
    date: date

    weight: float  # in kg
    body_measurements: Optional[str] = None  # free text, e.g. "Chest: 100cm, Waist: 80cm"
    notes: Optional[str] = None

    created_at: datetime = Field(default_factory=utcnow)
