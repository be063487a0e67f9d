from pydantic import Field
from typing import Optional
from datetime import date, datetime

from fittrack.schemas.base import CamelModel

class ProgressEntryCreate(CamelModel):
    date: date
    weight: float = Field(gt=0)  # kg
    body_measurements: Optional[str] = None
    notes: Optional[str] = None

class ProgressEntryResponse(ProgressEntryCreate):
    id: str
    user_id: str
    created_at: datetime
