from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime

from fittrack.models.base import new_object_id, utcnow

class WorkoutPlan(SQLModel, table=True):
    """Workout plan authored by a trainer"""
    id: str = Field(default_factory=new_object_id, primary_key=True, max_length=24)
    trainer_id: str = Field(index=True)

    plan_name: str
    goal: str
    duration: str  # e.g. "4 weeks"
    description: Optional[str] = None

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
