from sqlmodel import SQLModel, Field
from datetime import datetime

from fittrack.models.base import new_object_id, utcnow

class FitnessGoal(SQLModel, table=True):
    id: str = Field(default_factory=new_object_id, primary_key=True, max_length=24)
    # Set from the authenticated identity, never from the request body
    user_id: str = Field(index=True)

    # Goal details
    goal_type: str  # e.g. "Weight Loss", "Muscle Gain"
    target: float
    timeline: str  # e.g. "3 months"

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
