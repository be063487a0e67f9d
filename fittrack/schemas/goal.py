from typing import Optional
from datetime import datetime

from fittrack.schemas.base import CamelModel

class FitnessGoalBase(CamelModel):
    goal_type: str
    target: float
    timeline: str

class FitnessGoalCreate(FitnessGoalBase):
    pass

class FitnessGoalUpdate(CamelModel):
    goal_type: Optional[str] = None
    target: Optional[float] = None
    timeline: Optional[str] = None

class FitnessGoalResponse(FitnessGoalBase):
    id: str
    user_id: str
    created_at: datetime
    updated_at: datetime
