from typing import Optional
from datetime import datetime

from fittrack.schemas.base import CamelModel

class WorkoutPlanBase(CamelModel):
    plan_name: str
    goal: str
    duration: str
    description: Optional[str] = None

class WorkoutPlanCreate(WorkoutPlanBase):
    pass

class WorkoutPlanUpdate(CamelModel):
    plan_name: Optional[str] = None
    goal: Optional[str] = None
    duration: Optional[str] = None
    description: Optional[str] = None

class WorkoutPlanResponse(WorkoutPlanBase):
    id: str
    trainer_id: str
    created_at: datetime
    updated_at: datetime
