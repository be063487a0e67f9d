from fastapi import APIRouter
from fittrack.api import (
    auth,
    goal,
    workout_plan,
    progress
)

api_router = APIRouter()

# Include all routers
api_router.include_router(auth.router)
api_router.include_router(goal.router)
api_router.include_router(workout_plan.router)
api_router.include_router(progress.router)
