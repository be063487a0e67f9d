import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from fittrack.api.auth import get_current_trainer_id
from fittrack.crud import workout_plan as plan_crud
from fittrack.database import get_session
from fittrack.schemas.base import MessageResponse
from fittrack.schemas.workout_plan import (
    WorkoutPlanCreate,
    WorkoutPlanUpdate,
    WorkoutPlanResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/workoutPlans", tags=["workout-plans"])

PLAN_NOT_FOUND = "Workout plan not found"

@router.post("/createPlan", status_code=status.HTTP_201_CREATED, response_model=WorkoutPlanResponse)
async def create_plan(
    plan: WorkoutPlanCreate,
    trainer_id: str = Depends(get_current_trainer_id),
    session: Session = Depends(get_session)
):
    """Create a workout plan authored by the calling trainer"""
    try:
        return plan_crud.create_plan(session, plan, trainer_id)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Failed to create workout plan for trainer %s", trainer_id)
        raise HTTPException(status_code=400, detail="Error creating workout plan")

@router.get("/workoutPlans", response_model=List[WorkoutPlanResponse])
async def get_plans(
    trainer_id: str = Depends(get_current_trainer_id),
    session: Session = Depends(get_session)
):
    """List all workout plans"""
    try:
        return plan_crud.get_plans(session)
    except SQLAlchemyError:
        logger.exception("Failed to fetch workout plans")
        raise HTTPException(status_code=500, detail="Error fetching workout plans")

# Declared after the fixed paths above so they take precedence
@router.get("/{plan_id}", response_model=WorkoutPlanResponse)
async def get_plan(
    plan_id: str,
    trainer_id: str = Depends(get_current_trainer_id),
    session: Session = Depends(get_session)
):
    try:
        db_plan = plan_crud.get_plan(session, plan_id, trainer_id)
    except SQLAlchemyError:
        logger.exception("Failed to fetch workout plan %s", plan_id)
        raise HTTPException(status_code=500, detail="Error fetching workout plan")
    if not db_plan:
        raise HTTPException(status_code=404, detail=PLAN_NOT_FOUND)
    return db_plan

@router.patch("/{plan_id}", response_model=WorkoutPlanResponse)
async def update_plan(
    plan_id: str,
    plan: WorkoutPlanUpdate,
    trainer_id: str = Depends(get_current_trainer_id),
    session: Session = Depends(get_session)
):
    try:
        db_plan = plan_crud.update_plan(session, plan_id, trainer_id, plan)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Failed to update workout plan %s", plan_id)
        raise HTTPException(status_code=500, detail="Error updating workout plan")
    if not db_plan:
        raise HTTPException(status_code=404, detail=PLAN_NOT_FOUND)
    return db_plan

@router.delete("/{plan_id}", response_model=MessageResponse)
async def delete_plan(
    plan_id: str,
    trainer_id: str = Depends(get_current_trainer_id),
    session: Session = Depends(get_session)
):
    try:
        deleted = plan_crud.delete_plan(session, plan_id, trainer_id)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Failed to delete workout plan %s", plan_id)
        raise HTTPException(status_code=500, detail="Error deleting workout plan")
    if not deleted:
        raise HTTPException(status_code=404, detail=PLAN_NOT_FOUND)
    return {"message": "Workout plan deleted"}
