import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from fittrack.api.auth import get_current_user_id
from fittrack.crud import goal as goal_crud
from fittrack.database import get_session
from fittrack.schemas.base import MessageResponse
from fittrack.schemas.goal import FitnessGoalCreate, FitnessGoalUpdate, FitnessGoalResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/fitnessGoals", tags=["fitness-goals"])

GOAL_NOT_FOUND = "Fitness goal not found"

@router.post("", response_model=FitnessGoalResponse)
async def create_goal(
    goal: FitnessGoalCreate,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Create a fitness goal owned by the caller"""
    try:
        return goal_crud.create_goal(session, goal, user_id)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Failed to create fitness goal for user %s", user_id)
        raise HTTPException(status_code=500, detail="Failed to create fitness goal")

@router.get("", response_model=List[FitnessGoalResponse])
async def get_goals(
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """List fitness goals.

    Returns every stored goal, not only the caller's.
    """
    try:
        return goal_crud.get_goals(session)
    except SQLAlchemyError:
        logger.exception("Failed to fetch fitness goals")
        raise HTTPException(status_code=500, detail="Failed to fetch fitness goals")

@router.get("/{goal_id}", response_model=FitnessGoalResponse)
async def get_goal(
    goal_id: str,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    try:
        db_goal = goal_crud.get_goal(session, goal_id, user_id)
    except SQLAlchemyError:
        logger.exception("Failed to fetch fitness goal %s", goal_id)
        raise HTTPException(status_code=500, detail="Failed to fetch fitness goal")
    if not db_goal:
        raise HTTPException(status_code=404, detail=GOAL_NOT_FOUND)
    return db_goal

@router.patch("/{goal_id}", response_model=FitnessGoalResponse)
async def update_goal(
    goal_id: str,
    goal: FitnessGoalUpdate,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Merge the supplied fields into a goal"""
    try:
        db_goal = goal_crud.update_goal(session, goal_id, user_id, goal)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Failed to update fitness goal %s", goal_id)
        raise HTTPException(status_code=500, detail="Failed to update fitness goal")
    if not db_goal:
        raise HTTPException(status_code=404, detail=GOAL_NOT_FOUND)
    return db_goal

@router.delete("/{goal_id}", response_model=MessageResponse)
async def delete_goal(
    goal_id: str,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    try:
        deleted = goal_crud.delete_goal(session, goal_id, user_id)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Failed to delete fitness goal %s", goal_id)
        raise HTTPException(status_code=500, detail="Failed to delete fitness goal")
    if not deleted:
        raise HTTPException(status_code=404, detail=GOAL_NOT_FOUND)
    return {"message": "Fitness goal deleted"}
