from sqlmodel import Session, select
from typing import List, Optional

from fittrack.models.goal import FitnessGoal
from fittrack.models.base import is_object_id, utcnow
from fittrack.schemas.goal import FitnessGoalCreate, FitnessGoalUpdate

def get_goal(session: Session, goal_id: str, user_id: str) -> Optional[FitnessGoal]:
    """Get a goal by ID if it belongs to ``user_id``.

    Malformed identifiers are reported the same way as missing ones.
    """
    if not is_object_id(goal_id):
        return None
    db_goal = session.get(FitnessGoal, goal_id)
    if db_goal is None or db_goal.user_id != user_id:
        return None
    return db_goal

def get_goals(session: Session) -> List[FitnessGoal]:
    """Get every stored goal, oldest first"""
    query = select(FitnessGoal).order_by(FitnessGoal.created_at)
    return list(session.exec(query).all())

def create_goal(session: Session, goal: FitnessGoalCreate, user_id: str) -> FitnessGoal:
    """Create a goal owned by ``user_id``"""
    db_goal = FitnessGoal(**goal.model_dump(), user_id=user_id)
    session.add(db_goal)
    session.commit()
    session.refresh(db_goal)
    return db_goal

def update_goal(
    session: Session,
    goal_id: str,
    user_id: str,
    goal: FitnessGoalUpdate
) -> Optional[FitnessGoal]:
    """Merge the supplied fields into an existing goal"""
    db_goal = get_goal(session, goal_id, user_id)
    if not db_goal:
        return None

    for key, value in goal.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(db_goal, key, value)
    db_goal.updated_at = utcnow()

    session.add(db_goal)
    session.commit()
    session.refresh(db_goal)
    return db_goal

def delete_goal(session: Session, goal_id: str, user_id: str) -> bool:
    """Delete a goal"""
    db_goal = get_goal(session, goal_id, user_id)
    if not db_goal:
        return False

    session.delete(db_goal)
    session.commit()
    return True
