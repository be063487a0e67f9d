from sqlmodel import Session, select
from typing import List, Optional

from fittrack.models.workout_plan import WorkoutPlan
from fittrack.models.base import is_object_id, utcnow
from fittrack.schemas.workout_plan import WorkoutPlanCreate, WorkoutPlanUpdate

def get_plan(session: Session, plan_id: str, trainer_id: str) -> Optional[WorkoutPlan]:
    """Get a workout plan by ID if ``trainer_id`` authored it"""
    if not is_object_id(plan_id):
        return None
    db_plan = session.get(WorkoutPlan, plan_id)
    if db_plan is None or db_plan.trainer_id != trainer_id:
        return None
    return db_plan

def get_plans(session: Session) -> List[WorkoutPlan]:
    """Get all workout plans, oldest first"""
    query = select(WorkoutPlan).order_by(WorkoutPlan.created_at)
    return list(session.exec(query).all())

def create_plan(session: Session, plan: WorkoutPlanCreate, trainer_id: str) -> WorkoutPlan:
    db_plan = WorkoutPlan(**plan.model_dump(), trainer_id=trainer_id)
    session.add(db_plan)
    session.commit()
    session.refresh(db_plan)
    return db_plan

def update_plan(
    session: Session,
    plan_id: str,
    trainer_id: str,
    plan: WorkoutPlanUpdate
) -> Optional[WorkoutPlan]:
    db_plan = get_plan(session, plan_id, trainer_id)
    if not db_plan:
        return None

    for key, value in plan.model_dump(exclude_unset=True).items():
        # description is the only nullable column
        if value is None and key != "description":
            continue
        setattr(db_plan, key, value)
    db_plan.updated_at = utcnow()

    session.add(db_plan)
    session.commit()
    session.refresh(db_plan)
    return db_plan

def delete_plan(session: Session, plan_id: str, trainer_id: str) -> bool:
    db_plan = get_plan(session, plan_id, trainer_id)
    if not db_plan:
        return False

    session.delete(db_plan)
    session.commit()
    return True
