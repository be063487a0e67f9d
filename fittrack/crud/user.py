from sqlmodel import Session, select
from typing import Optional

from fittrack.models.user import User, Trainer
from fittrack.models.base import is_object_id
from fittrack.schemas.user import UserCreate, TrainerCreate
from fittrack.security import hash_password

def get_user(session: Session, user_id: str) -> Optional[User]:
    """Get a user by ID"""
    if not is_object_id(user_id):
        return None
    return session.get(User, user_id)

def get_user_by_email(session: Session, email: str) -> Optional[User]:
    """Get a user by email"""
    return session.exec(select(User).where(User.email == email)).first()

def create_user(session: Session, user: UserCreate) -> User:
    """Create a new user with a hashed password"""
    data = user.model_dump(exclude={"password"})
    db_user = User(**data, hashed_password=hash_password(user.password))
    session.add(db_user)
    session.commit()
    session.refresh(db_user)
    return db_user

def get_trainer(session: Session, trainer_id: str) -> Optional[Trainer]:
    if not is_object_id(trainer_id):
        return None
    return session.get(Trainer, trainer_id)

def get_trainer_by_email(session: Session, email: str) -> Optional[Trainer]:
    return session.exec(select(Trainer).where(Trainer.email == email)).first()

def create_trainer(session: Session, trainer: TrainerCreate) -> Trainer:
    data = trainer.model_dump(exclude={"password"})
    db_trainer = Trainer(**data, hashed_password=hash_password(trainer.password))
    session.add(db_trainer)
    session.commit()
    session.refresh(db_trainer)
    return db_trainer
