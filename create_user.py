from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from fittrack.config import get_settings
from fittrack.crud.user import create_user, create_trainer
from fittrack.database import build_engine, create_db_and_tables
from fittrack.schemas.user import UserCreate, TrainerCreate

def create_initial_users():
    engine = build_engine(get_settings())
    create_db_and_tables(engine)
    user_data = UserCreate(
        email="demo.user@example.com",
        password="demo1234",
        name="Demo User",
        age=30,
        gender="Male",
        height=180.0,
        weight=75.0,
        contact_number="1234567890"
    )
    trainer_data = TrainerCreate(
        email="demo.trainer@example.com",
        password="demo1234",
        name="Demo Trainer",
        specialization="Strength"
    )
    with Session(engine) as session:
        try:
            user = create_user(session, user_data)
            print(f"User created successfully: {user.email}")
            trainer = create_trainer(session, trainer_data)
            print(f"Trainer created successfully: {trainer.email}")
        except SQLAlchemyError as e:
            print(f"Error creating demo accounts: {e}")

if __name__ == "__main__":
    create_initial_users()
