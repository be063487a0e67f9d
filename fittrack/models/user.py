from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime

from fittrack.models.base import new_object_id, utcnow

class User(SQLModel, table=True):
    id: str = Field(default_factory=new_object_id, primary_key=True, max_length=24)
    email: str = Field(unique=True, index=True)
    hashed_password: str

    # Profile information
    name: str
    age: Optional[int] = None
    gender: Optional[str] = None
    height: Optional[float] = None  # in cm
    weight: Optional[float] = None  # in kg
    contact_number: Optional[str] = None

    created_at: datetime = Field(default_factory=utcnow)

class Trainer(SQLModel, table=True):
    """Author of workout plans; authenticates separately from users"""
    id: str = Field(default_factory=new_object_id, primary_key=True, max_length=24)
    email: str = Field(unique=True, index=True)
    hashed_password: str

    name: str
    specialization: Optional[str] = None
    contact_number: Optional[str] = None

    created_at: datetime = Field(default_factory=utcnow)
