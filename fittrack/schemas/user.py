from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime

from fittrack.schemas.base import CamelModel

class UserBase(CamelModel):
    email: EmailStr
    name: str
    age: Optional[int] = Field(default=None, ge=0)
    gender: Optional[str] = None
    height: Optional[float] = Field(default=None, gt=0)
    weight: Optional[float] = Field(default=None, gt=0)
    contact_number: Optional[str] = None

class UserCreate(UserBase):
    password: str = Field(min_length=1)

class UserResponse(UserBase):
    id: str
    created_at: datetime

class TrainerBase(CamelModel):
    email: EmailStr
    name: str
    specialization: Optional[str] = None
    contact_number: Optional[str] = None

class TrainerCreate(TrainerBase):
    password: str = Field(min_length=1)

class TrainerResponse(TrainerBase):
    id: str
    created_at: datetime

class LoginRequest(BaseModel):
    email: str
    password: str

class Token(BaseModel):
    message: str
    token: str

class TokenData(BaseModel):
    subject: str
    role: str
