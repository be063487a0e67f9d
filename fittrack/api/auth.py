import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from fittrack.config import Settings
from fittrack.crud import user as user_crud
from fittrack.database import get_session
from fittrack.schemas.base import MessageResponse
from fittrack.schemas.user import (
    UserCreate,
    UserResponse,
    TrainerCreate,
    LoginRequest,
    Token,
)
from fittrack.security import (
    USER_ROLE,
    TRAINER_ROLE,
    TokenError,
    create_access_token,
    decode_access_token,
    verify_password,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

bearer_scheme = HTTPBearer(auto_error=False)

AUTH_FAILED = "Authentication failed"


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=message,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _authenticate(
    credentials: Optional[HTTPAuthorizationCredentials],
    settings: Settings,
    role: str
) -> str:
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Authentication required")
    try:
        token_data = decode_access_token(credentials.credentials, settings)
    except TokenError as e:
        logger.debug("Rejected %s token: %s", role, e)
        raise _unauthorized(str(e))
    if token_data.role != role:
        logger.debug("Rejected %s token presented for %s route", token_data.role, role)
        raise _unauthorized("Invalid token")
    return token_data.subject


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_app_settings)
) -> str:
    """Identity of the user presenting the bearer token."""
    return _authenticate(credentials, settings, USER_ROLE)


def get_current_trainer_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_app_settings)
) -> str:
    """Identity of the trainer presenting the bearer token."""
    return _authenticate(credentials, settings, TRAINER_ROLE)


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=MessageResponse)
def signup(
    user: UserCreate,
    session: Session = Depends(get_session)
):
    """Register a new user"""
    try:
        user_crud.create_user(session, user)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Failed to register user")
        raise HTTPException(status_code=500, detail="Failed to register user")
    return {"message": "User registered successfully"}


@router.post("/login", status_code=status.HTTP_201_CREATED, response_model=Token)
def login(
    credentials: LoginRequest,
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_app_settings)
):
    """Exchange email and password for a bearer token"""
    try:
        db_user = user_crud.get_user_by_email(session, credentials.email)
    except SQLAlchemyError:
        logger.exception("User lookup failed during login")
        raise HTTPException(status_code=500, detail=AUTH_FAILED)

    if not db_user or not verify_password(credentials.password, db_user.hashed_password):
        logger.info("Failed login attempt")
        raise HTTPException(status_code=401, detail=AUTH_FAILED)

    token = create_access_token(db_user.id, USER_ROLE, settings)
    return {"message": "Login Successful", "token": token}


@router.get("/profile", response_model=UserResponse)
def get_profile(
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Get the authenticated user's profile"""
    db_user = user_crud.get_user(session, user_id)
    if not db_user:
        raise HTTPException(status_code=404, detail="User not found")
    return db_user


@router.post("/trainers/signup", status_code=status.HTTP_201_CREATED, response_model=MessageResponse)
def trainer_signup(
    trainer: TrainerCreate,
    session: Session = Depends(get_session)
):
    """Register a new trainer"""
    try:
        user_crud.create_trainer(session, trainer)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Failed to register trainer")
        raise HTTPException(status_code=500, detail="Failed to register trainer")
    return {"message": "Trainer registered successfully"}


@router.post("/trainers/login", status_code=status.HTTP_201_CREATED, response_model=Token)
def trainer_login(
    credentials: LoginRequest,
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_app_settings)
):
    """Exchange trainer email and password for a bearer token"""
    try:
        db_trainer = user_crud.get_trainer_by_email(session, credentials.email)
    except SQLAlchemyError:
        logger.exception("Trainer lookup failed during login")
        raise HTTPException(status_code=500, detail=AUTH_FAILED)

    if not db_trainer or not verify_password(credentials.password, db_trainer.hashed_password):
        logger.info("Failed trainer login attempt")
        raise HTTPException(status_code=401, detail=AUTH_FAILED)

    token = create_access_token(db_trainer.id, TRAINER_ROLE, settings)
    return {"message": "Login Successful", "token": token}
