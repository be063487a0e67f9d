import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from fittrack.api.auth import get_current_user_id
from fittrack.crud import progress as progress_crud
from fittrack.database import get_session
from fittrack.schemas.progress import ProgressEntryCreate, ProgressEntryResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/progress", tags=["progress"])

@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProgressEntryResponse)
async def track_progress(
    entry: ProgressEntryCreate,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Append an entry to the caller's progress log"""
    try:
        return progress_crud.create_progress_entry(session, entry, user_id)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Failed to track progress for user %s", user_id)
        raise HTTPException(status_code=500, detail="Failed to track progress")

@router.get("", response_model=List[ProgressEntryResponse])
async def get_progress(
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Get the caller's progress log, oldest entry first"""
    try:
        return progress_crud.get_progress_entries(session, user_id)
    except SQLAlchemyError:
        logger.exception("Failed to fetch progress for user %s", user_id)
        raise HTTPException(status_code=500, detail="Failed to fetch progress data")
