from sqlmodel import Session, select
from typing import List

from fittrack.models.progress import ProgressEntry
from fittrack.schemas.progress import ProgressEntryCreate

def get_progress_entries(session: Session, user_id: str) -> List[ProgressEntry]:
    """Get a user's progress log in chronological order"""
    query = select(ProgressEntry).where(
        ProgressEntry.user_id == user_id
    ).order_by(ProgressEntry.date, ProgressEntry.created_at)
    return list(session.exec(query).all())

def create_progress_entry(
    session: Session,
    entry: ProgressEntryCreate,
    user_id: str
) -> ProgressEntry:
    """Append an entry to a user's progress log"""
    db_entry = ProgressEntry(**entry.model_dump(), user_id=user_id)
    session.add(db_entry)
    session.commit()
    session.refresh(db_entry)
    return db_entry
