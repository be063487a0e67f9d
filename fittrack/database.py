from typing import Iterator

from fastapi import Request
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session

from fittrack.config import Settings

def build_engine(settings: Settings):
    """Create the engine for ``settings.DATABASE_URL``."""
    url = settings.DATABASE_URL
    kwargs = {"echo": settings.DEBUG}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        # In-memory databases live on a single connection
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)

def create_db_and_tables(engine):
    # Register every table on the metadata before creating
    import fittrack.models  # noqa: F401
    SQLModel.metadata.create_all(engine)

def get_session(request: Request) -> Iterator[Session]:
    with Session(request.app.state.engine) as session:
        yield session
