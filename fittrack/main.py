import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fittrack.api import api_router
from fittrack.config import Settings, get_settings
from fittrack.database import build_engine, create_db_and_tables
from fittrack.errors import register_exception_handlers

logger = logging.getLogger(__name__)

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API bound to ``settings`` and its own database engine."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)

    app = FastAPI(
        title="Fitness Tracker",
        description="Fitness goals, workout plans and progress tracking",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.engine = build_engine(settings)
    create_db_and_tables(app.state.engine)

    # CORS middleware configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    @app.get("/")
    async def root():
        return {"message": "Welcome to Fitness Tracker API"}

    logger.info("Fitness Tracker API ready (%s)", settings.ENVIRONMENT)
    return app
