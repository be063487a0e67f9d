from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./fittrack.db"
    SECRET_KEY: str = "change-me-development-secret-key-0000"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # Frontend
    API_URL: str = "http://localhost:8000"
    REQUEST_TIMEOUT: float = 10.0

    class Config:
        env_file = ".env"

@lru_cache()
def get_settings():
    return Settings()
