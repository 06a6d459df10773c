import os
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    PROJECT_NAME: str = "Finance Tracker API"
    API_V1_STR: str = "/api/v1"

    # Falls back to the platform-provided DATABASE_URL, SQLite locally
    FINANCE_DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./finance.db")

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

settings = Settings()
