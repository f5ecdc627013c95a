# storefront/config.py
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"


class Settings(BaseSettings):
    SECRET_KEY: str = "dev-secret-change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    DATABASE_URL: str = "sqlite:///./storefront.db"

    FRONTEND_URL: Optional[str] = None

    # Base URL the async client talks to
    API_URL: str = "http://127.0.0.1:8000"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=str(env_path), extra="ignore")


settings = Settings()
