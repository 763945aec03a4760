"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Prediction backend
    PREDICTION_URL: str = "https://ucs-backend-production.up.railway.app/predict"
    PREDICTION_TIMEOUT_SECONDS: float = 30.0

    # Submission policy
    REQUIRE_PI: bool = False

    # Constraint limits
    CLAY_SILT_MIN: float = 50.0
    CLAY_SILT_MAX: float = 100.0
    MIXING_MAX: float = 12.0

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "info"
    CORS_ORIGINS: list[str] = ["*"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
