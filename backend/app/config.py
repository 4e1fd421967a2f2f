"""Application configuration via environment variables."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from .env or environment."""

    DATABASE_URL: str = "sqlite:///./event_planner.db"
    CORS_ORIGINS: str = "http://localhost:3000"
    LOG_LEVEL: str = "INFO"
    # Restrict GET /events/{id}/comments to the organizer and invitees.
    COMMENTS_REQUIRE_MEMBERSHIP: bool = False

    class Config:
        env_file = ".env"


settings = Settings()
