"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    APP_NAME: str = "CareerPath"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENV: str = "development"

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./careerpath.db"
    DATABASE_ECHO: bool = False

    # Identity (sign-in is handled by the external identity provider)
    DEFAULT_USER_ID: str = "guest"
    USER_ID_HEADER: str = "X-User-Id"

    # Market insights shown alongside a skill gap analysis
    MARKET_INSIGHT_LIMIT: int = 5

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENV == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
