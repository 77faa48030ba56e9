from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.constants import AIModels, PLACEHOLDER_API_KEYS


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3001

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./saved_tweets.db"
    DATABASE_ECHO: bool = False

    # OpenAI
    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = AIModels.REMIX_MODEL

    # App
    FRONTEND_URL: str = "http://localhost:5173"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # API
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Content Remixer"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def openai_configured(self) -> bool:
        """True when a usable (non-placeholder) OpenAI key is set."""
        key = self.OPENAI_API_KEY.strip()
        return bool(key) and key not in PLACEHOLDER_API_KEYS


settings = Settings()
