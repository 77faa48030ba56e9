"""
Service dependencies for FastAPI routes.

Routes get their services through these providers so tests can replace them
with app.dependency_overrides.
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings, settings
from app.core.database import get_db
from app.services.remix_service import RemixService
from app.services.saved_tweets_service import SavedTweetsService


def get_settings() -> Settings:
    """Return the process-wide settings built at startup."""
    return settings


def get_remix_service(config: Settings = Depends(get_settings)) -> RemixService:
    return RemixService(config=config)


def get_saved_tweets_service(db: AsyncSession = Depends(get_db)) -> SavedTweetsService:
    return SavedTweetsService(db)
