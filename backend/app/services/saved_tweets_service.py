"""
Saved Tweets Service for persisting, listing and deleting generated tweets.
"""
import logging
from typing import Any, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.constants import DEFAULT_TWEET_TYPE, MAX_DB_INTEGER, TextLimits
from app.core.exceptions import InvalidInput, NotFound, StorageError
from app.models.saved_tweet import SavedTweet
from app.utils.text import is_encodable

logger = logging.getLogger(__name__)


def parse_tweet_id(tweet_id: Any) -> int:
    """Parse a tweet id from a path segment or int; must be a positive integer."""
    if isinstance(tweet_id, bool):
        raise InvalidInput("Invalid tweet ID")
    if isinstance(tweet_id, int):
        parsed = tweet_id
    else:
        value = str(tweet_id).strip()
        if not value.isdecimal():
            raise InvalidInput("Invalid tweet ID")
        parsed = int(value)

    if parsed <= 0:
        raise InvalidInput("Invalid tweet ID")
    return parsed


class SavedTweetsService:
    """Service for managing saved tweets."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @staticmethod
    def validate(content: Any, tweet_type: Optional[str] = None) -> tuple[str, str]:
        """Return trimmed content and resolved tweet type, or raise InvalidInput."""
        if not isinstance(content, str) or not content.strip():
            raise InvalidInput("Tweet content is required")

        content = content.strip()
        if not is_encodable(content):
            raise InvalidInput("Tweet content must be valid UTF-8 text")

        if len(content) > TextLimits.TWEET_MAX_CHARS:
            raise InvalidInput(f"Tweet is too long (maximum {TextLimits.TWEET_MAX_CHARS} characters)")

        tweet_type = (tweet_type or "").strip() or DEFAULT_TWEET_TYPE
        if not is_encodable(tweet_type):
            raise InvalidInput("Tweet type must be valid UTF-8 text")
        if len(tweet_type) > TextLimits.TWEET_TYPE_MAX_CHARS:
            raise InvalidInput(f"Tweet type is too long (maximum {TextLimits.TWEET_TYPE_MAX_CHARS} characters)")

        return content, tweet_type

    async def save_tweet(self, content: Any, tweet_type: Optional[str] = None) -> int:
        """
        Save a new tweet and return its id.
        """
        content, tweet_type = self.validate(content, tweet_type)

        tweet = SavedTweet(content=content, tweet_type=tweet_type)
        try:
            self.db.add(tweet)
            await self.db.commit()
            await self.db.refresh(tweet)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to save tweet: {e}")
            raise StorageError("Failed to save tweet", detail=str(e))

        logger.info(f"Saved tweet {tweet.id} ({tweet.tweet_type})")
        return tweet.id

    async def list_tweets(self) -> List[SavedTweet]:
        """
        Get all saved tweets, newest first.
        """
        try:
            result = await self.db.execute(
                select(SavedTweet).order_by(SavedTweet.created_at.desc(), SavedTweet.id.desc())
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to list tweets: {e}")
            raise StorageError("Failed to fetch saved tweets", detail=str(e))

        return list(result.scalars().all())

    async def delete_tweet(self, tweet_id: Any) -> None:
        """
        Delete a saved tweet. Raises NotFound if no row matched.
        """
        tweet_id = parse_tweet_id(tweet_id)
        if tweet_id > MAX_DB_INTEGER:
            # Never issued: ids cannot exceed the column range
            raise NotFound("Tweet not found")

        try:
            result = await self.db.execute(
                delete(SavedTweet).where(SavedTweet.id == tweet_id)
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to delete tweet {tweet_id}: {e}")
            raise StorageError("Failed to delete tweet", detail=str(e))

        if result.rowcount == 0:
            raise NotFound("Tweet not found")

        logger.info(f"Deleted tweet {tweet_id}")
