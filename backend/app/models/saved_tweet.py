from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String

from app.core.constants import DEFAULT_TWEET_TYPE, TextLimits
from app.core.database import Base


class SavedTweet(Base):
    """A short generated post the user chose to keep."""

    __tablename__ = "saved_tweets"
    # AUTOINCREMENT keeps SQLite from reusing ids of deleted rows
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    content = Column(String(TextLimits.TWEET_MAX_CHARS), nullable=False)
    tweet_type = Column(String(TextLimits.TWEET_TYPE_MAX_CHARS), nullable=False, default=DEFAULT_TWEET_TYPE)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    def __repr__(self):
        return f"<SavedTweet {self.id} type={self.tweet_type}>"
