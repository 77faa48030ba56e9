"""
Pydantic schemas for saved tweets.
"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SaveTweetRequest(BaseModel):
    """Schema for saving a tweet."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    content: Optional[str] = Field(None, description="Tweet text (1-280 characters)")
    tweet_type: Optional[str] = Field(None, description="Free-form category, defaults to 'unique'")


class SaveTweetResponse(BaseModel):
    success: bool = True
    id: int
    message: str


class SavedTweetResponse(BaseModel):
    """Schema for a persisted tweet."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    content: str
    tweet_type: str
    created_at: datetime


class SavedTweetsListResponse(BaseModel):
    tweets: List[SavedTweetResponse]


class DeleteTweetResponse(BaseModel):
    success: bool = True
    message: str
