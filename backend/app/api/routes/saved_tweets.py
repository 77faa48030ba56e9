"""
Saved tweets API routes.
"""
from fastapi import APIRouter, Depends

from app.api.dependencies.services import get_saved_tweets_service
from app.schemas.saved_tweet import (
    SaveTweetRequest,
    SaveTweetResponse,
    SavedTweetResponse,
    SavedTweetsListResponse,
    DeleteTweetResponse
)
from app.services.saved_tweets_service import SavedTweetsService


router = APIRouter(prefix="/api", tags=["saved-tweets"])


@router.post("/save-tweet", response_model=SaveTweetResponse)
async def save_tweet(
    request: SaveTweetRequest,
    service: SavedTweetsService = Depends(get_saved_tweets_service)
) -> SaveTweetResponse:
    """
    Save a generated tweet (1-280 characters).

    - tweetType defaults to "unique"
    - Returns the id assigned by the database
    """
    tweet_id = await service.save_tweet(request.content, request.tweet_type)
    return SaveTweetResponse(id=tweet_id, message="Tweet saved successfully")


@router.get("/saved-tweets", response_model=SavedTweetsListResponse)
async def get_saved_tweets(
    service: SavedTweetsService = Depends(get_saved_tweets_service)
) -> SavedTweetsListResponse:
    """
    Get all saved tweets, newest first.
    """
    tweets = await service.list_tweets()
    return SavedTweetsListResponse(
        tweets=[SavedTweetResponse.model_validate(tweet) for tweet in tweets]
    )


@router.delete("/saved-tweets/{tweet_id}", response_model=DeleteTweetResponse)
async def delete_saved_tweet(
    tweet_id: str,
    service: SavedTweetsService = Depends(get_saved_tweets_service)
) -> DeleteTweetResponse:
    """
    Delete a saved tweet.

    - 400 if the id is not a positive integer
    - 404 if no tweet has that id
    """
    await service.delete_tweet(tweet_id)
    return DeleteTweetResponse(message="Tweet deleted successfully")
