from app.schemas.remix import (
    RemixRequest,
    RemixResponse,
    RemixTypeInfo,
    RemixTypesResponse,
)
from app.schemas.saved_tweet import (
    SaveTweetRequest,
    SaveTweetResponse,
    SavedTweetResponse,
    SavedTweetsListResponse,
    DeleteTweetResponse,
)

__all__ = [
    "RemixRequest",
    "RemixResponse",
    "RemixTypeInfo",
    "RemixTypesResponse",
    "SaveTweetRequest",
    "SaveTweetResponse",
    "SavedTweetResponse",
    "SavedTweetsListResponse",
    "DeleteTweetResponse",
]
