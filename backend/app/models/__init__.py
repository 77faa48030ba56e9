from app.models.saved_tweet import SavedTweet

__all__ = [
    "SavedTweet",
]
