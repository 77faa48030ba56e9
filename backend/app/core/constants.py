"""
Centralized constants for the application.
"""
from enum import Enum


class RemixType(str, Enum):
    """Supported remix (text transformation) types."""
    IMPROVE = "improve"
    SUMMARIZE = "summarize"
    EXPAND = "expand"
    CASUAL = "casual"
    FORMAL = "formal"
    THREAD = "thread"
    UNIQUE = "unique"


DEFAULT_REMIX_TYPE = RemixType.IMPROVE


# AI Model defaults
class AIModels:
    """Default AI model configurations."""
    REMIX_MODEL = "gpt-3.5-turbo"
    REMIX_MAX_TOKENS = 1000
    REMIX_TEMPERATURE = 0.7


# Input limits
class TextLimits:
    """Length limits for remix input and saved tweets."""
    REMIX_MAX_CHARS = 10000
    TWEET_MAX_CHARS = 280
    TWEET_TYPE_MAX_CHARS = 50


DEFAULT_TWEET_TYPE = "unique"

# Values shipped in .env templates that must never reach the API
PLACEHOLDER_API_KEYS = frozenset({
    "your_openai_api_key_here",
    "your-openai-api-key",
    "sk-your-key-here",
})

# Largest value a signed 64-bit INTEGER column can hold
MAX_DB_INTEGER = 2 ** 63 - 1
