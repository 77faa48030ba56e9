"""
Error taxonomy shared by the remix gateway and the saved tweets store.

Each error carries the HTTP status it maps to, a message that is safe to show
to any client, and an optional detail string that is only exposed outside
production.
"""
from typing import Optional


class RemixerError(Exception):
    """Base class for all application errors."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, detail: Optional[str] = None):
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)


class InvalidInput(RemixerError):
    """Client sent a missing or malformed field."""
    status_code = 400
    default_message = "Invalid input"


class ConfigurationError(RemixerError):
    """Deployment is missing required configuration."""
    status_code = 500
    default_message = "Server is not configured correctly"


class AuthError(RemixerError):
    """Upstream rejected our credential."""
    status_code = 401
    default_message = "Invalid API key"


class RateLimited(RemixerError):
    """Upstream throttled the request."""
    status_code = 429
    default_message = "Rate limit exceeded. Please try again later."


class UpstreamError(RemixerError):
    """Completion service or transport failure."""
    status_code = 500
    default_message = "Failed to remix content"


class NotFound(RemixerError):
    """Referenced record does not exist."""
    status_code = 404
    default_message = "Not found"


class StorageError(RemixerError):
    """Persistence engine failure."""
    status_code = 500
    default_message = "Database error"
